"""Name canonicalization for cache keys.

A canonical name is the lower-cased, whitespace-trimmed form of a database or
table name with every escape character removed, so that ``"`Default `"`` and
``"default"`` address the same entry.

A fully-qualified table key is the canonical database name immediately
followed by the canonical table name. There is no separator, so
``("a", "bc")`` and ``("ab", "c")`` produce the same key. Catalog names are
alphanumeric/underscore in practice and the key format is kept as is.
"""

from typing import Any

from catalog_cache.models.errors import InvalidArgumentError

DEFAULT_ESCAPE_CHAR = "`"


def _require_name(name: Any, argument: str) -> str:
    if name is None:
        raise InvalidArgumentError(f"{argument} must not be None", details={"argument": argument})
    if not isinstance(name, str):
        raise InvalidArgumentError(
            f"{argument} must be a string, got {type(name).__name__}",
            details={"argument": argument},
        )
    return name


def canonicalize(
    name: str,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    *,
    argument: str = "name",
) -> str:
    """Return the canonical form of a database or table name.

    Args:
        name: Raw name as supplied by the caller.
        escape_char: Identifier escape character to strip.
        argument: Argument name reported if ``name`` is invalid.

    Returns:
        str: Lower-cased, trimmed name with escape characters removed.

    Raises:
        InvalidArgumentError: If ``name`` is None or not a string.

    Example:
        >>> canonicalize(" `Sales_DB` ")
        'sales_db'
    """
    name = _require_name(name, argument)
    # Strip escapes before trimming so "` db`" loses its inner space too.
    return name.lower().replace(escape_char, "").strip()


def fully_qualified_table_key(
    db_name: str,
    tbl_name: str,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
) -> str:
    """Build the table store key for a database/table pair.

    Args:
        db_name: Raw database name.
        tbl_name: Raw table name.
        escape_char: Identifier escape character to strip.

    Returns:
        str: Canonical database name concatenated with canonical table name.

    Raises:
        InvalidArgumentError: If either name is None or not a string.
    """
    canonical_db = canonicalize(db_name, escape_char, argument="db_name")
    canonical_tbl = canonicalize(tbl_name, escape_char, argument="tbl_name")
    return canonical_db + canonical_tbl
