"""Admission policy deciding which database namespaces are cached."""

from catalog_cache.config.settings import CacheConfig

DEFAULT_DATABASE_NAME = "default"
SYSTEM_DATABASE_NAME = "okera_system"
INTERNAL_DB_PREFIX = "_okera"
CRAWLER_DB_PREFIX = "_okera_crawler"


class AdmissionPolicy:
    """Decide whether a canonical database name may be cached.

    Rules are evaluated in order and the first match wins:

    1. the default or system database is cacheable;
    2. a name under the crawler prefix is not cacheable;
    3. a name under the internal prefix is cacheable;
    4. anything else is not cacheable.

    The crawler prefix extends the internal prefix, which is why it is
    checked first.

    Example:
        >>> policy = AdmissionPolicy()
        >>> policy.is_cacheable("_okera_reports")
        True
        >>> policy.is_cacheable("_okera_crawler_tmp")
        False
    """

    def __init__(
        self,
        default_db_name: str = DEFAULT_DATABASE_NAME,
        system_db_name: str = SYSTEM_DATABASE_NAME,
        internal_db_prefix: str = INTERNAL_DB_PREFIX,
        crawler_db_prefix: str = CRAWLER_DB_PREFIX,
    ) -> None:
        # Compared against canonical names, so matching is case-insensitive.
        self.default_db_name = default_db_name.strip().lower()
        self.system_db_name = system_db_name.strip().lower()
        self.internal_db_prefix = internal_db_prefix.strip().lower()
        self.crawler_db_prefix = crawler_db_prefix.strip().lower()

    @classmethod
    def from_config(cls, config: CacheConfig) -> "AdmissionPolicy":
        """Build a policy from the naming constants in ``config``."""
        return cls(
            default_db_name=config.default_db_name,
            system_db_name=config.system_db_name,
            internal_db_prefix=config.internal_db_prefix,
            crawler_db_prefix=config.crawler_db_prefix,
        )

    def is_cacheable(self, canonical_db_name: str) -> bool:
        """Check whether a database namespace is admitted into the cache.

        Args:
            canonical_db_name: Database name already passed through
                :func:`~catalog_cache.cache.naming.canonicalize`.

        Returns:
            bool: True if entries for this database may be stored.
        """
        if canonical_db_name in (self.default_db_name, self.system_db_name):
            return True
        if canonical_db_name.startswith(self.crawler_db_prefix):
            return False
        if canonical_db_name.startswith(self.internal_db_prefix):
            return True
        return False

    def __repr__(self) -> str:
        return (
            f"AdmissionPolicy(default={self.default_db_name!r}, system={self.system_db_name!r}, "
            f"internal={self.internal_db_prefix!r}, crawler={self.crawler_db_prefix!r})"
        )
