"""Unit tests for logging configuration."""

import io
import json
import logging

import pytest

from catalog_cache.config.settings import ObservabilityConfig
from catalog_cache.observability.logging import (
    JSONFormatter,
    TextFormatter,
    configure_logging,
    configure_logging_from_config,
)


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers after a test reconfigures them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(msg: str = "Invalidated %s", *args, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="catalog_cache.cache.metadata_cache",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args or ("_okera_sales",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Tests for JSONFormatter and TextFormatter."""

    def test_json_formatter(self) -> None:
        """Test JSON output structure and extra fields."""
        output = json.loads(JSONFormatter().format(_record(db_name="_okera_sales")))

        assert output["level"] == "INFO"
        assert output["logger"] == "catalog_cache.cache.metadata_cache"
        assert output["message"] == "Invalidated _okera_sales"
        assert output["extra"] == {"db_name": "_okera_sales"}

    def test_text_formatter(self) -> None:
        """Test readable output."""
        output = TextFormatter().format(_record())
        assert "[INFO] catalog_cache.cache.metadata_cache - Invalidated _okera_sales" in output


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_json_output(self) -> None:
        """Test that records reach the stream as JSON."""
        stream = io.StringIO()
        configure_logging(level="DEBUG", log_format="json", stream=stream)

        logging.getLogger("catalog_cache.test").debug("hello")

        assert json.loads(stream.getvalue())["message"] == "hello"
        assert logging.getLogger().level == logging.DEBUG

    @pytest.mark.usefixtures("restore_root_logger")
    def test_from_config(self) -> None:
        """Test configuring from ObservabilityConfig."""
        configure_logging_from_config(ObservabilityConfig(log_level="WARNING", log_format="text"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, TextFormatter)
