"""Unit tests for structured logging helpers."""

import structlog
from structlog.testing import capture_logs

from ceramic_catalog.core.config import Settings
from ceramic_catalog.core.logging import (
    add_correlation_id,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
)


def test_new_correlation_id_format():
    cid = new_correlation_id()

    assert cid.startswith("cid_")
    assert len(cid) == 16


def test_add_correlation_id_keeps_existing():
    event = add_correlation_id(None, "info", {"correlation_id": "cid_fixed"})

    assert event["correlation_id"] == "cid_fixed"


def test_add_correlation_id_generates_missing():
    event = add_correlation_id(None, "info", {})

    assert event["correlation_id"].startswith("cid_")


def test_bind_and_clear_context():
    bind_correlation_id("cid_request")
    assert structlog.contextvars.get_contextvars()["correlation_id"] == "cid_request"

    clear_context()
    assert "correlation_id" not in structlog.contextvars.get_contextvars()


def test_configure_logging_json_renderer():
    configure_logging(Settings(_env_file=None, environment="production", log_format="json"))

    try:
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["cache_logger_on_first_use"] is True
    finally:
        structlog.reset_defaults()


def test_configure_logging_console_in_development():
    configure_logging(Settings(_env_file=None, environment="development"))

    try:
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
    finally:
        structlog.reset_defaults()


def test_get_logger_logs_with_context():
    logger = get_logger("ceramic_catalog.domain.services.client_service")

    with capture_logs() as logs:
        logger.info("Client created", client_id="c1")

    assert logs == [{"event": "Client created", "client_id": "c1", "log_level": "info"}]


def test_get_logger_default_name():
    with capture_logs() as logs:
        get_logger().warning("Delete blocked")

    assert logs[0]["event"] == "Delete blocked"
