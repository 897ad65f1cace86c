"""Structured Logging — tests for the JSON formatter and handler lifecycle.

Tests cover:
    - JSONFormatter emits the base keys plus extras that are set
    - setup_logging installs console + optional level-split file handlers
    - shutdown_logging detaches exactly what setup_logging installed
"""

import json
import logging

from app.infrastructure.observability import (
    JSONFormatter, get_handler_logger, setup_logging, shutdown_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "delivery_api.addresses", logging.WARNING, __file__, 1,
        "Address not found.", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_base_keys():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "delivery_api.addresses"
    assert log["message"] == "Address not found."
    assert "timestamp" in log
    assert "error_code" not in log


def test_json_formatter_includes_set_extras():
    log = json.loads(JSONFormatter().format(
        _record(error_code="RESOURCE_NOT_FOUND", entity="Address", entity_id=3),
    ))
    assert log["error_code"] == "RESOURCE_NOT_FOUND"
    assert log["entity"] == "Address"
    assert log["entity_id"] == 3


def test_file_handlers_split_by_level(tmp_path):
    info_file = tmp_path / "info.log"
    error_file = tmp_path / "error.log"
    handlers = setup_logging(
        "INFO", "text", info_file=str(info_file), error_file=str(error_file),
    )
    try:
        assert len(handlers) == 3
        logger = get_handler_logger("products")
        logger.info("Product 1 created")
        logger.error("Database unavailable")
    finally:
        shutdown_logging(handlers)

    info_text = info_file.read_text(encoding="utf-8")
    error_text = error_file.read_text(encoding="utf-8")
    assert "Product 1 created" in info_text
    assert "Database unavailable" in info_text
    assert "Product 1 created" not in error_text
    assert "Database unavailable" in error_text


def test_shutdown_detaches_installed_handlers():
    handlers = setup_logging("DEBUG", "json")
    assert all(h in logging.root.handlers for h in handlers)
    shutdown_logging(handlers)
    assert not any(h in logging.root.handlers for h in handlers)


def test_handler_logger_namespace():
    assert get_handler_logger("deliveries").name == "delivery_api.deliveries"
