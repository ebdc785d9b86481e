"""Tests for the structlog bootstrap."""

import structlog

from resourcefs.infrastructure import logging_setup


def test_configure_logging_once(monkeypatch):
    monkeypatch.setattr(logging_setup, "_LOG_CONFIGURED", False)

    assert logging_setup.configure_logging(level="DEBUG") is True
    assert logging_setup.is_logging_configured()
    assert logging_setup.configure_logging(level="DEBUG") is False

    structlog.reset_defaults()


def test_force_reconfigures_json(monkeypatch, capsys):
    monkeypatch.setattr(logging_setup, "_LOG_CONFIGURED", True)

    assert logging_setup.configure_logging(level="INFO", json_logs=True, force=True) is True
    structlog.get_logger().info("store_opened", kind="documents")

    out = capsys.readouterr().out
    assert '"event": "store_opened"' in out
    assert '"kind": "documents"' in out

    structlog.reset_defaults()


def test_settings_apply_logging_configuration(monkeypatch, capsys):
    from resourcefs.config import Settings

    monkeypatch.setattr(logging_setup, "_LOG_CONFIGURED", False)
    settings = Settings(_env_file=None, log_level="WARNING", log_json=True)

    assert settings.setup_logging() is True
    logger = structlog.get_logger()
    logger.info("hidden_event")
    logger.warning("shown_event")

    out = capsys.readouterr().out
    assert "hidden_event" not in out
    assert '"event": "shown_event"' in out

    structlog.reset_defaults()
