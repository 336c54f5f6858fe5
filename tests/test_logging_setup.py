import logging

import logging_setup
from logging_setup import _parse_level, get_logger


def test_parse_level_names_and_numbers():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("30") == 30
    assert _parse_level(logging.ERROR) == logging.ERROR


def test_parse_level_env_fallback(monkeypatch):
    monkeypatch.setenv("SALES_TRACKER_LOG_LEVEL", "WARNING")
    assert _parse_level(None) == logging.WARNING
    monkeypatch.delenv("SALES_TRACKER_LOG_LEVEL")
    assert _parse_level(None) == logging.INFO


def test_parse_level_unknown_name_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("SALES_TRACKER_LOG_LEVEL", "verbose")
    assert _parse_level(None) == logging.INFO
    assert _parse_level("chatty") == logging.INFO


def test_get_logger_is_namespaced():
    assert get_logger("store").name == "sales_tracker.store"


def test_configure_logging_once(monkeypatch):
    root = logging.getLogger("sales_tracker")
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "propagate", True)
    monkeypatch.setattr(root, "level", logging.NOTSET)

    logging_setup.configure_logging("DEBUG")
    logging_setup.configure_logging("ERROR")

    stream_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
    assert root.level == logging.DEBUG
    assert root.propagate is False
