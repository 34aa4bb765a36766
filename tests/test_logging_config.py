import logging

from recommendations_api.app.core.logging_config import setup_logging


def test_setup_logging_adds_console_and_file_handlers(tmp_path, monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    logfile = tmp_path / "api.log"

    setup_logging("debug", str(logfile))

    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    for handler in root.handlers:
        handler.close()


def test_setup_logging_runs_once(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    setup_logging("INFO")

    assert root.handlers == [existing]


def test_unknown_level_falls_back_to_info(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    setup_logging("chatty")

    assert root.level == logging.INFO
