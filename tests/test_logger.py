import json
import logging

from app.core.config import settings
from app.core.logger import JSONFormatter, build_logging_config


def test_json_formatter_includes_extra():
    record = logging.LogRecord("app.test", logging.INFO, __file__, 10, "created %s", (7,), None)
    record.resource_id = 7

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "created 7"
    assert payload["level"] == "INFO"
    assert payload["resource_id"] == 7


def test_console_only_when_file_logging_disabled(monkeypatch):
    monkeypatch.setattr(settings, "LOG_TO_FILE", False)
    config = build_logging_config()
    assert set(config["handlers"]) == {"console"}
    assert config["loggers"]["app"]["handlers"] == ["console"]


def test_file_handlers(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "LOG_TO_FILE", True)
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "logs"))
    config = build_logging_config()
    assert {"file_info", "file_error"} <= set(config["handlers"])
    assert (tmp_path / "logs").is_dir()
