import logging
import uuid

from justmyluck.platform import logger as logger_module
from justmyluck.platform.config import Settings


def test_log_file_path_from_settings():
    settings = Settings(LOG_DIR="/var/log/justmyluck", LOG_FILE="signups.log")
    assert str(settings.log_file_path) == "/var/log/justmyluck/signups.log"


def test_get_logger_writes_to_configured_file(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module.settings, "LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(logger_module.settings, "LOG_FILE", "test.log")
    name = f"test-{uuid.uuid4().hex[:8]}"

    log = logger_module.get_logger(name)
    log.info("hello")

    file_handlers = [h for h in log.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].baseFilename == str(tmp_path / "logs" / "test.log")
    file_handlers[0].flush()
    assert "hello" in (tmp_path / "logs" / "test.log").read_text()

    for handler in list(log.handlers):
        handler.close()
        log.removeHandler(handler)
