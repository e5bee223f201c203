from __future__ import annotations

import logging
from pathlib import Path

from music_library_api.app.core.logging_config import setup_logging


def _file_handlers(log_path: Path):
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_path.resolve()
    ]


def test_log_file_is_attached_when_root_already_has_handlers(tmp_path):
    root = logging.getLogger()
    assert root.handlers
    log_path = tmp_path / "service.log"

    try:
        setup_logging("INFO", str(log_path))
        setup_logging("INFO", str(log_path))
        handlers = _file_handlers(log_path)
        assert len(handlers) == 1

        logging.getLogger("music_library_api.test").warning("written to file")
        handlers[0].flush()
        assert "written to file" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in _file_handlers(log_path):
            root.removeHandler(handler)
            handler.close()
