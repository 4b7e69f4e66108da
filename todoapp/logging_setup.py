import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional


_LOG_FILE_NAME = "todoapp.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _build_handlers(log_dir: Path) -> List[logging.Handler]:
    log_dir.mkdir(parents=True, exist_ok=True)
    return [
        logging.StreamHandler(sys.stdout),
        RotatingFileHandler(
            log_dir / _LOG_FILE_NAME,
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        ),
    ]


def setup_logging(debug: bool = False, log_dir: Optional[Path] = None) -> None:
    """Send app logs to stdout and a rotating file. Later calls are ignored."""
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todo_logging_configured", False):
        return

    formatter = logging.Formatter(_FORMAT)
    root_logger.handlers.clear()
    for handler in _build_handlers(Path(log_dir or "./data/logs")):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    root_logger._todo_logging_configured = True
