"""File logging setup for the pbbridge namespace.

The adapter's stderr is its only error channel, so nothing here ever adds a
console handler. Log records go to a rotating file when a log directory is
configured and are dropped otherwise.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

logger = logging.getLogger(__name__)

ROOT_LOGGER_NAME = "pbbridge"
LOG_FILE_NAME = "pbbridge.log"


def configure_file_logging(log_dir: Path, level: int = logging.INFO) -> Path:
    """Attach a rotating file handler to the ``pbbridge`` logger.

    Logs are written to ``{log_dir}/pbbridge.log`` (max 5MB per file, 3
    backups). Calling this again for the same file is a no-op, so both the
    bridge and each adapter process may call it on startup.

    Args:
        log_dir: Directory for the log file. Created if it doesn't exist.
        level: Logging level for the handler and the namespace logger.

    Returns:
        Path to the log file.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME
    log_file_resolved = log_file.resolve()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Use resolved paths for comparison to handle relative vs absolute paths
    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler):
            if Path(handler.baseFilename).resolve() == log_file_resolved:
                return log_file

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=3,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(process)d %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(file_handler)

    logger.debug("File logging configured: %s", log_file)
    return log_file
