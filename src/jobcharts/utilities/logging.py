import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from jobcharts.utilities.env.parsing import _env_flag

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "JOBCHARTS_LOG_DIR"
LOG_TO_FILE_ENV_VAR = "JOBCHARTS_LOG_TO_FILE"
DEFAULT_LOG_SUBDIR = Path(".jobcharts") / "logs"
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5 MiB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_log_directory() -> Path:
    """Return the directory where chart diagnostics should be written."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def _log_filename(name: str) -> str:
    # jobcharts.layout.flow -> jobcharts_layout_flow.log
    stem = name.replace(os.sep, "_").replace("/", "_").replace(".", "_")
    return f"{stem or 'root'}.log"


def _configure_logger(logger: logging.Logger, log_level: str) -> None:
    level = getattr(logging, log_level, logging.INFO)
    logger.setLevel(level)

    if logger.handlers:
        # Logger already configured elsewhere; respect existing handlers.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if _env_flag(LOG_TO_FILE_ENV_VAR, default=True):
        handlers.append(
            RotatingFileHandler(
                _resolve_log_directory() / _log_filename(logger.name),
                maxBytes=MAX_LOG_BYTES,
                backupCount=BACKUP_COUNT,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured with stream and (optionally) rolling file handlers.

    Records still propagate so that test harnesses capturing the root logger
    see data-shape warnings.
    """

    log_level = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    logger = logging.getLogger(name)
    _configure_logger(logger, log_level)
    return logger
