# src/config/logging_config.py

"""Per-run logging configuration for the DESCU catalog core.

Every launch writes to its own file under ``logs/`` named after the
launch time (``logs/descu_20261019_153045.log``).  All ``descu.*``
loggers (store, filters, ranking, generator, session, cli) share it.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler(log_file: Path) -> logging.FileHandler:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT))
    return handler


def setup_logging(
    logs_dir: Path | None = None,
    console_level: int = logging.WARNING,
) -> Path:
    """Attach file and console handlers to the ``descu`` logger.

    Repeated calls keep the current run log, unless *logs_dir* names a
    different directory, in which case the file handler moves there.
    The console handler is only created by the first call.

    Args:
        logs_dir: Directory for the run log; defaults to
            ``Settings.LOGS_DIR``.
        console_level: Minimum level echoed to stderr.

    Returns:
        The :class:`~pathlib.Path` of the active log file.
    """
    root_logger = logging.getLogger("descu")
    root_logger.setLevel(logging.DEBUG)
    target_dir = (logs_dir or Settings.LOGS_DIR).absolute()

    current = next(
        (h for h in root_logger.handlers if isinstance(h, logging.FileHandler)),
        None,
    )
    if current is not None:
        current_file = Path(current.baseFilename)
        if logs_dir is None or current_file.parent == target_dir:
            return current_file
        root_logger.removeHandler(current)
        current.close()

    target_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = target_dir / f"descu_{stamp}.log"
    root_logger.addHandler(_file_handler(log_file))

    if not any(
        not isinstance(h, logging.FileHandler) for h in root_logger.handlers
    ):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(
            logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
        )
        root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialised, file=%s", log_file)
    return log_file
