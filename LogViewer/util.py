import logging
import re
from pathlib import Path
from typing import Optional

_NON_ALNUM_RE = re.compile(r'[^a-zA-Z0-9]')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_log_dir: Optional[Path] = None


def sanitize_identifier(name: str) -> str:
    """Replace every non-alphanumeric character of name with '_'"""
    return _NON_ALNUM_RE.sub('_', name)


def display_name(file_path: str) -> str:
    """Sanitized file name used in window titles"""
    return sanitize_identifier(Path(file_path).name or 'log')


def configure_logging(log_dir: Path) -> None:
    """Set the directory new component loggers write into"""
    global _log_dir
    _log_dir = Path(log_dir)


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Named logger writing to <log_dir>/<name>.log

    The terminal belongs to the UI, so component logs go to files. Before
    configure_logging() is called the logger only propagates to the root.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if _log_dir is not None and not logger.handlers:
        try:
            _log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(_log_dir / f"{name.lower()}.log", encoding='utf-8')
        except OSError:
            return logger
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
