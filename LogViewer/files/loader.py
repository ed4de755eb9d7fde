"""
Log File Loader Module - Read a log file into table data

Handles:
- Reading file text (undecodable bytes replaced)
- Tokenizing into headers and rows
- Reporting read failures as LogFileReadError
"""
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import BaseModel, ConfigDict

from LogViewer.core.tokenizer import LogTable, tokenize
from LogViewer.util import get_logger


class LogFileReadError(Exception):
    """The log file could not be read"""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not read '{self.path}': {reason}")


class LogData(BaseModel):
    """Tokenized content of one log file, with the path it came from"""
    model_config = ConfigDict(frozen=True)

    headers: List[str]
    rows: List[List[str]]
    file_path: str

    @classmethod
    def from_table(cls, table: LogTable, file_path: str) -> "LogData":
        return cls(
            headers=list(table.headers),
            rows=[list(row) for row in table.rows],
            file_path=file_path,
        )

    def to_table(self) -> LogTable:
        return LogTable(
            headers=tuple(self.headers),
            rows=tuple(tuple(row) for row in self.rows),
        )

    @property
    def is_empty(self) -> bool:
        return not self.headers


def is_log_file(path: Union[str, Path], extensions: Iterable[str] = (".log",)) -> bool:
    """True if path has one of the given extensions (case-insensitive)"""
    suffix = Path(path).suffix.lower()
    return any(suffix == ext.lower() for ext in extensions)


def read_log_file(path: Union[str, Path]) -> LogData:
    """
    Read and tokenize a log file

    An empty or all-blank file is not an error; it gives LogData without
    headers.

    Args:
        path: File to read

    Returns:
        LogData for the file

    Raises:
        LogFileReadError: The path is missing, a directory, or unreadable
    """
    logger = get_logger('FileLoader')
    file_path = Path(path).expanduser()

    if not file_path.exists():
        raise LogFileReadError(file_path, "file not found")
    if file_path.is_dir():
        raise LogFileReadError(file_path, "is a directory")

    try:
        with open(file_path, 'r', encoding='utf-8', errors='replace') as f:
            raw_text = f.read()
    except OSError as e:
        logger.error(f"Error reading log file {file_path}: {e}")
        raise LogFileReadError(file_path, e.strerror or str(e)) from e

    table = tokenize(raw_text)
    logger.info(f"Loaded {file_path}: {table.column_count} columns, {len(table)} rows")
    return LogData.from_table(table, str(file_path))
