"""
Recent Files Module - Most-recently-opened log files

Handles:
- Bounded list, most recent first
- Deduplication by exact path string
- Clearing the history
"""
import time
from pathlib import Path
from typing import List, Union

from LogViewer.database.database import Database
from LogViewer.util import get_logger

DEFAULT_LIMIT = 5


class RecentFiles:
    """Recently opened files persisted in the settings database"""

    def __init__(self, db_path: Union[str, Path], limit: int = DEFAULT_LIMIT):
        """
        Args:
            db_path: sqlite database file
            limit: Number of paths kept
        """
        self.db_path = Path(db_path)
        self.limit = limit
        self.logger = get_logger('RecentFiles')
        with Database(self.db_path) as db:
            db.create_tables()

    def load(self) -> List[str]:
        """Stored paths, most recent first"""
        with Database(self.db_path) as db:
            rows = db.read_all("recent_files", order_by="opened_at DESC, rowid DESC")
        return [row[0] for row in rows[:self.limit]]

    def add(self, path: str) -> List[str]:
        """
        Move path to the front of the list, dropping the oldest past the limit

        Returns:
            The updated list
        """
        with Database(self.db_path) as db:
            # Re-insert rather than update so rowid breaks timestamp ties
            db.delete("recent_files", "path = ?", (path,))
            db.write("recent_files", {"path": path, "opened_at": time.time()})
            rows = db.read_all("recent_files", order_by="opened_at DESC, rowid DESC")
            for stale in rows[self.limit:]:
                db.delete("recent_files", "path = ?", (stale[0],))

        self.logger.info(f"Added recent file: {path}")
        return [row[0] for row in rows[:self.limit]]

    def remove(self, path: str) -> None:
        with Database(self.db_path) as db:
            db.delete("recent_files", "path = ?", (path,))

    def clear(self) -> None:
        """Forget every recent file"""
        with Database(self.db_path) as db:
            db.delete("recent_files")
        self.logger.info("Recent files cleared")
