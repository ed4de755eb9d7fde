"""Configuration settings for the log viewer."""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

CONFIG_FILE_NAME = "config.json"


def default_data_dir() -> Path:
    """~/.config/logviewer, or $LOGVIEWER_HOME when set"""
    override = os.environ.get("LOGVIEWER_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "logviewer"


class ViewerConfig(BaseModel):
    data_dir: Path = Field(default_factory=default_data_dir)
    database_name: str = "logviewer.db"
    log_dir_name: str = "app_log"
    max_recent_files: int = 5
    # Widths are terminal cells in the TUI
    min_column_width: int = 8
    default_table_width: int = 120
    width_step: int = 4
    search_debounce: float = 0.3
    default_theme: str = "auto"
    auto_reload: bool = True
    log_extensions: List[str] = Field(default_factory=lambda: [".log"])

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.database_name

    @property
    def log_dir(self) -> Path:
        return self.data_dir / self.log_dir_name

    @property
    def config_file(self) -> Path:
        return self.data_dir / CONFIG_FILE_NAME


def load_config(path: Optional[Path] = None) -> ViewerConfig:
    """
    Load configuration from a JSON file merged over the defaults.

    A missing file is created with the defaults. An unreadable or invalid
    file is ignored and the defaults are used instead.
    """
    defaults = ViewerConfig()
    config_file = Path(path) if path else defaults.config_file

    if not config_file.exists():
        save_config(defaults, config_file)
        return defaults

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            stored = json.load(f)
        if not isinstance(stored, dict):
            raise ValueError(f"expected a JSON object, got {type(stored).__name__}")
        merged = defaults.model_dump()
        merged.update(stored)
        return ViewerConfig(**merged)
    except (ValueError, ValidationError, TypeError, OSError) as e:
        logging.getLogger(__name__).warning(f"Error loading config {config_file}: {e}. Using defaults.")
        return defaults


def save_config(config: ViewerConfig, path: Optional[Path] = None) -> None:
    config_file = Path(path) if path else config.config_file
    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w', encoding='utf-8') as f:
            f.write(config.model_dump_json(indent=2))
    except OSError as e:
        logging.getLogger(__name__).warning(f"Could not save config {config_file}: {e}")
