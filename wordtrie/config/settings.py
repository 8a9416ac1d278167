"""
Central configuration for wordtrie.

All tunables live here. The trie and cursor themselves take no
settings; only the word-list loader and the CLI read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path


def _project_root() -> Path:
    """Walk up from this file to find the project root (where pyproject.toml lives)."""
    current = Path(__file__).resolve().parent
    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent
    # Fallback: two levels up from config/settings.py
    return Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class WordListSettings:
    """Settings for loading line-delimited word lists."""

    # File name of the default word list, looked up under the data directory
    default_name: str = "words.txt"

    # Text encoding of word-list files
    encoding: str = "utf-8"


@dataclass(frozen=True)
class CompletionSettings:
    """Settings for the interactive completion session."""

    # Maximum matches printed per listing (0 = no cap)
    max_display: int = 50


@dataclass(frozen=True)
class LoggingSettings:
    """Settings for console and file logging."""

    # Level name applied to the "wordtrie" logger
    level: str = "INFO"

    # Log file name, created under Settings.logs_dir
    log_file: str = "wordtrie.log"

    # Rotate the log file at this size, keeping this many old files
    max_bytes: int = 10 * 1024 * 1024
    backup_count: int = 5


@dataclass
class Settings:
    """
    Top-level settings container.

    Usage:
        settings = get_settings()
        print(settings.word_list.encoding)
    """

    project_root: Path = field(default_factory=_project_root)
    word_list: WordListSettings = field(default_factory=WordListSettings)
    completion: CompletionSettings = field(default_factory=CompletionSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @property
    def data_dir(self) -> Path:
        """Root directory for runtime data (word lists, logs)."""
        return self.project_root / "data"

    @property
    def word_list_path(self) -> Path:
        """Default word list used when none is given on the command line."""
        return self.data_dir / self.word_list.default_name

    @property
    def logs_dir(self) -> Path:
        """Root directory for log files."""
        return self.data_dir / "logs"

    def ensure_dirs(self) -> None:
        """Create the data directories if they don't exist."""
        self.logs_dir.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Returns the singleton Settings instance.

    Call this instead of constructing Settings() directly so the entire
    application shares one config object.
    """
    return Settings()
