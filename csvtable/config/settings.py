"""
Configuration settings for table I/O.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when loaded, so a typo in an encoding name fails at startup instead of halfway
through writing a file.

**Environment variables**:
  - CSVTABLE_ENCODING: Text encoding for reading and writing (default "utf-8").
  - CSVTABLE_LINE_ENDING: "LF" or "CRLF" for written files (default "LF").
  - CSVTABLE_DATA_DIR: Default directory used by action scripts (default "data").

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import codecs
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from csvtable.data.schemas import LINE_TERMINATOR, SUPPORTED_LINE_TERMINATORS


# Load .env from project root (no-op if the file does not exist)
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / ".env")


# Names accepted in CSVTABLE_LINE_ENDING
LINE_ENDINGS = {
    "LF": "\n",
    "CRLF": "\r\n",
}


@dataclass(frozen=True)
class TableSettings:
    """
    Configuration for reading and writing delimited tables.

    Attributes:
        encoding: Text encoding used to open files (default "utf-8").
                 Must be a codec name known to Python.
        line_terminator: String written after every line (default "\\n").
                        Must be "\\n" or "\\r\\n". Reading accepts both
                        regardless of this setting.
        data_dir: Base directory action scripts resolve relative paths
                 against (default "data").
    """
    encoding: str = "utf-8"
    line_terminator: str = LINE_TERMINATOR
    data_dir: Path = field(default_factory=lambda: Path("data"))

    def __post_init__(self):
        """Validate settings after initialization."""
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(
                f"Unknown encoding: {self.encoding!r}. "
                "Set CSVTABLE_ENCODING to a valid codec name (e.g. utf-8, latin-1)."
            )
        if self.line_terminator not in SUPPORTED_LINE_TERMINATORS:
            raise ValueError(
                f"line_terminator must be one of {SUPPORTED_LINE_TERMINATORS!r}, "
                f"got: {self.line_terminator!r}"
            )

    @classmethod
    def from_env(cls) -> "TableSettings":
        """
        Load table settings from environment variables.

        Returns:
            TableSettings object with values loaded from environment.

        Raises:
            ValueError: If CSVTABLE_LINE_ENDING is not LF/CRLF, or
                       CSVTABLE_ENCODING is not a known codec.

        Usage example:
            >>> # In .env file:
            >>> # CSVTABLE_ENCODING=latin-1
            >>> # CSVTABLE_LINE_ENDING=CRLF
            >>>
            >>> settings = TableSettings.from_env()
            >>> settings.line_terminator
            '\\r\\n'
        """
        encoding = os.getenv("CSVTABLE_ENCODING", "utf-8")
        line_ending = os.getenv("CSVTABLE_LINE_ENDING", "LF").strip().upper()
        data_dir = os.getenv("CSVTABLE_DATA_DIR", "data")

        if line_ending not in LINE_ENDINGS:
            raise ValueError(
                f"CSVTABLE_LINE_ENDING must be one of {sorted(LINE_ENDINGS)}, "
                f"got: {line_ending}"
            )

        return cls(
            encoding=encoding,
            line_terminator=LINE_ENDINGS[line_ending],
            data_dir=Path(data_dir),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings object.

    **Usage pattern**:
      ```python
      from csvtable.config.settings import get_settings

      encoding = get_settings().table.encoding
      ```

    Attributes:
        table: Table I/O settings.
    """
    table: TableSettings = field(default_factory=TableSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load global settings from environment variables."""
        return cls(table=TableSettings.from_env())


_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached. Tests
    can bypass this by passing explicit arguments, or call reset_settings()
    after changing environment variables.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("CSVTABLE_LINE_ENDING", "CRLF")
          reset_settings()
          assert get_settings().table.line_terminator == "\\r\\n"
      ```
    """
    global _default_settings
    _default_settings = None
