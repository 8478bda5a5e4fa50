"""Global settings for file I/O behavior (read from the environment)."""
from __future__ import annotations
import os as _os

# Default text encoding used by write_file() when none is given
DEFAULT_ENCODING: str = "utf-8"

# Indentation for documents rewritten by append_json (None = compact)
JSON_INDENT: int | None = None

# Number of uuid hex chars in get_unique_filename() results
UNIQUE_TOKEN_LENGTH: int = 6

# --- Logging (CLI) ---
LOG_LEVEL: str = "INFO"
# Empty string disables the file handler
LOG_FILE: str = "logs/fileutil.log"


def load() -> None:
    """(Re)read the settings above from the environment. The CLI calls this after loading .env."""
    global DEFAULT_ENCODING, JSON_INDENT, UNIQUE_TOKEN_LENGTH, LOG_LEVEL, LOG_FILE
    DEFAULT_ENCODING = _os.getenv("FILEUTIL_ENCODING", "utf-8")
    _indent = _os.getenv("FILEUTIL_JSON_INDENT")
    JSON_INDENT = int(_indent) if _indent else None
    UNIQUE_TOKEN_LENGTH = int(_os.getenv("FILEUTIL_UNIQUE_TOKEN_LENGTH", "6"))
    LOG_LEVEL = _os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE = _os.getenv("FILEUTIL_LOG_FILE", "logs/fileutil.log")


load()
