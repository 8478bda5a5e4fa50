from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    EMPTY_FILE = "empty_file"
    PARSE_FAILURE = "parse_failure"
    IO_FAILURE = "io_failure"


class FileUtilError(Exception):
    """Raised by the I/O helpers. The path classifier never raises."""

    def __init__(self, kind: ErrorKind, message: str, path: Optional[str] = None, **context: Any):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path
        self.context: Dict[str, Any] = context

    def __str__(self) -> str:
        s = f"{self.kind.value}: {self.message}"
        if self.path:
            s += f" ({self.path})"
        return s

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "message": self.message, "path": self.path, **self.context}
