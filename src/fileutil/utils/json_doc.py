from __future__ import annotations
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Optional

from fileutil.core.errors import ErrorKind, FileUtilError
from fileutil.utils import config
from fileutil.utils.fs import PathLike, _fail, write_file

logger = logging.getLogger(__name__)

Modifier = Callable[[Any, Any], Any]

_lock = threading.Lock()


def append_json(file: PathLike, append_data: Any, modifier: Modifier) -> str:
    """
    Appends data to an existing JSON file.

    `modifier(document, append_data)` receives the loaded document and returns the
    document to save, which must be a JSON object or array. The whole
    read-modify-write runs under a process-wide lock.
    """
    path = str(file) if file is not None else ""
    if not callable(modifier):
        raise _fail(ErrorKind.INVALID_ARGUMENT, "Callable expected for parameter modifier", path or None)
    if not path:
        raise _fail(ErrorKind.EMPTY_INPUT, "Missing required parameter file")

    p = Path(path)
    with _lock:
        if not p.exists():
            raise _fail(ErrorKind.NOT_FOUND, "File does not exist", path)
        try:
            text = p.read_text(encoding="utf-8")
        except OSError as e:
            raise _fail(ErrorKind.IO_FAILURE, f"Read failed: {e}", path) from e
        if not text.strip():
            raise _fail(ErrorKind.EMPTY_FILE, "File is empty", path)
        try:
            doc = json.loads(text)
        except json.JSONDecodeError as e:
            raise _fail(ErrorKind.PARSE_FAILURE, f"Error parsing JSON file: {e.msg}",
                        path, line=e.lineno, column=e.colno) from e

        result = modifier(doc, append_data)
        if not isinstance(result, (dict, list)):
            raise _fail(ErrorKind.INVALID_ARGUMENT,
                        f"JSON object expected from modifier, got {type(result).__name__}", path)

        line = json.dumps(result, ensure_ascii=False, indent=config.JSON_INDENT)
        write_file(p, line, "utf-8")
    logger.debug(f"json.appended: path={path}")
    return path


def append_to_list(key: Optional[str] = None) -> Modifier:
    """
    Modifier for the common case: push `append_data` onto a list.
    key=None appends to a root-level array, otherwise to document[key] (created if missing).
    """
    def _modifier(doc: Any, append_data: Any) -> Any:
        if key is None:
            target = doc
        else:
            if not isinstance(doc, dict):
                raise FileUtilError(ErrorKind.INVALID_ARGUMENT, f"Object expected to append under key {key!r}")
            target = doc.setdefault(key, [])
        if not isinstance(target, list):
            raise FileUtilError(ErrorKind.INVALID_ARGUMENT,
                                f"List expected at {key or 'document root'}, got {type(target).__name__}")
        target.append(append_data)
        return doc
    return _modifier
