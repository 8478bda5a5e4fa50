"""Extension -> IANA media type lookup."""
from __future__ import annotations
import mimetypes
import posixpath
from typing import Dict, Literal, Union

MimeResult = Union[str, Literal[False]]

# Seed table so lookups do not depend on the host's mime.types files.
_KNOWN_TYPES: Dict[str, str] = {
    "txt": "text/plain",
    "text": "text/plain",
    "log": "text/plain",
    "csv": "text/csv",
    "tsv": "text/tab-separated-values",
    "md": "text/markdown",
    "markdown": "text/markdown",
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "mjs": "application/javascript",
    "json": "application/json",
    "jsonl": "application/jsonl",
    "xml": "application/xml",
    "yaml": "text/yaml",
    "yml": "text/yaml",
    "pdf": "application/pdf",
    "zip": "application/zip",
    "gz": "application/gzip",
    "tar": "application/x-tar",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "svg": "image/svg+xml",
    "webp": "image/webp",
    "ico": "image/vnd.microsoft.icon",
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}

_table = mimetypes.MimeTypes()
for _ext, _type in _KNOWN_TYPES.items():
    _table.add_type(_type, "." + _ext, strict=True)


def _extension_of(value: str) -> str:
    if "/" not in value:
        if "." not in value:
            # bare extension such as 'txt'
            return value.lower()
        if value.startswith(".") and value.count(".") == 1:
            # '.txt'
            return value[1:].lower()
    _, ext = posixpath.splitext(posixpath.basename(value.rstrip("/")))
    return ext.lstrip(".").lower()


def lookup(value: str) -> MimeResult:
    """
    'txt' / '.txt' / '/a/b/file.txt' -> 'text/plain'
    Anything holding a '/' is a path; '/srv/txt' has no extension.
    Unknown or missing extensions give False.
    """
    if not value:
        return False
    ext = _extension_of(value)
    if not ext:
        return False
    key = "." + ext
    return _table.types_map[True].get(key) or _table.types_map[False].get(key) or False


def guess(path: str) -> MimeResult:
    """Like lookup() but only for full paths: 'README' has no type instead of being read as an extension."""
    base = posixpath.basename(path.rstrip("/")) if path else ""
    if "." not in base:
        return False
    return lookup(base)
