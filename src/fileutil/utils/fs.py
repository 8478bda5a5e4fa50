"""
Filesystem helpers built on the path classifier.
- ensure_dir(path): create directory if missing
- write_file(path, data): write str/bytes (create parent dirs)
- write_files(entries): batch write in input order
- read_file(path) / read_files(paths): read, preserving input order
- copy(src, dest): copy a file or a directory tree (create dest dirs)
- get_files(dir) / get_file_count(dir): non-hidden regular files
- get_unique_filename(dir, ext): '<count>_<token>.<ext>'
"""
from __future__ import annotations
import base64
import binascii
import logging
import os
import posixpath
import shutil
import uuid
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import ValidationError
from tqdm import tqdm

from fileutil.core.errors import ErrorKind, FileUtilError
from fileutil.core.model.schema import FileWrite
from fileutil.core.paths import get_directory, is_directory, normalize_path, split_path
from fileutil.utils import config

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _fail(kind: ErrorKind, message: str, path: Optional[str] = None, **context: Any) -> FileUtilError:
    logger.error(f"{kind.value}: {message}" + (f" path={path}" if path else ""))
    return FileUtilError(kind, message, path=path, **context)


def _as_str(path: Optional[PathLike]) -> str:
    if path is None:
        return ""
    return os.fspath(path)


def directory_of(path: PathLike) -> str:
    """
    get_directory() that keeps relative paths relative.
    '/a/b/c.txt' -> '/a/b/', 'a/b/c.txt' -> 'a/b/', 'c.txt' -> './'
    '../out/a.txt' -> '../out/'
    """
    p = _as_str(path)
    d = get_directory(p)
    if p.startswith("/"):
        return d
    # get_directory() is rooted, so leading '..' segments collapse away; put them back
    ups = []
    for part in split_path(p):
        if part != "..":
            break
        ups.append(part + "/")
    return ("".join(ups) + d.lstrip("/")) or "./"


def ensure_dir(path: PathLike) -> Path:
    p = Path(path)
    try:
        p.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise _fail(ErrorKind.IO_FAILURE, f"Cannot create directory: {e}", str(p)) from e
    return p


def _encode(data: Union[str, bytes, bytearray], encoding: str, path: str) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if not isinstance(data, str):
        raise _fail(ErrorKind.INVALID_ARGUMENT,
                    f"str or bytes expected for data, got {type(data).__name__}", path)
    enc = encoding.lower()
    try:
        if enc == "base64":
            return base64.b64decode(data)
        if enc == "hex":
            return bytes.fromhex(data)
        return data.encode(encoding)
    except LookupError as e:
        raise _fail(ErrorKind.INVALID_ARGUMENT, f"Unknown encoding {encoding!r}", path) from e
    except (binascii.Error, ValueError) as e:
        raise _fail(ErrorKind.INVALID_ARGUMENT, f"Data cannot be encoded as {encoding}: {e}", path) from e


def _decode(raw: bytes, encoding: Optional[str], path: str) -> Union[str, bytes]:
    if encoding is None:
        return raw
    enc = encoding.lower()
    if enc == "base64":
        return base64.b64encode(raw).decode("ascii")
    if enc == "hex":
        return raw.hex()
    try:
        return raw.decode(encoding)
    except LookupError as e:
        raise _fail(ErrorKind.INVALID_ARGUMENT, f"Unknown encoding {encoding!r}", path) from e
    except UnicodeDecodeError as e:
        raise _fail(ErrorKind.PARSE_FAILURE, f"File is not valid {encoding}: {e}", path) from e


def write_file(file: PathLike, data: Union[str, bytes], encoding: Optional[str] = None) -> str:
    """
    Writes a file and creates the directory structure should it not exist.

    @param file: destination path
    @param data: str (encoded with `encoding`) or bytes (written as-is)
    @param encoding: text codec, or 'base64' / 'hex' to decode `data` into bytes.
                     Defaults to config.DEFAULT_ENCODING.
    @return: the path written
    @raises FileUtilError: EMPTY_INPUT, INVALID_ARGUMENT or IO_FAILURE
    """
    path = _as_str(file)
    if not path:
        raise _fail(ErrorKind.EMPTY_INPUT, "Missing required parameter file")
    if data is None:
        raise _fail(ErrorKind.EMPTY_INPUT, "Missing required parameter data", path)

    payload = _encode(data, encoding or config.DEFAULT_ENCODING, path)

    p = Path(path)
    ensure_dir(p.parent)
    try:
        p.write_bytes(payload)
    except OSError as e:
        raise _fail(ErrorKind.IO_FAILURE, f"Write failed: {e}", path) from e
    logger.debug(f"file.written: path={path}, bytes={len(payload)}")
    return path


def _to_entry(index: int, item: Any) -> FileWrite:
    if isinstance(item, FileWrite):
        return item
    if not isinstance(item, Mapping):
        raise _fail(ErrorKind.INVALID_ARGUMENT,
                    f"Mapping expected in files list at index {index}", index=index)
    try:
        return FileWrite.model_validate(dict(item))
    except ValidationError as e:
        fields = ", ".join(".".join(str(x) for x in err["loc"]) for err in e.errors())
        raw_path = item.get("path")
        raise _fail(ErrorKind.INVALID_ARGUMENT,
                    f"Malformed file entry at index {index}: {fields}",
                    str(raw_path) if raw_path else None, index=index, fields=fields) from e


def write_files(files: Sequence[Union[FileWrite, Dict[str, Any]]], progress: bool = False) -> List[str]:
    """
    Writes one or more files, creating directories as needed.
    Entries look like {path: '/p/f.txt', data: '123'} or {path: '/p', filename: 'f.txt', data: '123'}.
    Every entry is validated before the first write. Writes run one at a time in input order.
    """
    if not isinstance(files, (list, tuple)):
        raise _fail(ErrorKind.INVALID_ARGUMENT, "List expected for parameter files")

    entries = [_to_entry(i, item) for i, item in enumerate(files)]

    results: List[str] = []
    for entry in tqdm(entries, desc="Writing files", disable=not progress):
        target = entry.path
        if entry.filename:
            target = posixpath.join(directory_of(entry.path), entry.filename)
        results.append(write_file(target, entry.data, entry.encoding))
    return results


def read_file(file: PathLike, encoding: Optional[str] = None) -> Union[str, bytes]:
    path = _as_str(file)
    if not path:
        raise _fail(ErrorKind.EMPTY_INPUT, "Missing required parameter file")
    p = Path(path)
    if not p.exists():
        raise _fail(ErrorKind.NOT_FOUND, "File does not exist", path)
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise _fail(ErrorKind.IO_FAILURE, f"Read failed: {e}", path) from e
    logger.debug(f"file.read: path={path}, bytes={len(raw)}")
    return _decode(raw, encoding, path)


def read_files(files: Union[PathLike, Sequence[PathLike]], encoding: Optional[str] = None) -> List[Union[str, bytes]]:
    """
    Reads one or more files. Contents come back in the same order as the input.
    With encoding=None the raw bytes are returned.
    """
    if isinstance(files, (str, os.PathLike)):
        queue = [files]
    elif isinstance(files, (list, tuple)):
        queue = list(files)
    else:
        raise _fail(ErrorKind.INVALID_ARGUMENT, "Path or list of paths expected for files")

    return [read_file(f, encoding) for f in queue]


def copy(src: PathLike, dest: PathLike) -> str:
    """Copies a file or directory and creates the dest folder structure should it not exist."""
    s = normalize_path(_as_str(src))
    d = normalize_path(_as_str(dest))
    if not s or not d:
        raise _fail(ErrorKind.EMPTY_INPUT, "src and dest are required", s or d or None)
    if not os.path.exists(s):
        raise _fail(ErrorKind.NOT_FOUND, "src does not exist", s)

    ensure_dir(directory_of(d))
    try:
        if os.path.isdir(s):
            result = shutil.copytree(s, d, dirs_exist_ok=True)
        else:
            result = shutil.copy2(s, d)
    except (OSError, shutil.Error) as e:
        raise _fail(ErrorKind.IO_FAILURE, f"Copy failed: {e}", s, dest=d) from e
    logger.debug(f"copied: src={s}, dest={result}")
    return os.fspath(result)


def get_files(directory: PathLike) -> List[str]:
    """
    Returns the sorted paths of regular files in a directory, skipping names that start with a dot.
    A path whose last segment looks like a file is replaced by its directory.
    A missing directory gives an empty list.
    """
    d = _as_str(directory)
    if not is_directory(d):
        d = directory_of(d)
    d = normalize_path(d) or "./"

    if not os.path.isdir(d):
        return []

    try:
        names = sorted(os.listdir(d))
    except OSError as e:
        raise _fail(ErrorKind.IO_FAILURE, f"Cannot list directory: {e}", d) from e

    res: List[str] = []
    for name in names:
        if name.startswith("."):
            continue
        full = posixpath.join(d, name)
        if os.path.isfile(full):
            res.append(full)
    return res


def get_file_count(directory: PathLike) -> int:
    return len(get_files(directory))


def _unique_token(length: int) -> str:
    hexs = uuid.uuid1().hex
    # time_low is the first 8 hex chars; its low digits change on every call
    if length <= 8:
        return hexs[8 - length:8]
    return hexs[:length]


def get_unique_filename(directory: PathLike, extension: str) -> str:
    """
    Returns an incremental and unique file name inside `directory`:
    '<dir>/03_1a2b3c.json' when the directory already holds three files.
    """
    ext = (extension or "").lstrip(".")
    if not ext:
        raise _fail(ErrorKind.EMPTY_INPUT, "Missing required parameter extension", _as_str(directory) or None)

    count = get_file_count(directory)
    token = _unique_token(config.UNIQUE_TOKEN_LENGTH)
    return posixpath.join(_as_str(directory), f"{count:02d}_{token}.{ext}")
