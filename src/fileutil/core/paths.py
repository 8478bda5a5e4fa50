"""
fileutil.core.paths — path classification helpers

Pure functions over POSIX path strings. Nothing here touches the filesystem:
whether a path names a file or a directory is decided from its last segment
alone (a "." in the last segment means file).

- normalize_path(path): collapse separators, resolve "." / "..", keep trailing "/"
- split_path(path): non-empty segments
- is_directory(path): last segment has no "."
- get_directory(path): "/dir/parts/" without the filename
- get_file_object(path): FileDescriptor (mimetype, name, path, dir, extension)
"""
from __future__ import annotations
import posixpath
from typing import List, Optional

from fileutil.core import mime
from fileutil.core.model.schema import FileDescriptor

SEP = "/"


def normalize_path(path: Optional[str]) -> str:
    """
    '///Users///boom/./a/../myFile.txt' -> '/Users/boom/myFile.txt'
    'path1////path2/' -> 'path1/path2/'
    """
    if not path:
        return ""
    trailing = path.endswith(SEP)
    norm = posixpath.normpath(path)
    # normpath keeps a leading '//' (POSIX implementation-defined root)
    if norm.startswith("//"):
        norm = SEP + norm.lstrip(SEP)
    if trailing and not norm.endswith(SEP):
        norm += SEP
    return norm


def split_path(path: Optional[str], delimiter: Optional[str] = None) -> List[str]:
    """
    Splits a path into its non-empty parts.
    '/example/myDirectory/myFile.txt' -> ['example', 'myDirectory', 'myFile.txt']
    """
    if not path:
        return []
    return [part for part in normalize_path(path).split(delimiter or SEP) if part]


def _has_dot(segment: str) -> bool:
    return "." in segment


def is_directory(path: Optional[str]) -> bool:
    """
    True if the last segment carries no '.'.
    '/example/myDirectory' -> True
    '/example/myDirectory/myFile.txt' -> False
    'myFile.txt/' -> False (trailing separators are ignored)
    """
    parts = split_path(path)
    if not parts:
        return True
    return not _has_dot(parts[-1])


def get_directory(path: Optional[str], delimiter: Optional[str] = None) -> str:
    """
    Returns the directory part of a path, always wrapped in separators.

    '/User/mike/project/myFile.txt' -> '/User/mike/project/'
    '/User/mike/project/' -> '/User/mike/project/'
    'myFile.txt' -> '/'
    """
    sep = delimiter or SEP
    parts = split_path(path, sep)

    if not parts:
        return SEP
    if len(parts) == 1 and _has_dot(parts[0]):
        return SEP
    if _has_dot(parts[-1]):
        parts = parts[:-1]

    res = sep + "".join(part + sep for part in parts)
    return normalize_path(res)


def get_extension(path: Optional[str]) -> str:
    """Suffix of the last segment without dots: 'a/b.tar.gz' -> 'gz', '.bashrc' -> ''."""
    parts = split_path(path)
    if not parts:
        return ""
    _, ext = posixpath.splitext(parts[-1])
    return ext.replace(".", "")


def get_file_object(path: Optional[str]) -> Optional[FileDescriptor]:
    """Based on a path returns its mimetype, name, dir, path and extension, or None for empty input."""
    if not path:
        return None

    norm = normalize_path(path)
    parts = split_path(norm)
    ext = get_extension(norm)
    name = "" if is_directory(norm) else parts[-1]

    return FileDescriptor(
        mimetype=mime.guess(norm),
        name=name,
        path=norm,
        dir=get_directory(norm),
        extension=ext,
    )
