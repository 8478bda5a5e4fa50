"""File and path helpers: path classification plus batch write/read/copy/list utilities."""
from fileutil.core.errors import ErrorKind, FileUtilError
from fileutil.core.model.schema import FileDescriptor, FileWrite
from fileutil.core.paths import (
    get_directory,
    get_extension,
    get_file_object,
    is_directory,
    normalize_path,
    split_path,
)
from fileutil.utils.fs import (
    copy,
    directory_of,
    ensure_dir,
    get_file_count,
    get_files,
    get_unique_filename,
    read_file,
    read_files,
    write_file,
    write_files,
)
from fileutil.utils.json_doc import append_json, append_to_list

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "FileUtilError",
    "FileDescriptor",
    "FileWrite",
    "normalize_path",
    "split_path",
    "is_directory",
    "get_directory",
    "get_extension",
    "get_file_object",
    "directory_of",
    "ensure_dir",
    "write_file",
    "write_files",
    "read_file",
    "read_files",
    "append_json",
    "append_to_list",
    "copy",
    "get_files",
    "get_file_count",
    "get_unique_filename",
]
