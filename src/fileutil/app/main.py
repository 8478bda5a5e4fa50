from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from dotenv import find_dotenv, load_dotenv

from fileutil.core.errors import ErrorKind, FileUtilError
from fileutil.core.paths import get_directory, get_file_object, is_directory, split_path
from fileutil.utils import config
from fileutil.utils.fs import (
    copy,
    get_file_count,
    get_files,
    get_unique_filename,
    read_files,
    write_file,
    write_files,
)
from fileutil.utils.json_doc import append_json, append_to_list

logger = logging.getLogger(__name__)


def setup_logging(level_name: Optional[str] = None, log_file: Optional[str] = None):
    """Setup root logger with console and file handlers."""
    log_level_name = (level_name or config.LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)
    log_file = config.LOG_FILE if log_file is None else log_file

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # stdout carries command results, so console logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'))
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        log_file_path = Path(log_file)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s(%(lineno)d) - %(levelname)s - %(message)s'))
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)

    logger.debug(f"Log level set to {log_level_name} for console.")


def _emit(value: Any) -> None:
    print(json.dumps(value, ensure_ascii=False, indent=2))


def _handle_info(args):
    fo = get_file_object(args.path)
    _emit(fo.to_dict() if fo else None)


def _handle_dir(args):
    _emit(get_directory(args.path, args.delimiter))


def _handle_split(args):
    _emit(split_path(args.path, args.delimiter))


def _handle_is_dir(args):
    _emit(is_directory(args.path))


def _handle_ls(args):
    _emit(get_files(args.dir))


def _handle_count(args):
    _emit(get_file_count(args.dir))


def _handle_unique_name(args):
    _emit(get_unique_filename(args.dir, args.extension))


def _handle_read(args):
    # raw bytes are not JSON; fall back to base64 when no encoding is given
    _emit(read_files(args.files, args.encoding or "base64"))


def _handle_write(args):
    _emit(write_file(args.file, args.data, args.encoding))


def _handle_write_many(args):
    try:
        manifest = json.loads(Path(args.manifest).read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise FileUtilError(ErrorKind.NOT_FOUND, "Manifest file not found", str(args.manifest)) from e
    except json.JSONDecodeError as e:
        raise FileUtilError(ErrorKind.PARSE_FAILURE, f"Manifest is not valid JSON: {e.msg}",
                            str(args.manifest)) from e
    except OSError as e:
        raise FileUtilError(ErrorKind.IO_FAILURE, f"Cannot read manifest: {e}", str(args.manifest)) from e
    _emit(write_files(manifest, progress=args.progress))


def _handle_copy(args):
    _emit(copy(args.src, args.dest))


def _handle_append_json(args):
    try:
        value = json.loads(args.value)
    except json.JSONDecodeError:
        value = args.value
    _emit(append_json(args.file, value, append_to_list(args.key)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fileutil", description="Path classification and file helpers")
    parser.add_argument("--log-level", default=None,
                        help="Console log level (DEBUG/INFO/WARNING/ERROR); defaults to LOG_LEVEL env")
    parser.add_argument("--log-file", default=None,
                        help="Log file path; '' disables file logging (defaults to FILEUTIL_LOG_FILE env)")

    sub = parser.add_subparsers(dest="cmd", required=False, help="Sub-commands")
    fmt = argparse.ArgumentDefaultsHelpFormatter

    p_info = sub.add_parser("info", help="Describe a path (mimetype, name, dir, extension)", formatter_class=fmt)
    p_info.add_argument("path")
    p_info.set_defaults(func=_handle_info)

    p_dir = sub.add_parser("dir", help="Directory part of a path", formatter_class=fmt)
    p_dir.add_argument("path")
    p_dir.add_argument("--delimiter", default="/", help="Path separator")
    p_dir.set_defaults(func=_handle_dir)

    p_split = sub.add_parser("split", help="Split a path into its segments", formatter_class=fmt)
    p_split.add_argument("path")
    p_split.add_argument("--delimiter", default="/", help="Path separator")
    p_split.set_defaults(func=_handle_split)

    p_isdir = sub.add_parser("is-dir", help="Classify a path as directory (no '.' in last segment)",
                             formatter_class=fmt)
    p_isdir.add_argument("path")
    p_isdir.set_defaults(func=_handle_is_dir)

    p_ls = sub.add_parser("ls", help="List non-hidden files in a directory", formatter_class=fmt)
    p_ls.add_argument("dir")
    p_ls.set_defaults(func=_handle_ls)

    p_count = sub.add_parser("count", help="Count non-hidden files in a directory", formatter_class=fmt)
    p_count.add_argument("dir")
    p_count.set_defaults(func=_handle_count)

    p_uniq = sub.add_parser("unique-name", help="Generate an incremental unique filename", formatter_class=fmt)
    p_uniq.add_argument("dir")
    p_uniq.add_argument("extension", help="e.g. json, txt")
    p_uniq.set_defaults(func=_handle_unique_name)

    p_read = sub.add_parser("read", help="Read one or more files in order", formatter_class=fmt)
    p_read.add_argument("files", nargs="+")
    p_read.add_argument("--encoding", default=None,
                        help="Text codec, or base64/hex (default: base64 output)")
    p_read.set_defaults(func=_handle_read)

    p_write = sub.add_parser("write", help="Write a file, creating parent directories", formatter_class=fmt)
    p_write.add_argument("file")
    p_write.add_argument("data")
    p_write.add_argument("--encoding", default=None, help="Text codec, or base64/hex")
    p_write.set_defaults(func=_handle_write)

    p_many = sub.add_parser("write-many", help="Write files listed in a JSON manifest", formatter_class=fmt)
    p_many.add_argument("manifest", type=Path,
                        help="JSON array of {path, data[, filename, encoding]}")
    p_many.add_argument("--progress", action="store_true", help="Show a progress bar")
    p_many.set_defaults(func=_handle_write_many)

    p_copy = sub.add_parser("copy", help="Copy a file or directory", formatter_class=fmt)
    p_copy.add_argument("src")
    p_copy.add_argument("dest")
    p_copy.set_defaults(func=_handle_copy)

    p_append = sub.add_parser("append-json", help="Append a value to a list inside a JSON file",
                              formatter_class=fmt)
    p_append.add_argument("file")
    p_append.add_argument("value", help="JSON value (plain strings are taken as-is)")
    p_append.add_argument("--key", default=None, help="Object key holding the list (default: root array)")
    p_append.set_defaults(func=_handle_append_json)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True), override=True)  # .env in the working directory
    config.load()
    setup_logging(args.log_level, args.log_file)

    if not hasattr(args, "func"):
        logging.warning("No command specified.")
        parser.print_help()
        return 2

    try:
        args.func(args)
    except FileUtilError as e:
        logging.error(f"{args.cmd} failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
