"""Base-path handling and file access helpers for game assets."""

from __future__ import annotations

import enum
import os
import tarfile
from pathlib import Path


class FileKind(enum.IntEnum):
    """What a path on disk refers to."""

    NONE = 0
    FILE = 1
    DIRECTORY = 2


class _BasePath:
    value: str | None = None


_base = _BasePath()


def set_base_path(path: str | os.PathLike[str]) -> None:
    """Set the directory that relative paths resolve against.

    A trailing slash is added if missing.
    """
    text = os.fspath(path)
    if not text.endswith("/"):
        text += "/"
    _base.value = text


def get_base_path() -> str:
    """Return the base path, defaulting to the current directory.

    The default uses forward slashes and always ends with one.
    """
    if _base.value is None:
        cwd = os.getcwd().replace("\\", "/")
        if not cwd.endswith("/"):
            cwd += "/"
        _base.value = cwd
    return _base.value


def resolve_path(partial_path: str) -> str:
    """Prefix a relative path with the base path; absolute paths pass through."""
    if partial_path.startswith("/"):
        return partial_path
    return get_base_path() + partial_path


def is_path_absolute(path: str) -> bool:
    """Whether a path is absolute, accepting drive letters on Windows."""
    if path.startswith("/"):
        return True
    if os.name == "nt":
        return (
            len(path) > 3
            and path[0].isalpha()
            and path[1] == ":"
            and path[2] in "/\\"
        )
    return False


def path_base(path: str) -> str:
    """Return the on-disk path for a game path, relative to the base path."""
    if path.startswith("/"):
        return path
    return get_base_path() + path


def file_info(path: str | os.PathLike[str]) -> FileKind:
    """Report whether a path is a directory, some other file, or missing."""
    if os.path.isdir(path):
        return FileKind.DIRECTORY
    if os.path.exists(path):
        return FileKind.FILE
    return FileKind.NONE


def read_file_from_tar(tar_path: str | os.PathLike[str], path: str) -> bytes:
    """Read a member from a tar bundle.

    The member may be stored as "<path>", "./<path>" or "/<path>"; the first
    entry with any of those names is used. Raises FileNotFoundError if none
    matches.
    """
    candidates = {path, "./" + path, "/" + path}
    with tarfile.open(tar_path, "r") as tar:
        for member in tar:
            if member.name in candidates:
                handle = tar.extractfile(member)
                if handle is None:
                    return b""
                with handle:
                    return handle.read()
    raise FileNotFoundError(f"{path} not found in bundle {os.fspath(tar_path)}")


def read_entire_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a file. Raises OSError on failure."""
    return Path(path).read_bytes()


def write_entire_file(path: str | os.PathLike[str], data: bytes | str) -> None:
    """Create or truncate a file and write data to it. Raises OSError on failure."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    Path(path).write_bytes(data)