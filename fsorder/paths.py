"""
fsorder.paths

Path splitting and resource-path resolution helpers.

Relative resource paths that are not usable from the current working
directory are resolved against the directory holding the running program.
"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from typing import AnyStr, Iterable, List, Union

PathString = Union[str, bytes]


def _dot(path: PathString) -> PathString:
    return b"." if isinstance(path, bytes) else "."


# ----------------------------------------------------------------------
# SPLITTING
# ----------------------------------------------------------------------

def get_file_name_without_extension(path: AnyStr) -> AnyStr:
    """Return ``path`` up to its last dot (the whole input when there is none)."""
    dot = path.rfind(_dot(path))  # type: ignore[arg-type]
    if dot == -1:
        return path
    return path[:dot]


def get_file_extension(path: AnyStr) -> AnyStr:
    """Return the text after the last dot of ``path``, or an empty string."""
    dot = path.rfind(_dot(path))  # type: ignore[arg-type]
    if dot == -1:
        return path[:0]
    return path[dot + 1:]


def _normalize_ext(ext: PathString) -> str:
    text = os.fsdecode(ext).strip()
    return text.lstrip(".").lower()


def filter_by_extension(names: Iterable[AnyStr], extensions: Iterable[PathString]) -> List[AnyStr]:
    """
    Keep names whose extension matches one of ``extensions``.

    Matching is case-insensitive and leading dots are optional, so ``"png"``,
    ``".PNG"`` and ``b"png"`` are equivalent. Order is preserved.
    """
    wanted = {_normalize_ext(ext) for ext in extensions if ext}
    if not wanted:
        return list(names)
    return [
        name for name in names
        if _normalize_ext(get_file_extension(name)) in wanted
    ]


# ----------------------------------------------------------------------
# PROBES
# ----------------------------------------------------------------------

def path_is_directory(path: "os.PathLike[AnyStr] | AnyStr") -> bool:
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except (OSError, ValueError):
        return False


def filepath_is_readable(path: "os.PathLike[AnyStr] | AnyStr") -> bool:
    """Try opening ``path`` for binary reading; the handle is closed at once."""
    try:
        with open(path, "rb"):
            return True
    except (OSError, ValueError):
        return False


def get_executable_directory() -> str:
    """
    Return the directory holding the running program, with a trailing separator.

    Frozen builds report the bundled executable. Otherwise the main script is
    used when it exists on disk, falling back to the interpreter binary.
    """
    if getattr(sys, "frozen", False):
        program = Path(sys.executable)
    else:
        script = sys.argv[0] if sys.argv else ""
        program = Path(script) if script and Path(script).is_file() else Path(sys.executable)

    directory = str(program.resolve().parent)
    if not directory.endswith(os.sep):
        directory += os.sep
    return directory


# ----------------------------------------------------------------------
# SANITIZERS
# ----------------------------------------------------------------------

def _under_executable_directory(path: AnyStr) -> AnyStr:
    base = get_executable_directory()
    if isinstance(path, bytes):
        return os.fsencode(base) + path
    return base + path


def sanitize_filepath(path: AnyStr) -> AnyStr:
    """Return ``path`` if readable, else the same path under the executable directory."""
    if filepath_is_readable(path):
        return path
    return _under_executable_directory(path)


def sanitize_dirpath(path: AnyStr) -> AnyStr:
    """Return ``path`` if it is a directory, else the same path under the executable directory."""
    if path_is_directory(path):
        return path
    return _under_executable_directory(path)
