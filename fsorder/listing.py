"""
fsorder.listing

Enumerate the regular files of a single directory (non-recursive) and return
their names in natural order.
"""

from __future__ import annotations

import os
from typing import AnyStr, List, Tuple, Union

from fsorder.base.logging import get_logger
from fsorder.natural import natural_sort_key

log = get_logger(__name__)

LIST_OK = 0
LIST_OPEN_FAILED = -1


class DirectoryOpenFailed(OSError):
    """Raised when a path cannot be opened as a directory."""


def _open_failure(dirpath: Union[str, bytes], exc: OSError) -> DirectoryOpenFailed:
    return DirectoryOpenFailed(exc.errno, exc.strerror or str(exc), dirpath)


def list_directory_files(dirpath: "os.PathLike[AnyStr] | AnyStr") -> List[AnyStr]:
    """
    Return the names of the regular files in ``dirpath``, naturally ordered.

    Directories, symlinks and special files are skipped. Names are relative
    to ``dirpath`` and share its type (``bytes`` in, ``bytes`` out).

    Raises:
        DirectoryOpenFailed: if ``dirpath`` cannot be opened as a directory.
    """
    path = os.fspath(dirpath)
    names: List[AnyStr] = []
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    if not entry.is_file(follow_symlinks=False):
                        continue
                except OSError:
                    continue
                names.append(entry.name)
    except OSError as exc:
        raise _open_failure(path, exc) from exc

    names.sort(key=natural_sort_key)
    log.debug("Listed %d file(s) in %s", len(names), os.fsdecode(path))
    return names


def list_directory(dirpath: "os.PathLike[AnyStr] | AnyStr") -> Tuple[int, List[AnyStr]]:
    """
    Errno-style wrapper over :func:`list_directory_files`.

    Returns:
        ``(0, names)`` on success, ``(-1, [])`` when the directory cannot be
        opened. No partial listing is ever returned.
    """
    try:
        return LIST_OK, list_directory_files(dirpath)
    except DirectoryOpenFailed as exc:
        log.error("opendir failed %s (%s)", os.fsdecode(exc.filename), exc.strerror)
        return LIST_OPEN_FAILED, []
