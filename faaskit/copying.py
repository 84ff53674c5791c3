"""Recursive copying of files and directories that keeps permission bits."""

from __future__ import annotations

import os
import shutil
import stat


def _debug_print(message: str) -> None:
    if os.environ.get("debug") in ("1", "true"):
        print(message)


def copy_files(src: str | os.PathLike, dest: str | os.PathLike) -> None:
    """Copy ``src`` to ``dest``, recursing into directories.

    Permission bits of every copied file and directory follow the source.
    Errors from the file system are raised as ``OSError``.
    """
    info = os.stat(src)
    if stat.S_ISDIR(info.st_mode):
        name = os.path.basename(os.path.normpath(os.fspath(src)))
        _debug_print(f"Creating directory: {name} at {os.fspath(dest)}")
        _copy_dir(src, dest, info)
    else:
        _debug_print(f"cp - {os.fspath(src)} {os.fspath(dest)}")
        _copy_file(src, dest, info)


def _copy_dir(src, dest, info: os.stat_result) -> None:
    os.makedirs(dest, stat.S_IMODE(info.st_mode), exist_ok=True)
    for name in sorted(os.listdir(src)):
        copy_files(os.path.join(src, name), os.path.join(dest, name))


def _copy_file(src, dest, info: os.stat_result) -> None:
    with open(src, "rb") as source, open(dest, "wb") as target:
        shutil.copyfileobj(source, target)
    os.chmod(dest, stat.S_IMODE(info.st_mode))