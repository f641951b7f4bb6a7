"""Path conversion and process listing for the host operating system."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, field
from collections.abc import Iterator
from pathlib import Path
from typing import Optional, Union

import psutil

_log = logging.getLogger(__name__)

_IS_LINUX = sys.platform.startswith("linux")


def to_path(utf8_str: Union[str, bytes]) -> Path:
    """Build a path from a UTF-8 string, using the native separator."""
    if isinstance(utf8_str, bytes):
        utf8_str = utf8_str.decode("utf-8")
    return Path(utf8_str)


def path_to_utf8_string(path: Union[str, bytes, os.PathLike]) -> str:
    """Render *path* as a string with forward slashes on Windows."""
    text = os.fsdecode(path)
    if os.sep == "\\":
        text = text.replace("\\", "/")
    return text


@dataclass(frozen=True, order=True)
class ProcessInfo:
    """A running process; identity and ordering use the pid only."""

    pid: int = 0
    name: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"{self.pid} {self.name}"


def _is_pid(name: str) -> bool:
    return name.isascii() and name.isdigit()


def _iter_linux_processes() -> Iterator[ProcessInfo]:
    with os.scandir("/proc") as entries:
        for entry in entries:
            if not entry.is_dir(follow_symlinks=False) or not _is_pid(entry.name):
                continue
            try:
                target = os.readlink(f"/proc/{entry.name}/exe")
            except OSError:
                continue
            _, sep, name = target.rpartition("/")
            if sep:
                yield ProcessInfo(int(entry.name), name)


def _iter_psutil_processes() -> Iterator[ProcessInfo]:
    for proc in psutil.process_iter(["pid", "name"]):
        pid = proc.info.get("pid")
        name = proc.info.get("name")
        if not pid and sys.platform == "win32":
            continue
        if pid is None or name is None:
            continue
        yield ProcessInfo(pid, name)


def list_processes() -> set[ProcessInfo]:
    """Return the running processes whose executable name can be read."""
    source = _iter_linux_processes() if _IS_LINUX else _iter_psutil_processes()
    result = set(source)
    _log.debug("Process list: %s", sorted(result))
    return result


def get_process_path(pid: int) -> Optional[Path]:
    """Return the executable path of process *pid*, or ``None`` if unavailable."""
    if _IS_LINUX:
        try:
            return Path(os.readlink(f"/proc/{pid}/exe"))
        except OSError as err:
            _log.error("Failed to get process path [pid=%s] [error=%s]", pid, err.strerror)
            return None
    try:
        exe = psutil.Process(pid).exe()
    except (psutil.Error, OSError, ValueError) as err:
        _log.error("Failed to get process path [pid=%s] [error=%s]", pid, err)
        return None
    return Path(exe) if exe else None