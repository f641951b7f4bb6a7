"""Reading whole files as bytes."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union


def read_file(path: Union[str, os.PathLike]) -> bytes:
    """Return the whole content of *path*, or empty bytes if it cannot be opened."""
    try:
        return Path(path).read_bytes()
    except OSError:
        return b""