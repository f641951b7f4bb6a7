"""Reading and writing images through whole-file byte buffers."""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from maakit.files import read_file
from maakit.osutils import to_path

PathArg = Union[str, bytes, os.PathLike]


def _as_path(path: PathArg) -> Path:
    if isinstance(path, (str, bytes)):
        return to_path(path)
    return Path(path)


def imread(path: PathArg, grayscale: bool = False) -> Optional[np.ndarray]:
    """Decode the image at *path*.

    Returns an ``uint8`` array of shape ``(height, width, 3)`` in RGB order,
    or ``(height, width)`` when *grayscale* is true; ``None`` if the file
    cannot be read or decoded.
    """
    content = read_file(_as_path(path))
    if not content:
        return None
    try:
        with Image.open(io.BytesIO(content)) as picture:
            converted = picture.convert("L" if grayscale else "RGB")
            return np.array(converted)
    except (OSError, ValueError, Image.DecompressionBombError):
        return None


def imwrite(path: PathArg, image: np.ndarray) -> bool:
    """Encode *image* in the format named by the file extension and write it.

    Parent directories are created first. Returns ``False`` when the image
    is empty, the extension is unknown, or the image cannot be encoded.
    """
    target = _as_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    array = np.asarray(image)
    if array.size == 0:
        return False
    if array.ndim == 3 and array.shape[2] == 1:
        array = array[:, :, 0]

    fmt = Image.registered_extensions().get(target.suffix.lower())
    if fmt is None:
        return False

    buffer = io.BytesIO()
    try:
        Image.fromarray(array).save(buffer, format=fmt)
    except (TypeError, ValueError, OSError, KeyError):
        return False

    target.write_bytes(buffer.getvalue())
    return True