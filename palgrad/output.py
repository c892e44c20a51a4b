"""File naming, PNG encoding and console formatting of rendered results."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np
from numpy import ndarray as NDArray
from PIL import Image

from .errors import ClockError, EncodeError

PathLike = Union[str, os.PathLike]
IMAGE_SUFFIX = ".png"
HEX_SEPARATOR = ", "

_buffer_modes = {3: "RGB", 4: "RGBA"}


def generate_filename(clock: Callable[[], float] = time.time) -> str:
    """
    Default output name: seconds since the epoch followed by three digits
    of milliseconds, e.g. ``1700000000042.png``.

    Raises:
        ClockError: the clock reads before the epoch
    """
    now = clock()
    if now < 0:
        raise ClockError(f"System time is before the UNIX epoch: {now}")
    millis_total = int(now * 1000)
    secs, millis = divmod(millis_total, 1000)
    return f"{secs}{millis:03d}{IMAGE_SUFFIX}"


def save_image(buffer: NDArray, path: Optional[PathLike] = None) -> Path:
    """
    Encode a uint8 (H, W, 3|4) buffer to ``path``.

    When ``path`` is None a timestamped name in the working directory is
    used. A partially written file is removed before the error propagates;
    a file that existed before the call is never removed.

    Returns:
        The path written

    Raises:
        EncodeError: the image could not be written
    """
    buffer = np.asarray(buffer)
    if buffer.ndim != 3 or buffer.shape[-1] not in _buffer_modes:
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) buffer, got shape {buffer.shape}")

    target = Path(path) if path is not None else Path(generate_filename())
    image = Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))
    existed = target.exists()
    try:
        image.save(target)
    except (OSError, ValueError) as exc:
        # only a file this call created counts as partial output
        if not existed and target.exists():
            target.unlink()
        raise EncodeError(f"Could not save file {target}: {exc}") from exc
    return target


def format_hex_colors(colors: NDArray) -> str:
    """Format (n, 3) 8-bit colors as lowercase ``rrggbb`` joined by ``", "``."""
    return HEX_SEPARATOR.join(
        "{:02x}{:02x}{:02x}".format(*(int(c) for c in color[:3])) for color in np.asarray(colors)
    )
