"""Flattening batch-norm inputs into vectors and modular addition of shares."""

from __future__ import annotations

from typing import Tuple, Union

import numpy as np

from .errors import Code, GeminiError

__all__ = ["pack", "add_mod"]

_UINT64_LIMIT = 2**64


def pack(mat, scales) -> Tuple[np.ndarray, np.ndarray]:
    """Flatten a (C, H, W) tensor and broadcast one scale per channel.

    Element (c, h, w) goes to index ``c*H*W + h*W + w`` in both outputs; the
    scale vector carries ``scales[c]`` at every position of channel ``c``.
    Raises :class:`GeminiError` with ``ERR_DIM_MISMATCH`` when the tensor is
    not three-dimensional or the number of scales differs from the channels.
    """
    values = np.asarray(mat, dtype=np.uint64)
    if values.ndim != 3:
        raise GeminiError(Code.ERR_DIM_MISMATCH, "pack expects a 3D tensor")
    per_channel = np.asarray(scales, dtype=np.uint64).reshape(-1)
    channels, height, width = values.shape
    if per_channel.size != channels:
        raise GeminiError(
            Code.ERR_DIM_MISMATCH,
            f"{channels} channels but {per_channel.size} scales",
        )
    flattened = values.reshape(-1).copy()
    flattened_scales = np.repeat(per_channel, height * width)
    return flattened, flattened_scales


def add_mod(a, b, modulus: int) -> Union[int, np.ndarray]:
    """Return ``(a + b) mod modulus``, elementwise for arrays.

    Plain integers give a plain integer; arrays give a uint64 array and never
    overflow, whatever 64-bit modulus is used.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if isinstance(a, (int, np.integer)) and isinstance(b, (int, np.integer)):
        return (int(a) + int(b)) % int(modulus)
    if modulus >= _UINT64_LIMIT:
        raise ValueError("modulus must fit in 64 bits")

    m = np.uint64(modulus)
    x = np.asarray(a, dtype=np.uint64) % m
    y = np.asarray(b, dtype=np.uint64) % m
    if x.shape != y.shape:
        raise GeminiError(Code.ERR_DIM_MISMATCH, f"shapes {x.shape} and {y.shape} differ")
    with np.errstate(over="ignore"):
        gap = m - y
        result = np.where(x >= gap, x - gap, x + y)
    return result.astype(np.uint64)