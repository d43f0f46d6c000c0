"""Choosing between per-channel and flat vector packing for batch norm."""

from __future__ import annotations

from .mathutil import ceil_div
from .tensor_shape import TensorShape

__all__ = ["prefers_vector_packing"]


def _ciphertext_counts(ishape: TensorShape, poly_degree: int) -> tuple[int, int]:
    height = ishape.height()
    width = ishape.width()
    channels = ishape.channels()
    per_channel = ceil_div(height * width, poly_degree) * channels
    flat = ceil_div(height * width * channels, poly_degree) * 3
    return per_channel, flat


def prefers_vector_packing(ishape: TensorShape, poly_degree: int) -> bool:
    """True when the flattened vector layout needs no more ciphertexts.

    Packing each channel into its own polynomials costs
    ``ceil(H*W / N) * C`` ciphertexts; packing the flattened tensor costs
    ``ceil(H*W*C / N) * 3``. The flattened layout is chosen whenever the
    per-channel layout needs at least as many.

    Raises ValueError if ``ishape`` is not three-dimensional or
    ``poly_degree`` is not positive.
    """
    if poly_degree <= 0:
        raise ValueError("poly_degree must be positive")
    per_channel, flat = _ciphertext_counts(ishape, poly_degree)
    return per_channel >= flat