"""Output shapes and polynomial slicing for 2D convolution."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import Code, GeminiError
from .tensor_shape import Padding, TensorShape

__all__ = [
    "ConvSlicing",
    "make_same_pad_shape",
    "conv2d_output_shape",
    "conv2d_slicing",
]


@dataclass(frozen=True)
class ConvSlicing:
    """How an input tensor is cut into pieces that fit one polynomial."""

    strided_shape: TensorShape
    paddings: Tuple[int, int]
    slice_strides: Tuple[int, int, int]


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def make_same_pad_shape(
    tensor_shape: TensorShape, filter_shape: TensorShape
) -> Optional[TensorShape]:
    """Shape of ``tensor_shape`` padded for a SAME convolution, or None.

    Every dimension but the first grows by the filter size minus one; the
    first takes the filter's size.
    """
    if tensor_shape.dims() != filter_shape.dims():
        return None
    if not tensor_shape.is_valid() or not filter_shape.is_valid():
        return None
    padded = tensor_shape.copy()
    for d in range(1, tensor_shape.dims()):
        padded.update(d, tensor_shape.dim_size(d) + filter_shape.dim_size(d) - 1)
    padded.update(0, filter_shape.dim_size(0))
    return padded


def conv2d_output_shape(
    tensor_shape: TensorShape,
    filter_shape: TensorShape,
    padding: Padding,
    stride: int,
) -> Optional[TensorShape]:
    """Single-channel output shape of a 2D convolution, or None if empty."""
    if padding == Padding.SAME:
        oshape = make_same_pad_shape(tensor_shape, filter_shape)
        if oshape is None:
            return None
    else:
        oshape = tensor_shape.copy()

    s = int(stride)
    h = _trunc_div(oshape.height() - filter_shape.height() + s, s)
    w = _trunc_div(oshape.width() - filter_shape.width() + s, s)
    if h > 0 and w > 0:
        oshape.update(0, 1)
        oshape.update(1, h)
        oshape.update(2, w)
        return oshape
    return None


def _fail(reason: str) -> GeminiError:
    return GeminiError(Code.ERR_INVALID_ARG, f"Conv2D: {reason}")


def conv2d_slicing(
    tensor_shape: TensorShape,
    filter_shape: TensorShape,
    poly_degree: int,
    padding: Padding,
    stride: int,
) -> ConvSlicing:
    """Decide how to split the input tensor across ``poly_degree`` coefficients.

    Raises :class:`GeminiError` with ``ERR_INVALID_ARG`` when the shapes
    cannot be convolved or do not fit.
    """
    if tensor_shape.dims() != 3 or filter_shape.dims() != 3:
        raise _fail("dim_size != 3")
    if tensor_shape.channels() != filter_shape.channels():
        raise _fail("channels mismatch")
    if not filter_shape.is_valid():
        raise _fail("invalid filter size")
    cw = poly_degree // (filter_shape.height() * filter_shape.width())
    if cw <= 0:
        raise _fail("filter size out-of-bound")

    if padding == Padding.SAME:
        tshape = make_same_pad_shape(tensor_shape, filter_shape)
        if tshape is None:
            raise _fail("failed to pad same shape")
    else:
        tshape = tensor_shape.copy()

    paddings = (
        tshape.height() - tensor_shape.height(),
        tshape.width() - tensor_shape.width(),
    )

    for d in range(filter_shape.dims()):
        if tshape.dim_size(d) < filter_shape.dim_size(d):
            raise _fail("tensor_shape.dim_size(d) < filter_shape.dim_size(d)")

    s = int(stride)
    strided = tshape.copy()
    for d in (1, 2):
        # A 1-wide filter lets a strided input be compressed up front.
        if filter_shape.dim_size(d) == 1:
            strided.update(d, (tshape.dim_size(d) + s - 1) // s)

    height = strided.height()
    width = strided.width()
    hw = height * width
    if hw <= poly_degree:
        s0 = min(poly_degree // hw, tshape.dim_size(0), cw)
        slice_strides = (s0, height, width)
    else:
        ratio = height / width
        s1 = min(int(math.sqrt(poly_degree * ratio)), height)
        s2 = min(poly_degree // s1, width)
        if abs(s2 - s1) < 2:
            s1 = s2 = min(s1, s2)
        slice_strides = (1, s1, s2)

    return ConvSlicing(strided_shape=strided, paddings=paddings, slice_strides=slice_strides)