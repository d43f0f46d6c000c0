"""Maps from tensor coordinates to polynomial coefficient positions."""

from __future__ import annotations

from .log import Severity, log
from .mathutil import log2
from .shape_inference import make_same_pad_shape
from .tensor_shape import Padding, TensorShape

__all__ = ["ConvIndexer", "ImageIndexer", "FilterIndexer"]


def _fatal(message: str) -> None:
    log(Severity.FATAL, message)


class ConvIndexer:
    """Checks that an image and filter shape can share one polynomial."""

    def __init__(self, poly_degree: int, ishape: TensorShape, fshape: TensorShape) -> None:
        if (
            not ishape.is_valid()
            or not fshape.is_valid()
            or ishape.dims() != 3
            or fshape.dims() != 3
            or ishape.dim_size(0) != fshape.dim_size(0)
        ):
            _fatal(f"invalid shapes{ishape} {fshape}")
        if poly_degree < ishape.num_elements():
            _fatal("tensor shape out-of-bound")

    def pad_pow2(self, lower: int, upper: int) -> int:
        """Largest power of two not above ``upper`` when it is at least ``lower``."""
        if lower > upper:
            raise ValueError("pad_pow2 requires lower <= upper")
        if upper >= (lower << 1):
            return 1 << log2(upper)
        return upper


class ImageIndexer(ConvIndexer):
    """Places image element (c, h, w) at c*H*W + h*W + w."""

    def __init__(
        self,
        poly_degree: int,
        ishape: TensorShape,
        fshape: TensorShape,
        padding: Padding = Padding.VALID,
    ) -> None:
        super().__init__(poly_degree, ishape, fshape)
        shape = ishape.copy()
        if padding == Padding.SAME:
            padded = make_same_pad_shape(ishape, fshape)
            if padded is not None:
                shape = padded
        self._shape = shape
        self._offset = shape.height() * shape.width()

    def __call__(self, chl: int, row: int, col: int) -> int:
        if chl < 0 or row < 0 or col < 0:
            raise IndexError("invalid negative index")
        shape = self._shape
        if chl >= shape.dim_size(0) or row >= shape.dim_size(1) or col >= shape.dim_size(2):
            raise IndexError("TensorIndexer index out-of-bound")
        return chl * self._offset + row * shape.dim_size(2) + col


class FilterIndexer(ConvIndexer):
    """Places filter element (c, l, l') at O - c*H*W - l*W - l', reversed."""

    def __init__(
        self,
        poly_degree: int,
        ishape: TensorShape,
        fshape: TensorShape,
        padding: Padding = Padding.VALID,
    ) -> None:
        super().__init__(poly_degree, ishape, fshape)
        self._shape = fshape.copy()
        if padding == Padding.SAME:
            padded = make_same_pad_shape(ishape, fshape)
            if padded is not None:
                ishape = padded

        h = fshape.dim_size(2)
        self._row_nskip = ishape.width()
        self._offset = ishape.height() * ishape.width()
        # O = HW*(C-1) + W*(h-1) + (h-1)
        self._begin = self._offset * (fshape.channels() - 1) + ishape.width() * (h - 1) + h - 1

    def __call__(self, chl: int, row: int, col: int) -> int:
        if chl < 0 or row < 0 or col < 0:
            _fatal("Negative index")
        shape = self._shape
        if chl >= shape.dim_size(0) or row >= shape.dim_size(1) or col >= shape.dim_size(2):
            _fatal("index out-of-bound")
        return self._begin - chl * self._offset - row * self._row_nskip - col

    def index_begin(self) -> int:
        return self._begin