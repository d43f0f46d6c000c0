"""Tensor shapes with validity checks and named dimension accessors."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List

__all__ = ["Padding", "TensorShape"]

_INT64_MAX = 2**63 - 1


class Padding(Enum):
    """Convolution padding mode."""

    VALID = 0
    SAME = 1


class TensorShape:
    """Sizes of each dimension of a tensor.

    A shape is valid only when it holds at least one element. Two shapes
    compare equal only when both are valid and every dimension matches.
    """

    def __init__(self, dims: Iterable[int] = ()) -> None:
        sizes = list(dims)
        self._dims: List[int] = [0] * len(sizes)
        self._num_elements = 0
        for d, size in enumerate(sizes):
            self.update(d, size)

    def num_elements(self) -> int:
        return self._num_elements

    def dims(self) -> int:
        """Number of dimensions."""
        return len(self._dims)

    def dim_size(self, d: int) -> int:
        """Size of dimension ``d``, or -1 if there is no such dimension."""
        if d < 0 or d >= self.dims():
            return -1
        return self._dims[d]

    def _require(self, rank: int, what: str) -> None:
        if self.dims() != rank:
            raise ValueError(f"no {what}() for non {rank}D tensor")

    def channels(self) -> int:
        self._require(3, "channels")
        return self.dim_size(0)

    def height(self) -> int:
        self._require(3, "height")
        return self.dim_size(1)

    def width(self) -> int:
        self._require(3, "width")
        return self.dim_size(2)

    def rows(self) -> int:
        self._require(2, "rows")
        return self.dim_size(0)

    def cols(self) -> int:
        self._require(2, "cols")
        return self.dim_size(1)

    def length(self) -> int:
        self._require(1, "length")
        return self.dim_size(0)

    def is_valid(self) -> bool:
        return self._num_elements > 0

    def is_same_size(self, other: "TensorShape") -> bool:
        """True if both shapes are valid and have identical dimensions."""
        if not self.is_valid() or not other.is_valid():
            return False
        return self._dims == other._dims

    def update(self, d: int, new_dim: int) -> None:
        """Set dimension ``d`` to ``new_dim`` and recompute the element count."""
        if d < 0 or d >= self.dims() or new_dim < 0:
            raise ValueError(
                f"TensorShape: Update invalid arguments (dims {self.dims()}, "
                f"updating dimension {d} to {new_dim})"
            )
        self._dims[d] = int(new_dim)
        product = 1
        for size in self._dims:
            product *= size
            if product > _INT64_MAX:
                raise ValueError("TensorShape: Update product overflow")
        self._num_elements = product

    def copy(self) -> "TensorShape":
        return TensorShape(self._dims)

    def __iter__(self):
        return iter(self._dims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TensorShape):
            return NotImplemented
        return self.is_same_size(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(str(size) for size in self._dims) + "]"

    def __repr__(self) -> str:
        return f"TensorShape({self._dims!r})"