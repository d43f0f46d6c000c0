"""Placing tensors into polynomial coefficients and reducing them to plaintexts."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable

import numpy as np

from .errors import Code, GeminiError
from .log import Severity, log
from .tensor_shape import TensorShape

__all__ = ["Role", "encode_coefficients", "reduce_to_plaintext"]


class Role(Enum):
    """Which party role an encoding is produced for."""

    ENCRYPTOR = "encryptor"
    ENCODER = "encoder"
    MASKING = "masking"
    EVALUATOR = "evaluator"
    NONE = "none"


def encode_coefficients(
    ishape: TensorShape,
    fshape: TensorShape,
    tensor,
    indexer: Callable[[int, int, int], int],
    poly_degree: int,
) -> np.ndarray:
    """Scatter a 3D tensor into a zeroed polynomial of ``poly_degree`` coefficients.

    Element (c, h, w) lands at coefficient ``indexer(c, h, w)``. The tensor
    must have the image shape or the filter shape. Raises
    :class:`GeminiError` when the shapes are invalid, disagree, or do not fit.
    """
    values = np.asarray(tensor, dtype=np.uint64)
    if not fshape.is_valid() or not ishape.is_valid():
        raise GeminiError(Code.ERR_INVALID_ARG, "invalid image or filter shape")
    if fshape.channels() != ishape.channels():
        raise GeminiError(Code.ERR_DIM_MISMATCH, "channel count differs")
    tshape = TensorShape(values.shape)
    if not (tshape.is_same_size(ishape) or tshape.is_same_size(fshape)):
        raise GeminiError(
            Code.ERR_DIM_MISMATCH, f"tensor shape {tshape} matches neither {ishape} nor {fshape}"
        )
    if tshape.num_elements() > poly_degree:
        raise GeminiError(Code.ERR_OUT_BOUND, "tensor does not fit the polynomial")

    poly = np.zeros(poly_degree, dtype=np.uint64)
    for c, h, w in np.ndindex(*values.shape):
        index = indexer(c, h, w)
        if index < 0 or index >= poly_degree:
            log(Severity.FATAL, f"invalid index {c},{h},{w}")
        poly[index] = values[c, h, w]
    return poly


def reduce_to_plaintext(
    coeffs: Iterable[int], poly_degree: int, plain_modulus: int
) -> np.ndarray:
    """Reduce coefficients modulo ``plain_modulus`` into a ``poly_degree``-long plaintext.

    Coefficients past the input are zero. Raises :class:`GeminiError` when
    the input is empty or longer than ``poly_degree``.
    """
    values = np.asarray(list(coeffs), dtype=np.uint64)
    if values.size == 0 or values.size > poly_degree:
        raise GeminiError(Code.ERR_OUT_BOUND, "coefficient count out of range")
    if plain_modulus <= 0:
        raise GeminiError(Code.ERR_INVALID_ARG, "plain modulus must be positive")
    plaintext = np.zeros(poly_degree, dtype=np.uint64)
    plaintext[: values.size] = values % np.uint64(plain_modulus)
    return plaintext