"""Sizes, masks and consistency checks for shared Boolean triples."""

from __future__ import annotations

from typing import Sequence

__all__ = ["triple_length", "bitmask", "verify_triples"]

_BITS_PER_BYTE = 8


def triple_length(num_triples: int, packed: bool) -> int:
    """Number of bytes holding ``num_triples`` triples.

    Packed triples store eight to a byte; unpacked ones use a byte each.
    """
    if num_triples < 0:
        raise ValueError("num_triples must be non-negative")
    return num_triples // (_BITS_PER_BYTE if packed else 1)


def bitmask(bits: int, width: int = 64) -> int:
    """Mask of the low ``bits`` bits in a ``width``-bit word.

    A request for at least ``width`` bits gives the all-ones word.
    """
    if bits < 0:
        raise ValueError("bits must be non-negative")
    if width <= 0:
        raise ValueError("width must be positive")
    if bits >= width:
        return (1 << width) - 1
    return (1 << bits) - 1


def verify_triples(
    a1: Sequence[int],
    b1: Sequence[int],
    c1: Sequence[int],
    a2: Sequence[int],
    b2: Sequence[int],
    c2: Sequence[int],
) -> bool:
    """Check that XOR shares combine into valid AND triples.

    For every position, ``(a1 ^ a2) & (b1 ^ b2)`` must equal ``c1 ^ c2``.
    Raises ValueError if the six share vectors differ in length.
    """
    shares = (a1, b1, c1, a2, b2, c2)
    lengths = {len(share) for share in shares}
    if len(lengths) != 1:
        raise ValueError("share vectors differ in length")
    return all(
        ((x2 ^ x1) & (y1 ^ y2)) == (z2 ^ z1)
        for x1, y1, z1, x2, y2, z2 in zip(a1, b1, c1, a2, b2, c2)
    )