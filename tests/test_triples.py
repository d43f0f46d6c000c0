import random

import pytest

from gemini_he.triples import bitmask, triple_length, verify_triples


def _make_shares(count, seed):
    rng = random.Random(seed)
    a1 = bytes(rng.randrange(256) for _ in range(count))
    b1 = bytes(rng.randrange(256) for _ in range(count))
    a2 = bytes(rng.randrange(256) for _ in range(count))
    b2 = bytes(rng.randrange(256) for _ in range(count))
    c1 = bytes(rng.randrange(256) for _ in range(count))
    c2 = bytes(((x1 ^ x2) & (y1 ^ y2)) ^ z1 for x1, x2, y1, y2, z1 in zip(a1, a2, b1, b2, c1))
    return a1, b1, c1, a2, b2, c2


@pytest.mark.parametrize("n", [0, 1, 7, 8, 1000])
def test_unpacked_length_is_count(n):
    assert triple_length(n, False) == n


@pytest.mark.parametrize("n", [8, 64, 4096])
def test_packed_length_holds_eight_per_byte(n):
    assert triple_length(n, True) * 8 == n


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        triple_length(-1, True)


def test_bitmask_full_width_is_all_ones():
    assert bitmask(64) == 0xFFFFFFFFFFFFFFFF
    assert bitmask(100) == bitmask(64)


def test_bitmask_zero_bits_is_empty():
    assert bitmask(0) == 0


@pytest.mark.parametrize("bits", [1, 5, 31, 63])
def test_bitmask_has_exactly_low_bits_set(bits):
    mask = bitmask(bits)
    assert mask.bit_length() == bits
    assert bin(mask).count("1") == bits


def test_bitmask_respects_width():
    assert bitmask(8, 8) == bitmask(8)
    assert bitmask(12, 8) == bitmask(8, 8)


def test_bitmask_rejects_negative():
    with pytest.raises(ValueError):
        bitmask(-1)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_consistent_shares_pass(seed):
    assert verify_triples(*_make_shares(64, seed)) is True


def test_tampered_share_fails():
    a1, b1, c1, a2, b2, c2 = _make_shares(32, 7)
    broken = bytearray(c2)
    broken[5] ^= 0x10
    assert verify_triples(a1, b1, c1, a2, b2, bytes(broken)) is False


def test_accepts_lists():
    shares = [list(share) for share in _make_shares(16, 11)]
    assert verify_triples(*shares) is True


def test_empty_shares_pass():
    assert verify_triples(b"", b"", b"", b"", b"", b"") is True


def test_length_mismatch_rejected():
    a1, b1, c1, a2, b2, c2 = _make_shares(8, 5)
    with pytest.raises(ValueError):
        verify_triples(a1, b1, c1, a2, b2, c2[:-1])