import pytest

from gemini_he.bn_dispatch import prefers_vector_packing
from gemini_he.tensor_shape import TensorShape

POLY_DEGREE = 4096


@pytest.mark.parametrize("height,width", [(1, 1), (4, 4), (64, 64), (100, 100), (300, 7)])
def test_single_channel_keeps_channel_packing(height, width):
    # With one channel the flat layout always costs three times as much.
    shape = TensorShape([1, height, width])
    assert prefers_vector_packing(shape, POLY_DEGREE) is False


def test_many_small_channels_use_vector_packing():
    shape = TensorShape([64, 4, 4])
    assert prefers_vector_packing(shape, POLY_DEGREE) is True


def test_more_channels_never_turns_vector_packing_off():
    # Once many tiny channels each occupy a full polynomial, adding more keeps it that way.
    results = [
        prefers_vector_packing(TensorShape([c, 2, 2]), POLY_DEGREE) for c in range(3, 200)
    ]
    assert results == [True] * len(results)


def test_rejects_non_3d_shape():
    with pytest.raises(ValueError):
        prefers_vector_packing(TensorShape([16, 16]), POLY_DEGREE)


@pytest.mark.parametrize("degree", [0, -4096])
def test_rejects_non_positive_degree(degree):
    with pytest.raises(ValueError):
        prefers_vector_packing(TensorShape([3, 4, 4]), degree)