import math

import pytest

from gemini_he.tensor_shape import TensorShape


def test_three_dimensional_accessors():
    dims = [2, 3, 4]
    shape = TensorShape(dims)
    assert shape.dims() == len(dims)
    assert shape.num_elements() == math.prod(dims)
    assert (shape.channels(), shape.height(), shape.width()) == tuple(dims)
    assert shape.is_valid()


def test_two_and_one_dimensional_accessors():
    mat = TensorShape([5, 7])
    assert (mat.rows(), mat.cols()) == (5, 7)
    vec = TensorShape([9])
    assert vec.length() == 9


def test_3d_accessors_on_2d_shape_raise():
    shape = TensorShape([5, 7])
    with pytest.raises(ValueError):
        shape.channels()
    with pytest.raises(ValueError):
        shape.height()
    with pytest.raises(ValueError):
        shape.width()


def test_2d_accessors_on_3d_shape_raise():
    shape = TensorShape([1, 2, 3])
    with pytest.raises(ValueError):
        shape.rows()
    with pytest.raises(ValueError):
        shape.cols()


def test_length_on_2d_shape_raises():
    shape = TensorShape([1, 2])
    with pytest.raises(ValueError):
        shape.length()


def test_dim_size_out_of_range_is_minus_one():
    shape = TensorShape([2, 3])
    assert shape.dim_size(2) == -1
    assert shape.dim_size(-1) == -1
    assert shape.dim_size(1) == 3


def test_empty_shape_is_invalid():
    shape = TensorShape()
    assert shape.dims() == 0
    assert shape.num_elements() == 0
    assert not shape.is_valid()


def test_zero_dimension_makes_shape_invalid():
    shape = TensorShape([0, 3, 3])
    assert shape.num_elements() == 0
    assert not shape.is_valid()
    assert not (shape == TensorShape([0, 3, 3]))
    assert not (shape == shape)


def test_update_changes_count():
    shape = TensorShape([0, 0, 0])
    for d, size in enumerate([2, 5, 6]):
        shape.update(d, size)
    assert shape == TensorShape([2, 5, 6])
    assert shape.num_elements() == 2 * 5 * 6


@pytest.mark.parametrize("d, new_dim", [(-1, 1), (3, 1), (0, -2)])
def test_update_invalid_arguments(d, new_dim):
    shape = TensorShape([1, 2, 3])
    with pytest.raises(ValueError):
        shape.update(d, new_dim)


def test_negative_dimension_in_constructor_raises():
    with pytest.raises(ValueError):
        TensorShape([2, -1])


def test_update_overflow_raises():
    shape = TensorShape([2**40, 1])
    with pytest.raises(ValueError):
        shape.update(1, 2**40)


def test_equality_requires_same_rank_and_sizes():
    assert TensorShape([2, 3, 4]) == TensorShape([2, 3, 4])
    assert not (TensorShape([2, 3, 4]) == TensorShape([2, 3, 5]))
    assert not (TensorShape([6, 4]) == TensorShape([2, 3, 4]))
    assert TensorShape([2, 3]).is_same_size(TensorShape([2, 3]))


def test_str_format():
    assert str(TensorShape([2, 3, 4])) == "[2, 3, 4]"
    assert str(TensorShape()) == "[]"


def test_copy_is_independent():
    shape = TensorShape([2, 3, 4])
    clone = shape.copy()
    clone.update(0, 7)
    assert shape.channels() == 2
    assert clone.channels() == 7


def test_iteration_yields_sizes():
    assert list(TensorShape([4, 1, 8])) == [4, 1, 8]