import pytest

from rayforge.array import Array


def test_length_and_default():
    a = Array(5, default=7)
    assert len(a) == 5
    assert list(a) == [7] * 5


def test_empty_array():
    a = Array()
    assert len(a) == 0
    assert list(a) == []


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Array(-1)


def test_set_and_get():
    a = Array(3)
    a[1] = "x"
    assert a[1] == "x"
    assert a[0] is None


@pytest.mark.parametrize("index", [3, -1, 10])
def test_out_of_bounds(index):
    a = Array(3, default=0)
    with pytest.raises(IndexError):
        a[index]
    with pytest.raises(IndexError):
        a[index] = 1
    assert list(a) == [0, 0, 0]
    assert len(a) == 3


def test_copy_copies_elements():
    src = Array(3)
    for i, v in enumerate("abc"):
        src[i] = v
    dst = Array(3)
    result = dst.copy(src)
    assert result is dst
    assert list(dst) == list(src)
    src[0] = "z"
    assert dst[0] == "a"


def test_copy_size_mismatch():
    with pytest.raises(ValueError):
        Array(2).copy(Array(3))


def test_copy_self_is_noop():
    a = Array(2, default=1)
    assert a.copy(a) is a
    assert list(a) == [1, 1]


def test_zero():
    a = Array(4, default=9)
    assert a.zero() is a
    assert all(v == 0 for v in a)
    assert len(a) == 4