import pytest

from rayforge.index2 import Index2


def test_aliases():
    idx = Index2(3, 8)
    assert idx.i == 3
    assert idx.j == 8


def test_add_sub_roundtrip():
    a = Index2(5, -2)
    b = Index2(7, 11)
    assert (a + b) - b == a


def test_add_scalar_applies_to_both():
    a = Index2(4, 9)
    assert (a + 3) - 3 == a
    s = a + 1
    assert s.x - a.x == s.y - a.y


def test_add_bad_type():
    with pytest.raises(TypeError):
        Index2(1, 2) + 1.5


def test_getitem():
    idx = Index2(6, 2)
    assert idx[0] == 6
    assert idx[1] == 2
    with pytest.raises(IndexError):
        idx[2]


def test_min_max():
    idx = Index2(6, 2)
    assert idx.min() == 2
    assert idx.max() == 6


def test_prod():
    assert Index2(3, 4).prod() == 12


def test_clamp_inside_unchanged():
    idx = Index2(2, 3)
    assert idx.clamp(Index2(10, 10)) == idx


def test_clamp_negative_to_zero_and_high_to_edge():
    size = Index2(5, 8)
    clamped = Index2(-4, 100).clamp(size)
    assert clamped.x == 0
    assert clamped.y == size.y - 1


def test_equality_and_immutability():
    a = Index2(1, 2)
    assert a == Index2(1, 2)
    assert a != Index2(2, 1)
    with pytest.raises(AttributeError):
        a.x = 5