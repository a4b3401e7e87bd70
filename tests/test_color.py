import pytest

from rayforge.color import Color, pack_color, pack_rgba, unpack_color


def test_from_bytes_full_scale():
    c = Color.from_bytes(255, 255, 255)
    assert c.r == 1.0 and c.g == 1.0 and c.b == 1.0 and c.a == 1.0


def test_from_bytes_zero():
    c = Color.from_bytes(0, 0, 0, 0)
    assert (c.r, c.g, c.b, c.a) == (0.0, 0.0, 0.0, 0.0)


def test_default_alpha_is_one():
    assert Color(0.2, 0.3, 0.4).a == 1.0


def test_add_then_subtract_round_trip():
    a = Color(0.1, 0.2, 0.3)
    b = Color(0.4, 0.5, 0.6)
    assert (a + b) - b == a


def test_arithmetic_resets_alpha():
    a = Color(0.1, 0.2, 0.3, 0.5)
    b = Color(0.1, 0.2, 0.3, 0.25)
    assert (a + b).a == 1.0
    assert (a * b).a == 1.0
    assert (a * 0.5).a == 1.0


def test_component_product():
    a = Color(0.5, 0.25, 1.0)
    b = Color(1.0, 1.0, 0.0)
    p = a * b
    assert (p.r, p.g, p.b) == (0.5, 0.25, 0.0)


def test_scalar_multiplication_commutes():
    c = Color(0.1, 0.2, 0.3)
    assert 2 * c == c * 2
    assert (c * 2).equals(c + c)


def test_multiply_by_one_is_identity():
    c = Color(0.7, 0.5, 0.1)
    assert c * 1.0 == c


def test_getitem_and_aliases():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert [c[i] for i in range(4)] == [c.r, c.g, c.b, c.a]
    assert (c.x, c.y, c.z, c.w) == (c.r, c.g, c.b, c.a)
    with pytest.raises(IndexError):
        c[4]


def test_equality_ignores_alpha():
    assert Color(0.1, 0.2, 0.3, 0.0) == Color(0.1, 0.2, 0.3, 1.0)


def test_equals_with_eps():
    a = Color(0.1, 0.2, 0.3)
    b = Color(0.15, 0.2, 0.3)
    assert not a == b
    assert a.equals(b, eps=0.1)


def test_pack_rgba_byte_order():
    assert pack_rgba(0x11, 0x22, 0x33, 0x44) == 0x44332211


def test_pack_rgba_default_alpha():
    assert pack_rgba(0, 0, 0) >> 24 == 255


def test_pack_white():
    assert pack_color(Color(1.0, 1.0, 1.0, 1.0)) == pack_rgba(255, 255, 255, 255)


@pytest.mark.parametrize("rgba", [(0, 0, 0, 0), (12, 34, 56, 78), (255, 128, 1, 200)])
def test_unpack_matches_from_bytes(rgba):
    c = unpack_color(pack_rgba(*rgba))
    expected = Color.from_bytes(*rgba)
    assert (c.r, c.g, c.b, c.a) == (expected.r, expected.g, expected.b, expected.a)