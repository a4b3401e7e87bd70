import pytest

from rayforge.quadtree import (
    Direction,
    QuadtreeKey,
    neighbor_child_code,
    neighbor_code,
)


def test_neighbor_tables_match_layout():
    assert neighbor_code(Direction.LEFT) == (2, 0, 3, 1)
    assert neighbor_code(Direction.UP) == (0, 1, 2, 3)
    assert neighbor_child_code(Direction.DOWN) == (1, 3)


@pytest.mark.parametrize("direction", list(Direction))
def test_neighbor_code_is_permutation(direction):
    assert sorted(neighbor_code(direction)) == [0, 1, 2, 3]


@pytest.mark.parametrize("direction", list(Direction))
def test_child_codes_are_distinct_children(direction):
    codes = neighbor_child_code(direction)
    assert len(set(codes)) == 2
    assert all(0 <= c < 4 for c in codes)


def test_invalid_direction():
    with pytest.raises(ValueError):
        neighbor_code(7)


@pytest.mark.parametrize("child", range(4))
def test_push_then_child_index(child):
    key = QuadtreeKey(1, 1).push_child(child)
    assert key.child_index(1) == child


@pytest.mark.parametrize("child", range(4))
def test_push_pop_roundtrip(child):
    key = QuadtreeKey(5, 3)
    assert key.push_child(child).pop_child() == key


def test_child_key_matches_push_and_leaves_original():
    key = QuadtreeKey(2, 7)
    assert key.child_key(3) == key.push_child(3)
    assert key == QuadtreeKey(2, 7)


def test_pop_children_equals_repeated_pop():
    key = QuadtreeKey(1, 1)
    path = [3, 0, 2, 1]
    for c in path:
        key = key.push_child(c)
    expected = key
    for _ in range(3):
        expected = expected.pop_child()
    assert key.pop_children(3) == expected


def test_child_index_at_each_level_recovers_path():
    key = QuadtreeKey(1, 1)
    path = [2, 1, 3, 0]
    for c in path:
        key = key.push_child(c)
    recovered = [key.child_index(1 << level) for level in reversed(range(len(path)))]
    assert recovered == path


def test_key_is_quadtree_key():
    key = QuadtreeKey(0, 0).push_child(1).pop_child()
    assert isinstance(key, QuadtreeKey)
    assert key == QuadtreeKey(0, 0)