import pytest

from lift.walk import walks_to_depth, validate_level
from lift.walk import InvalidDepthError, StructureMismatchError


def test_walks_to_depth():
    @walks_to_depth(2)
    def shout(value):
        return value.upper()

    assert shout([["a", "b"], ["c"]]) == [["A", "B"], ["C"]]
    assert shout([]) == []
    assert shout.level == 2


def test_walks_to_depth_zero_is_plain_call():
    seen = []

    @walks_to_depth(0)
    def record(value):
        seen.append(value)
        return 'done'

    assert record({"not": "a list"}) == 'done'
    assert seen == [{"not": "a list"}]


def test_returned_structure_may_nest_further():
    @walks_to_depth(1)
    def pair(value):
        return [value, value]

    assert pair([1, 2]) == [[1, 1], [2, 2]]


@pytest.mark.parametrize("level", [0, 1, 7])
def test_validate_level_accepts(level):
    assert validate_level(level) == level


@pytest.mark.parametrize("level", [-1, 2.5, "1", True, None])
def test_validate_level_rejects(level):
    with pytest.raises(InvalidDepthError):
        validate_level(level)


def test_mismatch_message():
    @walks_to_depth(3)
    def noop(value):
        return value

    with pytest.raises(StructureMismatchError) as excinfo:
        noop([[[1]], ["x"]])

    err = excinfo.value
    assert err.path == (1, 0)
    assert err.depth == 2
    assert err.level == 3
    assert str(err) == 'Expected a list at path [1, 0] to descend 3 level(s), found str at depth 2'
