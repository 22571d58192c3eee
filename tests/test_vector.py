import pytest

from dstructs.common import EmptyCollectionError, IndexOutOfRangeError
from dstructs.vector import Vector

SAMPLE = [1, 2, 3, 4, 5]


def test_construct_from_list_and_mapping():
    assert Vector(SAMPLE).to_list() == SAMPLE
    assert Vector({"a": 1, "b": 2}).to_list() == [1, 2]
    assert len(Vector()) == 0


def test_construct_rejects_non_iterable():
    with pytest.raises(TypeError, match="array or traversable"):
        Vector(5)
    with pytest.raises(TypeError):
        Vector("abc")


def test_default_capacity_is_minimum():
    assert Vector().capacity() == 8


def test_capacity_grows_with_size():
    vector = Vector()
    for value in range(50):
        vector.push(value)
        assert vector.capacity() >= len(vector)
    assert vector.to_list() == list(range(50))


def test_allocate_only_grows():
    vector = Vector()
    vector.allocate(100)
    assert vector.capacity() == 100
    vector.allocate(10)
    assert vector.capacity() == 100


def test_clear_resets_capacity():
    vector = Vector(range(40))
    vector.clear()
    assert len(vector) == 0
    assert vector.capacity() == 8


def test_capacity_shrinks_after_pops():
    vector = Vector(range(64))
    grown = vector.capacity()
    while vector:
        vector.pop()
    assert vector.capacity() < grown
    assert vector.capacity() >= 8


def test_push_multiple_and_pop_order():
    vector = Vector()
    vector.push(*SAMPLE)
    assert vector.pop() == SAMPLE[-1]
    assert vector.to_list() == SAMPLE[:-1]


def test_pop_and_shift_empty_raise():
    with pytest.raises(EmptyCollectionError):
        Vector().pop()
    with pytest.raises(EmptyCollectionError):
        Vector().shift()


def test_shift_returns_first():
    vector = Vector(SAMPLE)
    assert vector.shift() == SAMPLE[0]
    assert vector.to_list() == SAMPLE[1:]


def test_unshift_keeps_order():
    vector = Vector(["c"])
    vector.unshift("a", "b")
    assert vector.to_list() == ["a", "b", "c"]


def test_insert_middle_and_end():
    vector = Vector(SAMPLE)
    vector.insert(2, "x", "y")
    assert vector.to_list() == SAMPLE[:2] + ["x", "y"] + SAMPLE[2:]
    vector.insert(len(vector), "z")
    assert vector.last() == "z"


def test_insert_out_of_range():
    with pytest.raises(IndexOutOfRangeError):
        Vector(SAMPLE).insert(len(SAMPLE) + 1, "x")
    with pytest.raises(IndexOutOfRangeError):
        Vector(SAMPLE).insert(-1, "x")


def test_remove_returns_value():
    vector = Vector(SAMPLE)
    assert vector.remove(1) == SAMPLE[1]
    assert vector.to_list() == SAMPLE[:1] + SAMPLE[2:]
    with pytest.raises(IndexOutOfRangeError):
        vector.remove(len(vector))


def test_get_set_and_item_access():
    vector = Vector(SAMPLE)
    vector[0] = "first"
    assert vector[0] == "first"
    vector.set(4, "last")
    assert vector.get(4) == "last"


def test_get_out_of_range_message():
    with pytest.raises(IndexOutOfRangeError, match="Index out of range"):
        Vector(SAMPLE).get(10)
    with pytest.raises(IndexOutOfRangeError):
        Vector().get(0)


def test_get_requires_integer():
    with pytest.raises(TypeError, match="Index must be of type integer"):
        Vector(SAMPLE).get("1")


def test_find_uses_identity():
    vector = Vector([1, "1", 1.0])
    assert vector.find("1") == 1
    assert vector.find(1.0) == 2
    assert vector.find(True) is None


def test_contains():
    vector = Vector(SAMPLE)
    assert vector.contains(1, 2)
    assert not vector.contains(1, "2")
    assert vector.contains()


def test_join():
    assert Vector(SAMPLE).join() == "12345"
    assert Vector(SAMPLE).join(", ") == "1, 2, 3, 4, 5"
    assert Vector().join(",") == ""


def test_first_and_last():
    vector = Vector(SAMPLE)
    assert vector.first() == SAMPLE[0]
    assert vector.last() == SAMPLE[-1]
    with pytest.raises(EmptyCollectionError):
        Vector().first()
    with pytest.raises(EmptyCollectionError):
        Vector().last()


def test_reverse_and_reversed():
    vector = Vector(SAMPLE)
    copy = vector.reversed()
    assert copy.to_list() == list(reversed(SAMPLE))
    assert vector.to_list() == SAMPLE
    vector.reverse()
    assert vector.to_list() == copy.to_list()


def test_rotate_example():
    vector = Vector(SAMPLE)
    vector.rotate(2)
    assert vector.to_list() == [3, 4, 5, 1, 2]


@pytest.mark.parametrize("rotations", [1, 2, 3, 7, 13])
def test_rotate_round_trip(rotations):
    vector = Vector(SAMPLE)
    vector.rotate(rotations)
    vector.rotate(-rotations)
    assert vector.to_list() == SAMPLE


def test_rotate_full_cycle_is_noop():
    vector = Vector(SAMPLE)
    vector.rotate(len(SAMPLE))
    assert vector.to_list() == SAMPLE
    vector.rotate(-len(SAMPLE))
    assert vector.to_list() == SAMPLE


def test_sort_default_and_comparator():
    values = [3, 1, 5, 2, 4]
    vector = Vector(values)
    vector.sort()
    assert vector.to_list() == sorted(values)
    vector.sort(lambda a, b: b - a)
    assert vector.to_list() == sorted(values, reverse=True)


def test_apply_and_map():
    vector = Vector(SAMPLE)
    mapped = vector.map(lambda v: v * 10)
    assert mapped.to_list() == [v * 10 for v in SAMPLE]
    assert mapped.capacity() == vector.capacity()
    vector.apply(str)
    assert vector.to_list() == [str(v) for v in SAMPLE]


def test_filter_without_callback_drops_falsy():
    vector = Vector([0, 1, "", "0", "a", None, [], 2])
    assert vector.filter().to_list() == [1, "a", 2]


def test_filter_with_callback():
    vector = Vector(SAMPLE)
    assert vector.filter(lambda v: v % 2).to_list() == [v for v in SAMPLE if v % 2]
    assert Vector().filter(bool).to_list() == []


def test_reduce():
    vector = Vector(SAMPLE)
    assert vector.reduce(lambda carry, v: carry + v, 0) == sum(SAMPLE)
    assert Vector().reduce(lambda carry, v: v) is None


@pytest.mark.parametrize(
    "index,length",
    [(0, None), (1, 2), (-2, None), (1, -1), (10, 2), (0, 100), (-100, 2)],
)
def test_slice_matches_normalized_bounds(index, length):
    result = Vector(SAMPLE).slice(index, length)
    assert len(result) <= len(SAMPLE)
    assert all(value in SAMPLE for value in result)
    assert result.capacity() >= 8


def test_slice_values():
    assert Vector(SAMPLE).slice(1, 2).to_list() == SAMPLE[1:3]
    assert Vector(SAMPLE).slice(-2).to_list() == SAMPLE[-2:]
    assert Vector(SAMPLE).slice(1, -1).to_list() == SAMPLE[1:-1]
    assert Vector(SAMPLE).slice(10).to_list() == []


def test_merge_leaves_original():
    vector = Vector(SAMPLE)
    merged = vector.merge([6, 7])
    assert merged.to_list() == SAMPLE + [6, 7]
    assert vector.to_list() == SAMPLE
    with pytest.raises(TypeError):
        vector.merge(None)


def test_copy_is_independent():
    vector = Vector(SAMPLE)
    clone = vector.copy()
    clone.push(6)
    assert vector.to_list() == SAMPLE
    assert clone.to_list() == SAMPLE + [6]


def test_sum_with_numeric_strings():
    assert Vector(SAMPLE).sum() == sum(SAMPLE)
    assert Vector([1, "2", 3.5]).sum() == 6.5
    assert Vector().sum() == 0


def test_isset():
    vector = Vector([None, 0, 1])
    assert not vector.isset(0)
    assert vector.isset(1)
    assert not vector.isset(1, True)
    assert vector.isset(2, True)
    assert not vector.isset(5)
    assert not vector.isset(-1)


def test_iteration():
    assert list(Vector(SAMPLE)) == SAMPLE