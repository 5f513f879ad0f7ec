import random

from leetkit.sort_array import sort_array


def test_matches_builtin_sort():
    rng = random.Random(11)
    for _ in range(200):
        nums = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        assert sort_array(nums) == sorted(nums)


def test_empty_and_single():
    assert sort_array([]) == []
    assert sort_array([5]) == [5]


def test_input_is_not_modified():
    nums = [5, 1, 1, 2, 0, 0]
    copy = list(nums)
    result = sort_array(nums)
    assert nums == copy
    assert result == sorted(copy)


def test_result_is_ordered_permutation():
    nums = [5, 2, 3, 1]
    result = sort_array(nums)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(nums)
    assert len(result) == len(nums)


def test_sorting_is_idempotent():
    nums = [3, -1, 4, -1, 5, -9, 2, 6]
    once = sort_array(nums)
    assert sort_array(once) == once