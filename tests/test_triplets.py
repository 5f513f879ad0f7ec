import random

from leetkit.triplets import num_triplets


def test_pinned_examples():
    assert num_triplets([7, 4], [5, 2, 8, 9]) == 1
    assert num_triplets([1, 1], [1, 1, 1]) == 9


def test_no_matches():
    assert num_triplets([4, 7, 9, 11, 23], [3, 5, 1024, 12, 18]) == 0


def test_empty_lists():
    assert num_triplets([], []) == 0
    assert num_triplets([3], []) == 0


def test_swapping_lists_gives_same_count():
    rng = random.Random(3)
    for _ in range(50):
        a = [rng.randint(1, 6) for _ in range(rng.randint(0, 6))]
        b = [rng.randint(1, 6) for _ in range(rng.randint(0, 6))]
        assert num_triplets(a, b) == num_triplets(b, a)


def test_order_within_lists_does_not_matter():
    a, b = [7, 7, 8, 3], [1, 2, 9, 7]
    assert num_triplets(list(reversed(a)), list(reversed(b))) == num_triplets(a, b)


def test_large_values_do_not_overflow():
    big = 100000
    assert num_triplets([big], [big, big]) == num_triplets([1], [1, 1])