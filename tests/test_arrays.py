from collections import Counter

import pytest

from algodays.arrays import (
    can_arrange,
    candy,
    chalk_replacer,
    get_winner,
    largest_vals_from_labels,
    longest_ones,
    longest_subarray,
    max_number,
    min_difference,
    single_number_ii,
    single_number_iii,
    sort_people,
)


@pytest.mark.parametrize("nums", [[], [7], [5, 3, 2, 4], [1, 100, 1000, 10000]])
def test_min_difference_small_arrays_need_no_moves(nums):
    assert min_difference(nums) == 0


def test_min_difference_three_outliers_can_be_removed():
    assert min_difference([10, 10, 10, 10, -500, 900, 3000]) == 0


def test_min_difference_bounded_and_order_independent():
    nums = [6, 6, 0, 1, 1, 4, 6, 20, -3]
    original = list(nums)
    result = min_difference(nums)
    assert 0 <= result <= max(nums) - min(nums)
    assert result == min_difference(sorted(nums))
    assert nums == original


def test_max_number_single_source_keeps_largest_digits():
    assert max_number([9, 8, 7], [], 2) == [9, 8]


def test_max_number_length_and_digit_origin():
    n1, n2 = [3, 4, 6, 5], [9, 1, 2, 5, 8, 3]
    result = max_number(n1, n2, 5)
    assert len(result) == 5
    assert not Counter(result) - Counter(n1 + n2)
    assert result[0] == 9
    assert result >= n1[:2] + n2[:3]
    assert result >= n2[:5]


def test_max_number_using_every_digit():
    n1, n2 = [6, 7], [6, 0, 4]
    result = max_number(n1, n2, 5)
    assert result == [6, 7, 6, 0, 4]
    assert sorted(result) == sorted(n1 + n2)


def test_max_number_too_many_digits_gives_empty():
    assert max_number([1], [2], 3) == []


def test_max_number_negative_k_raises():
    with pytest.raises(ValueError):
        max_number([1], [2], -1)


def test_candy_empty_and_equal():
    assert candy([]) == 0
    ratings = [4, 4, 4, 4, 4]
    assert candy(ratings) == len(ratings)


def test_candy_valley():
    assert candy([1, 0, 2]) == 5


def test_candy_increasing_and_symmetric():
    ratings = list(range(1, 8))
    assert candy(ratings) == sum(range(1, len(ratings) + 1))
    assert candy(ratings[::-1]) == candy(ratings)
    mixed = [3, 1, 4, 1, 5, 9, 2, 6]
    assert candy(mixed) == candy(mixed[::-1])
    assert candy(mixed) >= len(mixed)


def test_sort_people_example():
    assert sort_people(["Mary", "John", "Emma"], [180, 165, 170]) == [
        "Mary",
        "Emma",
        "John",
    ]


def test_sort_people_is_permutation_sorted_by_height():
    names = ["a", "b", "c", "d"]
    heights = [150, 190, 160, 175]
    result = sort_people(names, heights)
    assert sorted(result) == sorted(names)
    ranked = [heights[names.index(name)] for name in result]
    assert ranked == sorted(heights, reverse=True)


def test_sort_people_length_mismatch():
    with pytest.raises(ValueError):
        sort_people(["a"], [1, 2])


def test_get_winner_large_k_gives_maximum():
    arr = [2, 1, 3, 5, 4, 6, 7]
    assert get_winner(arr, len(arr) + 10) == max(arr)
    assert get_winner(arr, 2) in arr


def test_get_winner_first_round():
    assert get_winner([2, 1], 1) == 2


def test_get_winner_empty_raises():
    with pytest.raises(ValueError):
        get_winner([], 1)


def test_longest_ones_enough_flips_cover_everything():
    nums = [1, 0, 0, 1, 0, 1]
    assert longest_ones(nums, nums.count(0)) == len(nums)
    assert longest_ones([1, 1, 1], 0) == 3


def test_longest_ones_no_flips():
    assert longest_ones([1, 1, 0, 1, 1, 1], 0) == 3


def test_longest_ones_monotone_in_k():
    nums = [0, 0, 1, 1, 0, 0, 1, 1, 1, 0, 1, 1, 0, 0, 0, 1, 1, 1, 1]
    lengths = [longest_ones(nums, k) for k in range(6)]
    assert lengths == sorted(lengths)


def test_longest_ones_negative_k_raises():
    with pytest.raises(ValueError):
        longest_ones([1], -1)


def test_single_number_iii():
    assert sorted(single_number_iii([1, 2, 1, 3, 2, 5])) == [3, 5]
    assert single_number_iii([5, 1, 1, 3]) == [5, 3]
    assert single_number_iii([4, 4]) == []


def test_chalk_replacer_invariants():
    chalk = [5, 1, 5]
    assert chalk_replacer(chalk, chalk[0] - 1) == 0
    assert chalk_replacer(chalk, sum(chalk)) == 0
    assert chalk_replacer(chalk, chalk[0]) == 1
    assert chalk_replacer(chalk, 1000) in range(len(chalk))


def test_chalk_replacer_no_chalk_raises():
    with pytest.raises(ValueError):
        chalk_replacer([0, 0], 5)


def test_longest_subarray():
    block = [9, 9, 9]
    nums = [1] + block + [2] + [9, 9]
    assert longest_subarray(nums) == len(block)
    assert longest_subarray([4, 4, 4, 4]) == 4


def test_longest_subarray_empty_raises():
    with pytest.raises(ValueError):
        longest_subarray([])


def test_can_arrange():
    assert can_arrange([1, 2, 3, 4, 5, 10, 6, 7, 8, 9], 5) is True
    assert can_arrange([1, 2, 3, 4, 5, 6], 10) is False
    assert can_arrange([-1, 1, -2, 2], 3) is True


def test_can_arrange_bad_k():
    with pytest.raises(ValueError):
        can_arrange([1, 2], 0)


def test_largest_vals_from_labels_invariants():
    values = [5, 4, 3, 2, 1]
    labels = [1, 1, 2, 2, 3]
    assert largest_vals_from_labels(values, labels, len(values), len(values)) == sum(
        values
    )
    assert largest_vals_from_labels(values, labels, 1, 1) == max(values)
    assert largest_vals_from_labels(values, [7] * 5, 3, 1) == max(values)
    assert largest_vals_from_labels(values, labels, 0, 2) == 0


def test_largest_vals_from_labels_length_mismatch():
    with pytest.raises(ValueError):
        largest_vals_from_labels([1, 2], [1], 1, 1)


def test_single_number_ii():
    assert single_number_ii([2, 2, 3, 2]) == 3
    assert single_number_ii([0, 1, 0, 1, 0, 1, 99]) == 99
    assert single_number_ii([8, 8, 8]) == -1