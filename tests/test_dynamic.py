import re

import pytest

from algodays.dynamic import (
    can_partition,
    coin_change,
    is_match,
    largest_altitude,
    length_of_lis,
    max_points,
    max_product,
    max_subarray_sum_circular,
    min_path_sum,
    minimum_total,
    num_decodings,
    num_squares,
    num_trees,
    strange_printer,
    word_break,
)


def test_num_trees_base_cases():
    assert num_trees(0) == 1
    assert num_trees(1) == 1


@pytest.mark.parametrize("n", range(2, 8))
def test_num_trees_recurrence(n):
    expected = sum(num_trees(r - 1) * num_trees(n - r) for r in range(1, n + 1))
    assert num_trees(n) == expected


def test_num_trees_negative():
    with pytest.raises(ValueError):
        num_trees(-1)


def test_num_decodings_leading_zero_and_empty():
    assert num_decodings("012") == 0
    assert num_decodings("") == 0


@pytest.mark.parametrize("n", range(3, 10))
def test_num_decodings_ones_follow_fibonacci(n):
    assert num_decodings("1" * n) == num_decodings("1" * (n - 1)) + num_decodings(
        "1" * (n - 2)
    )


def test_num_decodings_ten_has_single_reading():
    assert num_decodings("10") == num_decodings("1")


def test_max_product_all_positive_is_full_product():
    nums = [2, 3, 5, 7]
    assert max_product(nums) == 2 * 3 * 5 * 7


def test_max_product_single_element():
    assert max_product([-4]) == -4


def test_max_product_zero_separates_negatives():
    assert max_product([-2, 0, -1]) == 0


def test_max_product_even_negatives():
    nums = [-2, -3, 4]
    assert max_product(nums) == (-2) * (-3) * 4


def test_max_product_empty():
    with pytest.raises(ValueError):
        max_product([])


def test_num_squares_zero_and_squares():
    assert num_squares(0) == 0
    for k in range(1, 8):
        assert num_squares(k * k) == num_squares(1)


@pytest.mark.parametrize("n", range(1, 60))
def test_num_squares_bounds(n):
    result = num_squares(n)
    assert 1 <= result <= 4
    root = 1
    while root * root <= n:
        assert result <= num_squares(n - root * root) + 1
        root += 1


def test_max_points_single_row_is_row_max():
    row = [3, 9, 1, 4]
    assert max_points([row]) == max(row)


def test_max_points_single_column_is_sum():
    grid = [[5], [2], [8]]
    assert max_points(grid) == 5 + 2 + 8


def test_max_points_empty():
    with pytest.raises(ValueError):
        max_points([])


def test_strange_printer_distinct_letters():
    assert strange_printer("abcd") == len("abcd")


def test_strange_printer_repeated_letter():
    assert strange_printer("aaaaa") == strange_printer("a")
    assert strange_printer("") == 0


def test_strange_printer_never_exceeds_length():
    for s in ["aba", "abcabc", "aabbaa", "tbgtgb"]:
        assert 1 <= strange_printer(s) <= len(s)


@pytest.mark.parametrize(
    "s, p",
    [
        ("aa", "a"),
        ("aa", "a*"),
        ("ab", ".*"),
        ("aab", "c*a*b"),
        ("mississippi", "mis*is*p*."),
        ("", "a*b*"),
        ("abc", "a.c"),
        ("abcd", "a.c"),
        ("", ""),
        ("a", ""),
    ],
)
def test_is_match_agrees_with_re(s, p):
    assert is_match(s, p) == (re.fullmatch(p, s) is not None)


def test_coin_change_zero_amount():
    assert coin_change([3, 7], 0) == 0


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_single_coin_multiple():
    for k in range(1, 6):
        assert coin_change([4], 4 * k) == k


def test_coin_change_negative_amount():
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_word_break_concatenation():
    assert word_break("applepenapple", ["apple", "pen"]) is True


def test_word_break_missing_piece():
    assert word_break("catsandog", ["cats", "dog", "sand", "and", "cat"]) is False


def test_word_break_ignores_empty_words():
    assert word_break("ab", ["", "a"]) is False
    assert word_break("ab", ["", "a", "b"]) is True


def test_min_path_sum_single_row_and_no_mutation():
    grid = [[1, 2, 3]]
    assert min_path_sum(grid) == 1 + 2 + 3
    assert grid == [[1, 2, 3]]


def test_min_path_sum_uniform_grid():
    grid = [[2] * 4 for _ in range(4)]
    assert min_path_sum(grid) == 2 * (4 + 4 - 1)


def test_min_path_sum_empty():
    with pytest.raises(ValueError):
        min_path_sum([])


def test_length_of_lis_monotone():
    assert length_of_lis([1, 2, 3, 4, 5]) == len([1, 2, 3, 4, 5])
    assert length_of_lis([5, 4, 3, 2]) == 1
    assert length_of_lis([7, 7, 7]) == 1
    assert length_of_lis([]) == 0


def test_length_of_lis_bounded_by_sorted_unique():
    nums = [10, 9, 2, 5, 3, 7, 101, 18]
    assert length_of_lis(nums) <= len(set(nums))
    assert length_of_lis(nums) == length_of_lis(nums + [0])


def test_can_partition_doubled_list():
    nums = [1, 5, 11, 5]
    assert can_partition(nums + nums) is True
    assert can_partition([3, 3]) is True


def test_can_partition_odd_total_and_empty():
    assert can_partition([1, 2, 4]) is False
    assert can_partition([]) is False


def test_can_partition_negative_rejected():
    with pytest.raises(ValueError):
        can_partition([-1, 1])


def test_minimum_total_single_row():
    assert minimum_total([[-10]]) == -10


def test_minimum_total_constant_rows():
    triangle = [[1], [2, 2], [3, 3, 3], [4, 4, 4, 4]]
    assert minimum_total(triangle) == 1 + 2 + 3 + 4


def test_minimum_total_empty():
    with pytest.raises(ValueError):
        minimum_total([])


def test_max_subarray_sum_circular_all_negative():
    nums = [-3, -2, -5]
    assert max_subarray_sum_circular(nums) == max(nums)


def test_max_subarray_sum_circular_all_positive():
    nums = [4, 1, 6]
    assert max_subarray_sum_circular(nums) == sum(nums)


def test_max_subarray_sum_circular_rotation_invariant():
    nums = [5, -3, 5, -7, 2]
    expected = max_subarray_sum_circular(nums)
    for i in range(len(nums)):
        assert max_subarray_sum_circular(nums[i:] + nums[:i]) == expected


def test_max_subarray_sum_circular_empty():
    with pytest.raises(ValueError):
        max_subarray_sum_circular([])


def test_largest_altitude():
    assert largest_altitude([-1, -2, -3]) == 0
    assert largest_altitude([1, 2, 3]) == 1 + 2 + 3
    assert largest_altitude([]) == 0