import bisect

import pytest

from algosolve.arrays import (
    contains_nearby_duplicate,
    count_valid_selections,
    find_error_nums,
    find_final_value,
    find_max_consecutive_ones,
    get_concatenation,
    get_sneaky_numbers,
    k_length_apart,
    min_number_operations,
    minimum_boxes,
    minimum_index,
    num_special,
    search_insert,
    triangular_sum,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, -2, -3, -4, -5], -8)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i != j
    assert nums[i] + nums[j] == target
    assert nums[i] <= nums[j]


def test_two_sum_without_pair_is_empty():
    assert two_sum([1, 2, 3], 100) == []
    assert two_sum([], 0) == []


@pytest.mark.parametrize("target", range(-1, 9))
def test_search_insert_matches_insertion_point(target):
    nums = [1, 3, 5, 6]
    assert search_insert(nums, target) == bisect.bisect_left(nums, target)


def test_search_insert_found_value_with_duplicates():
    nums = [1, 2, 2, 2, 2, 3]
    assert nums[search_insert(nums, 2)] == 2


def test_search_insert_empty():
    assert search_insert([], 7) == bisect.bisect_left([], 7)


def test_contains_nearby_duplicate_distance():
    nums = [1, 2, 3, 1]
    distance = len(nums) - 1
    assert contains_nearby_duplicate(nums, distance) is True
    assert contains_nearby_duplicate(nums, distance - 1) is False


def test_contains_nearby_duplicate_distinct_values():
    assert contains_nearby_duplicate(list(range(20)), 19) is False


def test_find_max_consecutive_ones():
    assert find_max_consecutive_ones([1, 1, 0, 1, 1, 1]) == 3
    assert find_max_consecutive_ones([1] * 7) == len([1] * 7)
    assert find_max_consecutive_ones([0, 0, 0]) == 0
    assert find_max_consecutive_ones([]) == 0


@pytest.mark.parametrize("n, duplicate, missing", [(4, 2, 3), (2, 1, 2), (5, 5, 1)])
def test_find_error_nums(n, duplicate, missing):
    nums = [duplicate if value == missing else value for value in range(1, n + 1)]
    assert find_error_nums(nums) == [duplicate, missing]


@pytest.mark.parametrize("gap", [0, 1, 3])
def test_k_length_apart_gap(gap):
    nums = [1] + [0] * gap + [1]
    assert k_length_apart(nums, gap) is True
    assert k_length_apart(nums, gap + 1) is False


def test_k_length_apart_without_ones():
    assert k_length_apart([0, 0, 0, 0], 10) is True


@pytest.mark.parametrize("n", [1, 3, 5])
def test_num_special_identity(n):
    identity = [[int(i == j) for j in range(n)] for i in range(n)]
    assert num_special(identity) == n


def test_num_special_no_special():
    assert num_special([[1, 1], [1, 1]]) == 0
    assert num_special([[0, 0], [0, 0]]) == 0
    assert num_special([]) == 0


def test_min_number_operations_invariants():
    assert min_number_operations([4] * 6) == 4
    assert min_number_operations([1, 2, 3, 4, 9]) == 9
    assert min_number_operations([7]) == 7


def test_min_number_operations_empty():
    with pytest.raises(ValueError):
        min_number_operations([])


def test_get_concatenation():
    nums = [1, 2, 1]
    result = get_concatenation(nums)
    assert result == nums + nums
    assert nums == [1, 2, 1]
    assert get_concatenation([]) == []


def test_find_final_value_example():
    assert find_final_value([5, 3, 6, 1, 12], 3) == 24


def test_find_final_value_invariants():
    nums = [2, 4, 8, 9]
    result = find_final_value(nums, 2)
    assert result not in nums
    value = 2
    while value != result:
        assert value in nums
        value *= 2
    assert find_final_value(nums, 7) == 7


def test_find_final_value_zero_loops():
    with pytest.raises(ValueError):
        find_final_value([0, 1], 0)


def test_triangular_sum_simple_cases():
    assert triangular_sum([5]) == 5
    assert triangular_sum([]) == 0
    assert triangular_sum([0, 0, 0, 0]) == 0


def test_triangular_sum_is_a_digit():
    result = triangular_sum([9, 9, 9, 9, 9, 9])
    assert 0 <= result <= 9


@pytest.mark.parametrize(
    "apple, capacity",
    [([1, 3, 2], [4, 3, 1, 5, 2]), ([5, 5, 5], [2, 4, 2, 7]), ([1], [1, 1])],
)
def test_minimum_boxes_is_minimal(apple, capacity):
    total = sum(apple)
    boxes = minimum_boxes(apple, capacity)
    largest = sorted(capacity, reverse=True)
    assert sum(largest[:boxes]) >= total
    assert sum(largest[: boxes - 1]) < total


def test_minimum_boxes_not_enough_capacity():
    capacity = [1, 1, 1]
    assert minimum_boxes([10], capacity) == len(capacity)


def test_get_sneaky_numbers():
    n = 6
    nums = [4, 0, 5, 1, 3, 2, 4, 1]
    assert sorted(set(nums)) == list(range(n))
    assert get_sneaky_numbers(nums) == [1, 4]
    assert get_sneaky_numbers([0, 1, 2]) == []


def test_count_valid_selections_example():
    assert count_valid_selections([1, 0, 2, 0, 3]) == 2


def test_count_valid_selections_all_zero():
    nums = [0, 0, 0, 0]
    assert count_valid_selections(nums) == 2 * len(nums)


def test_count_valid_selections_no_zero():
    assert count_valid_selections([1, 2, 3]) == 0


def test_minimum_index_choice():
    capacity = [1, 5, 3, 7]
    item = 3
    index = minimum_index(capacity, item)
    assert capacity[index] >= item
    assert all(size < item or size >= capacity[index] for size in capacity)


def test_minimum_index_ties_and_none():
    assert minimum_index([4, 4], 2) == 0
    assert minimum_index([1, 2], 5) == -1
    assert minimum_index([], 1) == -1