import pytest

from kata.counting import (
    count_k_difference,
    display_table,
    find_difference,
    find_disappeared_numbers,
    find_duplicates,
    find_intersection_values,
    find_lonely,
    find_winners,
    finding_users_active_minutes,
    group_the_people,
    majority_element,
    most_frequent_even,
    num_identical_pairs,
    sum_of_unique,
    top_k_frequent,
)


@pytest.mark.parametrize(
    "sizes", [[3, 3, 3, 3, 3, 1, 3], [2, 1, 3, 3, 3, 2], [1], [4, 4, 4, 4]]
)
def test_group_the_people_groups_match_sizes(sizes):
    groups = group_the_people(sizes)
    members = sorted(person for group in groups for person in group)
    assert members == list(range(len(sizes)))
    for group in groups:
        assert all(sizes[person] == len(group) for person in group)


def test_group_the_people_drops_unfilled_group():
    groups = group_the_people([2, 2, 2])
    assert [len(group) for group in groups] == [2]
    assert groups[0] == sorted(groups[0])


def test_display_table_worked_example():
    orders = [
        ["David", "3", "Ceviche"],
        ["Corina", "10", "Beef Burrito"],
        ["David", "3", "Fried Chicken"],
        ["Carla", "5", "Water"],
        ["Carla", "5", "Ceviche"],
        ["Rous", "3", "Ceviche"],
    ]
    assert display_table(orders) == [
        ["Table", "Beef Burrito", "Ceviche", "Fried Chicken", "Water"],
        ["3", "0", "2", "1", "0"],
        ["5", "0", "1", "0", "1"],
        ["10", "1", "0", "0", "0"],
    ]


def test_display_table_rejects_bad_table_number():
    with pytest.raises(ValueError):
        display_table([["Ann", "three", "Soup"]])


def test_display_table_empty_orders():
    assert display_table([]) == [["Table"]]


def test_num_identical_pairs_example():
    assert num_identical_pairs([1, 2, 3, 1, 1, 3]) == 4


def test_num_identical_pairs_distinct_values():
    assert num_identical_pairs([5, 6, 7]) == 0


def test_majority_element_found():
    assert majority_element([2, 2, 1, 1, 1, 2, 2]) == 2


def test_majority_element_missing():
    assert majority_element([1, 2]) == -1


def test_sum_of_unique():
    assert sum_of_unique([5, 7, 7]) == 5
    assert sum_of_unique([4, 4, 4]) == 0


def test_finding_users_active_minutes_example():
    logs = [[0, 5], [1, 2], [0, 2], [0, 5], [1, 3]]
    assert finding_users_active_minutes(logs, 5) == [0, 2, 0, 0, 0]


def test_finding_users_active_minutes_counts_every_user():
    logs = [[1, 1], [2, 2], [2, 3], [3, 9], [1, 1]]
    histogram = finding_users_active_minutes(logs, 4)
    assert len(histogram) == 4
    assert sum(histogram) == len({user for user, _ in logs})


def test_finding_users_active_minutes_too_many_minutes():
    with pytest.raises(ValueError):
        finding_users_active_minutes([[1, 1], [1, 2]], 1)


def test_count_k_difference_zero_counts_pairs_twice():
    nums = [1, 1, 2, 2, 2, 3]
    assert count_k_difference(nums, 0) == 2 * num_identical_pairs(nums)


def test_count_k_difference_order_independent():
    nums = [3, 2, 1, 5, 4]
    assert count_k_difference(nums, 2) == count_k_difference(nums[::-1], 2)


def test_count_k_difference_none():
    assert count_k_difference([1, 5], 2) == 0


def test_find_lonely():
    assert find_lonely([10, 6, 5, 8]) == [8, 10]
    assert find_lonely([1, 3, 5, 3]) == [1, 5]


def test_find_difference():
    assert find_difference([1, 2, 3], [2, 4, 6]) == [[1, 3], [4, 6]]
    assert find_difference([1, 2, 3, 3], [1, 1, 2, 2]) == [[3], []]


def test_find_winners_example():
    matches = [
        [1, 3], [2, 3], [3, 6], [5, 6], [5, 7],
        [4, 5], [4, 8], [4, 9], [10, 4], [10, 9],
    ]
    assert find_winners(matches) == [[1, 2, 10], [4, 5, 7, 8]]


def test_find_winners_player_beaten_twice_is_absent():
    result = find_winners([[2, 3], [1, 3], [5, 4], [6, 4]])
    assert result == [[1, 2, 5, 6], []]


def test_most_frequent_even():
    assert most_frequent_even([0, 1, 2, 2, 4, 4, 1]) == 2
    assert most_frequent_even([4, 4, 4, 9, 2, 4]) == 4
    assert most_frequent_even([29, 47, 21, 41, 13, 37, 25, 7]) == -1


def test_find_intersection_values_symmetry():
    a, b = [4, 3, 2, 3, 1], [2, 2, 5, 2, 3, 6]
    forward = find_intersection_values(a, b)
    assert find_intersection_values(b, a) == forward[::-1]


def test_find_intersection_values_extremes():
    assert find_intersection_values([1, 2], [3, 4]) == [0, 0]
    nums = [7, 7, 8]
    assert find_intersection_values(nums, nums) == [len(nums), len(nums)]


def test_top_k_frequent_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [2, 1]


def test_top_k_frequent_pads_with_zeros():
    assert top_k_frequent([7], 3) == [0, 0, 7]


def test_top_k_frequent_negative_k():
    with pytest.raises(ValueError):
        top_k_frequent([1, 2], -1)


def test_find_duplicates():
    assert sorted(find_duplicates([4, 3, 2, 7, 8, 2, 3, 1])) == [2, 3]
    assert find_duplicates([5, 5, 5]) == []


def test_find_disappeared_numbers():
    assert find_disappeared_numbers([4, 3, 2, 7, 8, 2, 3, 1]) == [5, 6]
    assert find_disappeared_numbers([1, 1]) == [2]
    assert find_disappeared_numbers([]) == []