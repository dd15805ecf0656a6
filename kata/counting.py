"""Algorithms built on counting occurrences of values."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Sequence


def group_the_people(group_sizes: Sequence[int]) -> list[list[int]]:
    """Split people into groups whose size matches each member's wanted size.

    People wanting the same size are grouped in index order; a trailing group
    that never fills up is dropped.
    """
    by_size: dict[int, list[int]] = defaultdict(list)
    for person, size in enumerate(group_sizes):
        by_size[size].append(person)
    groups: list[list[int]] = []
    for size, people in by_size.items():
        group: list[int] = []
        for person in people:
            group.append(person)
            if len(group) == size:
                groups.append(group)
                group = []
    return groups


def display_table(orders: Sequence[Sequence[str]]) -> list[list[str]]:
    """Tabulate ``[customer, table, food]`` orders.

    The first row is ``Table`` followed by the food items in sorted order;
    each following row holds a table number, in ascending order, and how many
    of each item it ordered.
    """
    per_table: dict[int, Counter[str]] = defaultdict(Counter)
    foods: set[str] = set()
    for _customer, table, food in orders:
        foods.add(food)
        per_table[int(table)][food] += 1
    menu = sorted(foods)
    rows = [["Table", *menu]]
    for table in sorted(per_table):
        counts = per_table[table]
        rows.append([str(table), *(str(counts[food]) for food in menu)])
    return rows


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Count the index pairs ``i < j`` holding equal values."""
    seen: Counter[int] = Counter()
    pairs = 0
    for value in nums:
        pairs += seen[value]
        seen[value] += 1
    return pairs


def majority_element(nums: Sequence[int]) -> int:
    """Return the value held by more than half the positions, or ``-1``."""
    half = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > half:
            return value
    return -1


def sum_of_unique(nums: Sequence[int]) -> int:
    """Sum the values that occur exactly once."""
    return sum(value for value, count in Counter(nums).items() if count == 1)


def finding_users_active_minutes(logs: Sequence[Sequence[int]], k: int) -> list[int]:
    """Histogram users by their number of distinct active minutes.

    Entry ``j`` of the result (zero-based) counts the users active during
    exactly ``j + 1`` distinct minutes.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    minutes: dict[int, set[int]] = defaultdict(set)
    for user, minute in logs:
        minutes[user].add(minute)
    histogram = [0] * k
    for user, active in minutes.items():
        if len(active) > k:
            raise ValueError(f"user {user} is active for more than {k} minutes")
        histogram[len(active) - 1] += 1
    return histogram


def count_k_difference(nums: Sequence[int], k: int) -> int:
    """Count index pairs whose values differ by ``k``.

    With ``k == 0`` each pair of equal values is counted twice.
    """
    seen: Counter[int] = Counter()
    pairs = 0
    for value in nums:
        pairs += seen[value - k] + seen[value + k]
        seen[value] += 1
    return pairs


def find_lonely(nums: Sequence[int]) -> list[int]:
    """Return, sorted, the values seen once whose neighbours are both absent."""
    counts = Counter(nums)
    return sorted(
        value
        for value, count in counts.items()
        if count == 1 and value - 1 not in counts and value + 1 not in counts
    )


def find_difference(nums1: Sequence[int], nums2: Sequence[int]) -> list[list[int]]:
    """Return the sorted distinct values only in ``nums1`` and only in ``nums2``."""
    first, second = set(nums1), set(nums2)
    return [sorted(first - second), sorted(second - first)]


def find_winners(matches: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the players who never lost and those who lost exactly once.

    Each match is ``[winner, loser]``; only players who won at least once can
    appear in the first list. Both lists are sorted.
    """
    losses = Counter(loser for _winner, loser in matches)
    unbeaten = sorted({winner for winner, _loser in matches if losses[winner] == 0})
    once_beaten = sorted(player for player, count in losses.items() if count == 1)
    return [unbeaten, once_beaten]


def most_frequent_even(nums: Sequence[int]) -> int:
    """Return the most frequent even value, the smallest on ties, or ``-1``."""
    evens = Counter(value for value in nums if value % 2 == 0)
    if not evens:
        return -1
    return min(evens, key=lambda value: (-evens[value], value))


def find_intersection_values(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Count the elements of each list whose value occurs in the other."""
    first, second = set(nums1), set(nums2)
    return [
        sum(1 for value in nums1 if value in second),
        sum(1 for value in nums2 if value in first),
    ]


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, least frequent of them first.

    Ties on frequency favour the larger value. When fewer than ``k`` distinct
    values exist, the front of the result is padded with zeros.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    ranked = sorted(((count, value) for value, count in Counter(nums).items()), reverse=True)
    chosen = ranked[:k]
    return [0] * (k - len(chosen)) + [value for _count, value in reversed(chosen)]


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Return the values occurring exactly twice, in order of first appearance."""
    return [value for value, count in Counter(nums).items() if count == 2]


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return, ascending, the numbers of ``1..len(nums)`` absent from ``nums``."""
    present = set(nums)
    return [number for number in range(1, len(nums) + 1) if number not in present]