"""Small algorithms over strings and characters."""

from __future__ import annotations

from collections import Counter, defaultdict
from itertools import groupby
from string import ascii_lowercase
from typing import Sequence

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_VOWELS = frozenset("aeiouAEIOU")


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A symbol smaller than the one after it is subtracted; unknown symbols
    count as zero.
    """
    values = [_ROMAN_VALUES.get(symbol, 0) for symbol in s]
    return sum(
        -value if value < following else value
        for value, following in zip(values, [*values[1:], 0])
    )


def max_power(s: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not s:
        raise ValueError("s must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(s))


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs:
        raise ValueError("strs must not be empty")
    prefix = []
    for column in zip(*strs):
        first = column[0]
        if any(char != first for char in column):
            break
        prefix.append(first)
    return "".join(prefix)


def interpret(command: str) -> str:
    """Read a goal-parser command: ``G`` stays, ``()`` is ``o``, ``(al)`` is ``al``."""
    return command.replace("()", "o").replace("(al)", "al")


def truncate_sentence(s: str, k: int) -> str:
    """Keep only the first ``k`` space-separated words of ``s``."""
    if k < 1:
        return s
    return " ".join(s.split(" ")[:k])


def reverse_prefix(word: str, ch: str) -> str:
    """Reverse ``word`` up to and including the first ``ch``.

    The word is returned unchanged when ``ch`` does not occur in it.
    """
    index = word.find(ch)
    if index < 0:
        return word
    return word[: index + 1][::-1] + word[index + 1 :]


def check_almost_equivalent(word1: str, word2: str) -> bool:
    """Tell whether no letter's count differs by more than three."""
    difference = Counter(word1)
    difference.subtract(word2)
    return all(abs(count) <= 3 for count in difference.values())


def check_string(s: str) -> bool:
    """Tell whether no ``a`` appears after the first ``b``."""
    first_b = s.find("b")
    return first_b < 0 or "a" not in s[first_b:]


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` with the substitution table given by ``key``.

    The first appearance of each non-space letter in ``key`` maps, in order,
    to ``a``, ``b``, ``c`` and so on. Spaces are kept.
    """
    table: dict[str, str] = {}
    for char in key:
        if char != " " and char not in table:
            table[char] = chr(ord("a") + len(table))
    decoded = []
    for char in message:
        if char == " ":
            decoded.append(" ")
            continue
        try:
            decoded.append(table[char])
        except KeyError:
            raise ValueError(f"character {char!r} does not appear in the key") from None
    return "".join(decoded)


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def minimized_string_length(s: str) -> int:
    """Return the number of distinct characters in ``s``."""
    return len(set(s))


def final_string(s: str) -> str:
    """Type ``s`` on a keyboard whose ``i`` key reverses what is written."""
    answer = ""
    for char in s:
        answer = answer[::-1] if char == "i" else answer + char
    return answer


def score_of_string(s: str) -> int:
    """Sum the absolute code differences of neighbouring characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in zip(s, s[1:]))


def find_permutation_difference(s: str, t: str) -> int:
    """Sum, over characters, the distance between their positions in ``s`` and ``t``."""
    offsets: defaultdict[str, int] = defaultdict(int)
    for position, (in_s, in_t) in enumerate(zip(s, t, strict=True)):
        offsets[in_s] += position
        offsets[in_t] -= position
    return sum(abs(offset) for offset in offsets.values())


def reverse_string(s: list[str]) -> None:
    """Reverse the list of characters ``s`` in place."""
    s.reverse()


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    vowels = [char for char in s if char in _VOWELS]
    return "".join(vowels.pop() if char in _VOWELS else char for char in s)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for position, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = position
        best = max(best, position - start + 1)
    return best


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the stones whose type is listed among ``jewels``."""
    counts = Counter(stones)
    return sum(counts[jewel] for jewel in jewels)


__all__ = [
    "ascii_lowercase",
]
__all__ = [
    "roman_to_int",
    "max_power",
    "longest_common_prefix",
    "interpret",
    "truncate_sentence",
    "reverse_prefix",
    "check_almost_equivalent",
    "check_string",
    "decode_message",
    "is_anagram",
    "minimized_string_length",
    "final_string",
    "score_of_string",
    "find_permutation_difference",
    "reverse_string",
    "reverse_vowels",
    "length_of_longest_substring",
    "num_jewels_in_stones",
]