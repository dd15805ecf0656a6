"""Small algorithms over lists of words and sentences."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

_RULE_COLUMNS = {"type": 0, "color": 1, "name": 2}

_INCREMENTS = frozenset({"X++", "++X"})

_MORSE = dict(
    zip(
        "abcdefghijklmnopqrstuvwxyz",
        (
            ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..",
            ".---", "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.",
            "...", "-", "..-", "...-", ".--", "-..-", "-.--", "--..",
        ),
    )
)


def array_strings_are_equal(word1: Sequence[str], word2: Sequence[str]) -> bool:
    """Tell whether both lists of pieces spell the same string."""
    return "".join(word1) == "".join(word2)


def count_matches(
    items: Sequence[Sequence[str]], rule_key: str, rule_value: str
) -> int:
    """Count the ``[type, color, name]`` items whose ``rule_key`` field is ``rule_value``.

    An unknown rule key matches nothing.
    """
    column = _RULE_COLUMNS.get(rule_key)
    if column is None:
        return 0
    return sum(1 for item in items if item[column] == rule_value)


def final_value_after_operations(operations: Sequence[str]) -> int:
    """Apply ``X++``/``++X`` as increments and anything else as a decrement to zero."""
    return sum(1 if operation in _INCREMENTS else -1 for operation in operations)


def count_words(words1: Sequence[str], words2: Sequence[str]) -> int:
    """Count the words that occur exactly once in each list."""
    first = Counter(words1)
    second = Counter(words2)
    return sum(
        1 for word, count in first.items() if count == 1 and second[word] == 1
    )


def most_words_found(sentences: Sequence[str]) -> int:
    """Return the largest number of space-separated words in one sentence."""
    return max((sentence.count(" ") + 1 for sentence in sentences), default=0)


def number_of_beams(bank: Sequence[str]) -> int:
    """Count the beams between devices (``1``) on successive non-empty rows."""
    total = 0
    previous = 0
    for row in bank:
        devices = row.count("1")
        if devices:
            total += previous * devices
            previous = devices
    return total


def find_words_containing(words: Sequence[str], x: str) -> list[int]:
    """Return the indices of the words that contain the character ``x``."""
    return [index for index, word in enumerate(words) if x in word]


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group words that are rearrangements of each other.

    Groups appear in the order their first word appears, words in input order.
    """
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def unique_morse_representations(words: Sequence[str]) -> int:
    """Count the distinct Morse transcriptions of lower-case ``words``."""
    transcriptions = set()
    for word in words:
        try:
            transcriptions.add("".join(_MORSE[char] for char in word))
        except KeyError as error:
            raise ValueError(
                f"character {error.args[0]!r} is not a lower-case letter"
            ) from None
    return len(transcriptions)