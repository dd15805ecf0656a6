# kata

Plain Python functions that solve classic array, string, word and counting
puzzles, plus a small singly linked list of digits. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `kata.arrays`: puzzles over lists of integers: `kids_with_candies`,
  `shuffle`, `running_sum`, `three_sum`, `maximum_wealth`, `build_array`,
  `get_concatenation`, `two_sum`, `min_moves_to_seat`, `missing_number`,
  `remove_element`, `number_game`, `minimum_operations`,
  `find_max_consecutive_ones`, `longest_consecutive`, `distribute_candies`
  and `sort_people`.
- `kata.text`: puzzles over single strings: `roman_to_int`, `max_power`,
  `longest_common_prefix`, `interpret`, `truncate_sentence`,
  `reverse_prefix`, `check_almost_equivalent`, `check_string`,
  `decode_message`, `is_anagram`, `minimized_string_length`, `final_string`,
  `score_of_string`, `find_permutation_difference`, `reverse_string`,
  `reverse_vowels`, `length_of_longest_substring` and
  `num_jewels_in_stones`.
- `kata.words`: puzzles over lists of words and sentences:
  `array_strings_are_equal`, `count_matches`,
  `final_value_after_operations`, `count_words`, `most_words_found`,
  `number_of_beams`, `find_words_containing`, `group_anagrams` and
  `unique_morse_representations`.
- `kata.counting`: puzzles built on counting occurrences:
  `group_the_people`, `display_table`, `num_identical_pairs`,
  `majority_element`, `sum_of_unique`, `finding_users_active_minutes`,
  `count_k_difference`, `find_lonely`, `find_difference`, `find_winners`,
  `most_frequent_even`, `find_intersection_values`, `top_k_frequent`,
  `find_duplicates` and `find_disappeared_numbers`.
- `kata.linked_list`: the `ListNode` dataclass (iterating over a node yields
  the values from it to the end of the list), `from_values` to build a list
  (`None` for no values), and `add_two_numbers`, which adds two numbers whose
  digits are stored least significant first.

Most functions return new values and leave their arguments alone. Two work in
place: `arrays.remove_element` moves the kept values to the front of the
given list and returns how many were kept, and `text.reverse_string`
reverses a list of characters and returns `None`.

Invalid input raises `ValueError` where the result would otherwise be
meaningless: for example `max_power("")`, `longest_common_prefix([])`,
`shuffle` with too few values, `decode_message` with a character missing from
the key, `unique_morse_representations` with a character that is not a
lower-case letter, and a negative `k` for `top_k_frequent` or
`finding_users_active_minutes`.

## Examples

```python
from kata.arrays import two_sum, running_sum
from kata.text import roman_to_int, reverse_vowels
from kata.words import group_anagrams
from kata.counting import top_k_frequent
from kata.linked_list import from_values, add_two_numbers

two_sum([2, 7, 11, 15], 9)             # [1, 0]  (later index first)
running_sum([1, 2, 3, 4])              # [1, 3, 6, 10]
roman_to_int("MCMXCIV")                # 1994
reverse_vowels("hello")                # "holle"
group_anagrams(["eat", "tea", "tan"])  # [["eat", "tea"], ["tan"]]
top_k_frequent([1, 1, 1, 2, 2, 3], 2)  # [2, 1]  (least frequent of the k first)

total = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
list(total)                            # [7, 0, 8]
```

## What it does not do

`kata` is a library only: it installs no command-line program and reads or
writes no files. Call its functions from your own code.