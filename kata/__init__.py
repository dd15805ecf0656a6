"""Solutions to classic array, string, word, counting and linked-list puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "counting", "linked_list", "text", "words"]