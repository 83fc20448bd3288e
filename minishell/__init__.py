"""A minimal interactive shell prompt, with word lists and string and character helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "output", "strings", "word_list", "shell"]