"""An immutable sequence of words split out of a line of input."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Union, overload

from minishell.strings import split, strncmp


class WordList:
    """The words of one input line, in order."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()) -> None:
        items = tuple(words)
        for word in items:
            if not isinstance(word, str):
                raise TypeError(f"words must be str, got {type(word).__name__}")
        self._words = items

    @classmethod
    def from_string(cls, text: str) -> "WordList":
        """Split *text* on spaces, dropping empty pieces."""
        return cls(split(text, " "))

    def find(self, prefix: str) -> Optional[int]:
        """Index of the first word that starts with *prefix*, or None.

        An empty or missing prefix is an error.
        """
        if prefix is None or prefix == "":
            raise ValueError("prefix must be a non-empty string")
        if not isinstance(prefix, str):
            raise TypeError(f"prefix must be a str, got {type(prefix).__name__}")
        width = len(prefix)
        return next(
            (index for index, word in enumerate(self._words)
             if strncmp(word, prefix, width) == 0),
            None,
        )

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> "WordList": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[str, "WordList"]:
        if isinstance(index, slice):
            return WordList(self._words[index])
        return self._words[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WordList):
            return self._words == other._words
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._words)

    def __repr__(self) -> str:
        return f"WordList({list(self._words)!r})"