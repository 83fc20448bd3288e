"""The interactive read loop of the shell."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from minishell.word_list import WordList

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platform without readline
    _readline = None

PROMPT = "minishell > "

_BLANKS = frozenset(" \t\n\v\f\r")


def is_empty(text: Optional[str]) -> bool:
    """True if *text* is None or holds only spaces and ASCII whitespace."""
    if text is None:
        return True
    return all(ch in _BLANKS for ch in text)


class Shell:
    """Reads lines, records them in history and splits them into words."""

    def __init__(self, reader: Optional[Callable[[str], Optional[str]]] = None) -> None:
        self._use_readline = reader is None and _readline is not None
        self._reader = reader if reader is not None else input
        self.past_exit_status = 0
        self.current_input: Optional[str] = None
        self.words = WordList()
        self.history: List[str] = []

    def handle_line(self, line: str) -> WordList:
        """Record a non-blank *line* in history and split it into words."""
        self.current_input = line
        if not is_empty(line):
            self.history.append(line)
            if self._use_readline:
                _readline.add_history(line)
        self.words = WordList.from_string(line)
        return self.words

    def _close(self) -> int:
        self.current_input = None
        self.words = WordList()
        self.history.clear()
        if self._use_readline:
            _readline.clear_history()
        return 0

    def run(self) -> int:
        """Read and handle lines until end of input; return the exit status."""
        while True:
            try:
                line = self._reader(PROMPT)
            except EOFError:
                line = None
            if line is None:
                return self._close()
            self.handle_line(line)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive shell on standard input."""
    return Shell().run()