# minishell

A small interactive shell prompt. It reads lines at a `minishell > ` prompt,
records every non-blank line in its history and splits each line into words
on spaces. Reaching end of input (Ctrl+D) leaves the shell with exit
status 0 and clears the history.

When Python's `readline` module is available, non-blank lines are also added
to readline's history, so the arrow keys recall earlier lines.

The package also holds the string and character helpers that the shell uses.
You can use them on their own.

## Installation

```
pip install .
```

## Running the shell

```
minishell
```

Type a line and press Enter. Press Ctrl+D to leave.

## What the shell does not do

The shell reads and splits lines. It does not run them. It has no built-in
commands, does not start programs, and has no pipes, redirections, quoting,
variable expansion or signal handling. The `past_exit_status` attribute of
`Shell` is always 0.

## Library use

### The read loop

```python
from minishell.shell import Shell, is_empty

lines = iter(["echo  hello world", "   "])

def reader(prompt):
    return next(lines, None)   # None, or raising EOFError, ends the loop

shell = Shell(reader)
shell.handle_line("ls -l")     # WordList(['ls', '-l'])
shell.history                  # ['ls -l']
shell.run()                    # 0, once the reader runs out

is_empty(" \t\n")              # True
is_empty(None)                 # True
```

`Shell()` with no reader reads from standard input with `input`.
`handle_line` sets `current_input` and `words`, and adds the line to
`history` when it is not blank. `minishell.shell.main()` starts a shell on
standard input and returns its exit status.

### Word lists

```python
from minishell.word_list import WordList

words = WordList.from_string("echo  hello world")
len(words)            # 3
list(words)           # ['echo', 'hello', 'world']
words[0]              # 'echo'
words[1:]             # WordList(['hello', 'world'])
words.find("hel")     # 1, the index of the first word starting with "hel"
words.find("zzz")     # None
```

`find` raises `ValueError` for an empty or missing prefix.

### String helpers

`minishell.strings` holds `atoi`, `itoa`, `split`, `strtrim`, `substr`,
`strnstr`, `strncmp`, `strchr`, `strrchr`, `strmapi`, `memchr` and `memcmp`.
Searches return an index, or `None` when nothing matches; comparisons return
the difference of the first differing codes.

```python
from minishell.strings import atoi, itoa, split, strtrim, strchr, memcmp

atoi("  -42abc")        # -42
itoa(-2147483648)       # '-2147483648'
split("a,,b,c", ",")    # ['a', 'b', 'c']
strtrim("xxhixx", "x")  # 'hi'
strchr("hello", "l")    # 2
memcmp(b"abc", b"abd", 3)  # -1
```

### Character and output helpers

`minishell.chars` has `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
`is_print`, `to_upper` and `to_lower`. Each takes an integer code or a
one-character string; the case functions give back the same kind.

`minishell.output` has `put_char`, `put_str`, `put_endl` and `put_nbr`, each
writing to a text stream you pass in:

```python
import io
from minishell.output import put_nbr, put_endl

buf = io.StringIO()
put_nbr(-42, buf)
put_endl("!", buf)
buf.getvalue()          # '-42!\n'
```

## Running the tests

```
pip install ".[test]"
pytest
```