import io

import pytest

from minishell.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_one_character():
    buffer = io.StringIO()
    put_char("x", buffer)
    assert buffer.getvalue() == "x"


def test_put_char_rejects_longer_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_rejects_empty_string():
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_char_rejects_non_string():
    with pytest.raises(TypeError):
        put_char(65, io.StringIO())


def test_put_str_writes_text_unchanged():
    text = "minishell > echo hi"
    buffer = io.StringIO()
    put_str(text, buffer)
    assert buffer.getvalue() == text


def test_put_str_empty_writes_nothing():
    buffer = io.StringIO()
    put_str("", buffer)
    assert buffer.getvalue() == ""


def test_put_str_appends_across_calls():
    buffer = io.StringIO()
    put_str("ab", buffer)
    put_str("cd", buffer)
    assert buffer.getvalue() == "ab" + "cd"


def test_put_endl_adds_newline():
    buffer = io.StringIO()
    put_endl("hello", buffer)
    assert buffer.getvalue() == "hello\n"


def test_put_endl_empty_is_just_newline():
    buffer = io.StringIO()
    put_endl("", buffer)
    assert buffer.getvalue() == "\n"


def test_put_nbr_int_min():
    buffer = io.StringIO()
    put_nbr(-2147483648, buffer)
    assert buffer.getvalue() == "-2147483648"


def test_put_nbr_zero():
    buffer = io.StringIO()
    put_nbr(0, buffer)
    assert buffer.getvalue() == "0"


@pytest.mark.parametrize(
    "n", [1, 9, 10, 42, 100, 147483648, 2147483647, -1, -10, -2147483647]
)
def test_put_nbr_round_trips(n):
    buffer = io.StringIO()
    put_nbr(n, buffer)
    out = buffer.getvalue()
    assert int(out) == n
    assert out.startswith("-") == (n < 0)
    assert not out.lstrip("-").startswith("0")


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())
    with pytest.raises(TypeError):
        put_nbr(True, io.StringIO())