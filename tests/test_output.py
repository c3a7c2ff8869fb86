import io

import pytest

from solong.convert import atoi
from solong.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_rejects_longer_strings():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())
    with pytest.raises(ValueError):
        put_char("", io.StringIO())


def test_put_str_writes_text_unchanged():
    out = io.StringIO()
    put_str("so_long", out)
    assert out.getvalue() == "so_long"


def test_put_str_appends():
    out = io.StringIO()
    put_str("ab", out)
    put_str("cd", out)
    assert out.getvalue() == "ab" + "cd"


def test_put_endl_adds_newline():
    out = io.StringIO()
    put_endl("so_long", out)
    assert out.getvalue() == "so_long\n"


def test_put_endl_empty_string():
    out = io.StringIO()
    put_endl("", out)
    assert out.getvalue() == "\n"


def test_put_nbr_minimum_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 10, 4242, -100000, 2147483647])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert atoi(out.getvalue()) == n


def test_default_stream_is_stdout(capsys):
    put_str("so_long", None)
    put_char("!")
    put_endl("")
    put_nbr(-2147483648)
    assert capsys.readouterr().out == "so_long!\n-2147483648"