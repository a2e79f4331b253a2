import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string():
    buf = io.StringIO()
    put_char("x", buf)
    assert buf.getvalue() == "x"


def test_put_char_code():
    buf = io.StringIO()
    put_char(ord("A"), buf)
    put_char(ord("b") + 256, buf)
    assert buf.getvalue() == "Ab"


def test_put_str_writes_text():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(" world", buf)
    assert buf.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    buf = io.StringIO()
    put_str(None, buf)
    assert buf.getvalue() == ""


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_newline_only():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == "\n"


@pytest.mark.parametrize(
    "number, text",
    [(0, "0"), (7, "7"), (-42, "-42"), (2147483647, "2147483647"), (-2147483648, "-2147483648")],
)
def test_put_nbr(number, text):
    buf = io.StringIO()
    put_nbr(number, buf)
    assert buf.getvalue() == text


def test_put_nbr_round_trip():
    for number in (-1000, -9, 0, 9, 10, 123456):
        buf = io.StringIO()
        put_nbr(number, buf)
        assert int(buf.getvalue()) == number


def test_defaults_to_stdout(capsys):
    put_str("out")
    put_char("!")
    put_endl("")
    put_nbr(5)
    assert capsys.readouterr().out == "out!\n5"