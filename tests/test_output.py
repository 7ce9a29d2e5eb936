import io

import pytest

from pushswap.output import put_char, put_endl, put_number, put_str


def test_put_char_writes_character():
    buf = io.StringIO()
    put_char("x", buf)
    assert buf.getvalue() == "x"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("xy", io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    put_char("q")
    assert capsys.readouterr().out == "q"


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


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_number_round_trip(n):
    buf = io.StringIO()
    put_number(n, buf)
    assert int(buf.getvalue()) == n


def test_put_number_min_int():
    buf = io.StringIO()
    put_number(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_number_wraps_to_32_bits():
    buf = io.StringIO()
    put_number(2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_number_defaults_to_stdout(capsys):
    put_number(-15)
    assert capsys.readouterr().out == "-15"