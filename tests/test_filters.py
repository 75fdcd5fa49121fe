import io

import pytest

from treelab.filters import Encrypt, Filter, ToLower, ToUpper, main, shift_cypher


def test_base_filter_is_identity():
    text = "Mixed Case, 123!"
    assert Filter().exec(text) == text


def test_to_upper():
    assert ToUpper().exec("abc-XyZ 1") == "ABC-XYZ 1"


@pytest.mark.parametrize("text", ["Hello World", "abc", "ALL CAPS 42", ""])
def test_to_lower_matches_str_lower(text):
    assert ToLower().exec(text) == text.lower()


def test_non_ascii_letters_pass_through():
    assert ToUpper().exec("é") == "é"


def test_encrypt_thirteen():
    assert Encrypt(13).exec("Hello, World!") == "URYYB, JBEYQ!"


@pytest.mark.parametrize("text", ["Hello, World!", "attack at dawn", "Zebra 9"])
def test_encrypt_thirteen_twice_gives_upper_case(text):
    twice = Encrypt(13).exec(Encrypt(13).exec(text))
    assert twice == ToUpper().exec(text)


def test_encrypt_then_inverse_shift():
    text = "Round Trip"
    assert Encrypt(26 - 5).exec(Encrypt(5).exec(text)) == text.upper()


def test_shift_cypher_zero_offset_and_wrap():
    assert shift_cypher("q", 0) == "Q"
    assert shift_cypher("z", 1) == "A"


def test_shift_cypher_negative_offset_keeps_sign():
    assert shift_cypher("A", -1) == "@"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\nxyz\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [Encrypt(13).exec("abc"), Encrypt(13).exec("xyz")]
    assert Encrypt(13).exec(out[0]) == "ABC"