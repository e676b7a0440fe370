import os

import pytest

from seedtotp.common import base32
from seedtotp.common.errors import InvalidEncoding


@pytest.mark.parametrize("encoded,expected", [
    ("", b""),
    ("MY======", b"f"),
    ("MZXQ====", b"fo"),
    ("MZXW6===", b"foo"),
    ("MZXW6YQ=", b"foob"),
    ("MZXW6YTB", b"fooba"),
    ("MZXW6YTBOI======", b"foobar"),
])
def test_rfc4648_vectors(encoded, expected):
    assert base32.decode(encoded) == expected


def test_decode_demo_secret(demo_secret):
    assert base32.decode(demo_secret) == b"Hello!\xde\xad\xbe\xef"


def test_decode_is_case_insensitive(demo_secret):
    assert base32.decode(demo_secret.lower()) == base32.decode(demo_secret)


def test_padding_is_optional():
    assert base32.decode("MZXW6") == base32.decode("MZXW6===") == b"foo"


def test_trailing_bits_are_discarded():
    assert base32.decode("M") == b""
    assert base32.decode("MZ") == b"f"


def test_bytes_input():
    assert base32.decode(b"MZXW6YTBOI") == b"foobar"


def test_invalid_character_rejected():
    with pytest.raises(InvalidEncoding):
        base32.decode("12345678!")


@pytest.mark.parametrize("encoded", ["MZXW6YT1", "MZXW 6YTB", "MZXW6YT8", "ÄBCD"])
def test_characters_outside_alphabet(encoded):
    with pytest.raises(InvalidEncoding):
        base32.decode(encoded)


def test_error_message_does_not_leak_secret():
    with pytest.raises(InvalidEncoding) as excinfo:
        base32.decode("SECRETKEY0")
    assert "SECRETKEY" not in str(excinfo.value)
    assert "position 9" in str(excinfo.value)


def test_non_ascii_bytes_rejected():
    with pytest.raises(InvalidEncoding):
        base32.decode(b"\xffABC")


@pytest.mark.parametrize("data", [b"", b"\x00", b"\xff" * 7, bytes(range(256)), os.urandom(20)])
def test_round_trip(data):
    assert base32.decode(base32.encode(data)) == data


def test_encode_strips_padding_by_default():
    assert base32.encode(b"foo") == "MZXW6"
    assert base32.encode(b"foo", padding=True) == "MZXW6==="


def test_is_valid(demo_secret):
    assert base32.is_valid(demo_secret)
    assert not base32.is_valid("not base32!")


@pytest.mark.parametrize("char", ["ſ", "ı", "ﬆ", "ǅ"])
def test_non_ascii_letters_do_not_fold_into_alphabet(char):
    with pytest.raises(InvalidEncoding) as excinfo:
        base32.decode("MZXW6" + char + "AA")
    assert "position 5" in str(excinfo.value)


def test_error_position_counts_padding():
    with pytest.raises(InvalidEncoding) as excinfo:
        base32.decode("MZ==XW1")
    assert "position 6" in str(excinfo.value)
