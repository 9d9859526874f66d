"""Tests for the identity substitution codec."""

import string

import pytest

from mapgate.auth.codec import (
    CODE_WIDTH,
    DECODE_TABLE,
    ENCODE_TABLE,
    InvalidCharacterError,
    decode,
    encode,
)

ALPHABET = string.ascii_lowercase + string.digits + "_-/:."


class TestCodecTable:
    """The table is a persisted contract."""

    def test_covers_alphabet(self):
        assert set(ENCODE_TABLE) == set(ALPHABET)

    def test_decode_table_is_injective(self):
        assert len(set(DECODE_TABLE.values())) == len(DECODE_TABLE)

    def test_encode_is_exact_inverse(self):
        for code, char in DECODE_TABLE.items():
            assert ENCODE_TABLE[char] == code

    def test_codes_are_two_characters(self):
        assert all(len(code) == CODE_WIDTH for code in DECODE_TABLE)

    def test_known_codes_unchanged(self):
        assert ENCODE_TABLE["a"] == "f9"
        assert ENCODE_TABLE["i"] == "nb"
        assert ENCODE_TABLE["0"] == "20"
        assert ENCODE_TABLE["_"] == "04"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DECODE_TABLE["zz"] = "?"
        with pytest.raises(TypeError):
            ENCODE_TABLE["?"] = "zz"


class TestEncode:
    """Tests for encode."""

    def test_every_character_round_trips(self):
        for char in ALPHABET:
            assert decode(encode(char)) == char

    def test_concatenates_in_order(self):
        assert encode("ab") == "f9a8"
        assert encode("ba") == "a8f9"

    def test_empty_string(self):
        assert encode("") == ""

    def test_url_like_value(self):
        value = "ghost/run_01:v2.bin"
        assert decode(encode(value)) == value
        assert len(encode(value)) == 2 * len(value)

    def test_uppercase_rejected(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            encode("abC")
        assert exc_info.value.value == "C"
        assert exc_info.value.position == 2

    def test_space_rejected(self):
        with pytest.raises(InvalidCharacterError):
            encode("a b")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            encode("!")


class TestDecode:
    """Tests for decode."""

    def test_decodes_known_value(self):
        assert decode("f9a8cf") == "abc"

    def test_odd_length_rejected(self):
        with pytest.raises(InvalidCharacterError):
            decode("f9a")

    def test_unknown_code_rejected(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            decode("f9zz")
        assert exc_info.value.value == "zz"
        assert exc_info.value.position == 2

    def test_empty_string(self):
        assert decode("") == ""
