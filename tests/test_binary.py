# tests/test_binary.py
from __future__ import annotations

import pytest

from filecharset.pipeline.binary import (
    is_binary_byte,
    is_binary_file,
    is_printable_ascii,
)


@pytest.mark.parametrize("char", ["\a", "\b", "\t", "\n", "\v", "\f", "\r", "\x1b"])
def test_allowed_control_codes_are_printable(char):
    assert is_printable_ascii(char) is True


def test_printable_range():
    assert all(is_printable_ascii(chr(c)) for c in range(0x20, 0x7F))


@pytest.mark.parametrize("char", ["\x00", "\x01", "\x06", "\x0e", "\x1f", "\x7f", "é"])
def test_non_printable_chars(char):
    assert is_printable_ascii(char) is False


@pytest.mark.parametrize("byte", [0x00, 0x01, 0x06, 0x0E, 0x1A, 0x1C, 0x1F])
def test_disallowed_control_bytes_are_binary(byte):
    assert is_binary_byte(byte) is True


@pytest.mark.parametrize("byte", [0x07, 0x09, 0x0A, 0x0D, 0x1B, 0x20, 0x7F, 0x80, 0xFF])
def test_text_bytes_are_not_binary(byte):
    assert is_binary_byte(byte) is False


def test_signed_bytes_are_read_as_unsigned():
    # -1 is 0xFF and -128 is 0x80: high bytes, not control codes.
    assert is_binary_byte(-1) is False
    assert is_binary_byte(-128) is False


def test_empty_file_is_not_binary(make_file):
    assert is_binary_file(make_file("empty.txt", b"")) is False


def test_text_file_is_not_binary(make_file):
    path = make_file("a.txt", b"Hello\n\tworld\r\n\x1b[0m\f")
    assert is_binary_file(path) is False


def test_high_bytes_are_not_binary(make_file):
    assert is_binary_file(make_file("a.txt", "Héllo wörld".encode("latin-1"))) is False


def test_single_control_byte_makes_file_binary(make_file):
    path = make_file("a.txt", b"a" * 100_000 + b"\x01" + b"b" * 100_000)
    assert is_binary_file(path) is True


def test_utf16_text_is_binary(make_file):
    path = make_file("a.txt", "Hello world".encode("utf-16-le"))
    assert is_binary_file(path) is True


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        is_binary_file(tmp_path / "missing.txt")
