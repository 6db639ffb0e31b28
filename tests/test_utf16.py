# tests/test_utf16.py
"""Tests for UTF-16 BOM sniffing and the Unicode block heuristic."""

from __future__ import annotations

import logging

import pytest

from filecharset.enums import DetectionPass
from filecharset.pipeline.binary import is_binary_file
from filecharset.pipeline.utf16 import (
    ALLOWED_UNICODE_BLOCKS,
    EXTRA_UNICODE_BLOCK_LIMIT,
    detect_utf16_be,
    detect_utf16_le,
    has_utf16_bom,
    has_utf16_content,
)
from filecharset.registry import UTF_16BE, UTF_16LE

# Under the wrong byte order the comma, period, space and newline of this
# text decode to four different non-Latin blocks.
LATIN_TEXT = "Hello, world.\nThe quick brown fox jumps over the lazy dog.\n"

# ---------------------------------------------------------------------------
# Byte-order marks
# ---------------------------------------------------------------------------


def test_be_bom(make_file):
    path = make_file("a.txt", b"\xfe\xff")
    assert has_utf16_bom(path, "big") is True
    assert has_utf16_bom(path, "little") is False


def test_le_bom(make_file):
    path = make_file("a.txt", b"\xff\xfe")
    assert has_utf16_bom(path, "little") is True
    assert has_utf16_bom(path, "big") is False


def test_too_short_for_bom(make_file):
    path = make_file("a.txt", b"\xfe")
    assert has_utf16_bom(path, "big") is False


def test_bom_trusted_regardless_of_content(make_file):
    # Odd length: the payload could never decode as UTF-16.
    path = make_file("a.txt", b"\xfe\xff\x00")
    assert detect_utf16_be(path, DetectionPass.METADATA_ONLY) == UTF_16BE
    assert detect_utf16_be(path, DetectionPass.CONTENT_SCAN) is None


def test_le_bom_metadata_pass(make_file):
    path = make_file("a.txt", b"\xff\xfe" + LATIN_TEXT.encode("utf-16-le"))
    assert detect_utf16_le(path, DetectionPass.METADATA_ONLY) == UTF_16LE
    assert detect_utf16_be(path, DetectionPass.METADATA_ONLY) is None


def test_no_bom_metadata_pass(make_file):
    path = make_file("a.txt", LATIN_TEXT.encode("utf-16-le"))
    assert detect_utf16_le(path, DetectionPass.METADATA_ONLY) is None


# ---------------------------------------------------------------------------
# Content heuristic
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("codec", "detect", "expected"),
    [
        ("utf-16-be", detect_utf16_be, UTF_16BE),
        ("utf-16-le", detect_utf16_le, UTF_16LE),
    ],
)
def test_latin_text_without_bom(make_file, codec, detect, expected):
    path = make_file("a.txt", LATIN_TEXT.encode(codec))
    assert detect(path, DetectionPass.CONTENT_SCAN) == expected


def test_wrong_byte_order_rejected(make_file):
    path = make_file("a.txt", LATIN_TEXT.encode("utf-16-le"))
    assert detect_utf16_be(path, DetectionPass.CONTENT_SCAN) is None


def test_allowed_blocks_only(make_file):
    text = "α → β ≤ γ; ─┼─; ℕ ⨀ ∑ café\n"
    path = make_file("a.txt", text.encode("utf-16-le"))
    assert detect_utf16_le(path, DetectionPass.CONTENT_SCAN) == UTF_16LE


def test_one_locale_block_accepted(make_file):
    path = make_file("a.txt", "Привет, мир!\n".encode("utf-16-be"))
    assert detect_utf16_be(path, DetectionPass.CONTENT_SCAN) == UTF_16BE


def test_chinese_three_extra_blocks_accepted(make_file):
    # CJK Unified Ideographs, CJK Symbols and Punctuation, Halfwidth and
    # Fullwidth Forms.
    path = make_file("a.txt", "中文。，\n".encode("utf-16-le"))
    assert has_utf16_content(path, UTF_16LE) is True


def test_fourth_extra_block_rejected(make_file):
    # Katakana is the fourth block outside the allowed set.
    path = make_file("a.txt", "中文。，ア\n".encode("utf-16-le"))
    assert has_utf16_content(path, UTF_16LE) is False
    assert detect_utf16_le(path, DetectionPass.CONTENT_SCAN) is None


def test_supplementary_character_counts_as_one_block(make_file):
    # U+20000 is classified by code point (CJK Extension B), not as a pair of
    # surrogate code units: three extra blocks in total.
    path = make_file("a.txt", "中文。\U00020000\n".encode("utf-16-le"))
    assert has_utf16_content(path, UTF_16LE) is True


def test_supplementary_character_as_fourth_block(make_file):
    path = make_file("a.txt", "中文。，\U00020000\n".encode("utf-16-le"))
    assert has_utf16_content(path, UTF_16LE) is False


def test_limit_constant():
    assert EXTRA_UNICODE_BLOCK_LIMIT == 3
    assert "Basic Latin" in ALLOWED_UNICODE_BLOCKS
    assert "Cyrillic" not in ALLOWED_UNICODE_BLOCKS


def test_odd_length_rejected(make_file):
    path = make_file("a.txt", LATIN_TEXT.encode("utf-16-le") + b"x")
    assert detect_utf16_le(path, DetectionPass.CONTENT_SCAN) is None


def test_lone_surrogate_rejected(make_file):
    path = make_file("a.txt", "ab".encode("utf-16-le") + b"\x00\xd8")
    assert detect_utf16_le(path, DetectionPass.CONTENT_SCAN) is None


def test_detected_utf16_is_binary(make_file):
    for codec in ("utf-16-be", "utf-16-le", "utf-16"):
        path = make_file(f"{codec}.txt", LATIN_TEXT.encode(codec))
        assert is_binary_file(path) is True


def test_content_scan_logs_timing(make_file, caplog):
    caplog.set_level(logging.DEBUG)
    path = make_file("a.txt", LATIN_TEXT.encode("utf-16-le"))
    detect_utf16_le(path, DetectionPass.CONTENT_SCAN)
    assert "testing for UTF-16LE; 2 line(s) read" in caplog.text


def test_missing_file_is_logged_not_raised(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    missing = tmp_path / "missing.txt"
    assert detect_utf16_be(missing, DetectionPass.METADATA_ONLY) is None
    assert detect_utf16_le(missing, DetectionPass.CONTENT_SCAN) is None
    assert "When reading file" in caplog.text
