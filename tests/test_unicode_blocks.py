# tests/test_unicode_blocks.py
from __future__ import annotations

import pytest

from filecharset.unicode_blocks import BLOCKS, NO_BLOCK, block_of


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("\x00", "Basic Latin"),
        ("A", "Basic Latin"),
        ("\x7f", "Basic Latin"),
        ("é", "Latin-1 Supplement"),
        ("Ā", "Latin Extended-A"),
        ("α", "Greek and Coptic"),
        ("Ж", "Cyrillic"),
        ("\u2014", "General Punctuation"),
        ("→", "Arrows"),
        ("∑", "Mathematical Operators"),
        ("┼", "Box Drawing"),
        ("。", "CJK Symbols and Punctuation"),
        ("ア", "Katakana"),
        ("中", "CJK Unified Ideographs"),
        ("\ufeff", "Arabic Presentation Forms-B"),
        ("，", "Halfwidth and Fullwidth Forms"),
        ("\U0001f600", "Emoticons"),
        ("\U00020000", "CJK Unified Ideographs Extension B"),
        ("\U0010ffff", "Supplementary Private Use Area-B"),
    ],
)
def test_block_of(char, expected):
    assert block_of(char) == expected


@pytest.mark.parametrize("char", ["\u2fe0", "\U0002ffff", "\U000effff"])
def test_unassigned_ranges(char):
    assert block_of(char) == NO_BLOCK


def test_block_boundaries():
    for start, end, name in BLOCKS:
        assert block_of(chr(start)) == name
        assert block_of(chr(end)) == name


def test_blocks_sorted_and_disjoint():
    for (_, prev_end, _), (start, end, _) in zip(BLOCKS, BLOCKS[1:]):
        assert prev_end < start <= end


def test_block_names_unique():
    names = [name for _, _, name in BLOCKS]
    assert len(names) == len(set(names))
    assert NO_BLOCK not in names
