#!/usr/bin/env python
"""Regenerate ``src/filecharset/unicode_blocks.py`` from ``Blocks.txt``.

Usage::

    python scripts/generate_unicode_blocks.py                 # download
    python scripts/generate_unicode_blocks.py --blocks Blocks.txt
"""

from __future__ import annotations

import argparse
import re
import urllib.request
from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parent.parent
_OUTPUT = _REPO_ROOT / "src" / "filecharset" / "unicode_blocks.py"

UNICODE_VERSION = "15.1.0"
BLOCKS_URL = "https://www.unicode.org/Public/{version}/ucd/Blocks.txt"

_LINE_RE = re.compile(r"([0-9A-F]{4,6})\.\.([0-9A-F]{4,6});\s*(.+)")

_HEADER = '''"""Unicode block lookup.

The block table below is generated by ``scripts/generate_unicode_blocks.py``
from the Unicode Character Database ``Blocks.txt`` (Unicode {version}).  Do not
edit it by hand.
"""

from __future__ import annotations

import bisect

#: Block name reported for code points outside every assigned block.
NO_BLOCK: str = "No_Block"

# (first code point, last code point, block name), sorted by first code point.
BLOCKS: tuple[tuple[int, int, str], ...] = (
'''

_FOOTER = '''
_STARTS: tuple[int, ...] = tuple(start for start, _, _ in BLOCKS)


def block_of(char: str) -> str:
    """Return the name of the Unicode block containing *char*.

    :param char: A single character.
    :returns: The block name, e.g. ``"Basic Latin"``, or :data:`NO_BLOCK`.
    """
    code_point = ord(char)
    index = bisect.bisect_right(_STARTS, code_point) - 1
    if index >= 0:
        start, end, name = BLOCKS[index]
        if start <= code_point <= end:
            return name
    return NO_BLOCK
'''


def parse_blocks(text: str) -> list[tuple[int, int, str]]:
    """Parse the ``start..end; Name`` lines of ``Blocks.txt``."""
    blocks = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        match = _LINE_RE.fullmatch(line)
        if match is None:
            msg = f"unexpected line in Blocks.txt: {raw!r}"
            raise ValueError(msg)
        blocks.append(
            (int(match.group(1), 16), int(match.group(2), 16), match.group(3))
        )
    blocks.sort()
    for (_, prev_end, prev_name), (start, _, name) in zip(blocks, blocks[1:]):
        if start <= prev_end:
            msg = f"overlapping blocks: {prev_name!r} and {name!r}"
            raise ValueError(msg)
    return blocks


def render(blocks: list[tuple[int, int, str]], version: str) -> str:
    """Return the source of the generated module."""
    rows = "".join(
        f'    (0x{start:04X}, 0x{end:04X}, "{name}"),\n' for start, end, name in blocks
    )
    return _HEADER.format(version=version) + rows + ")\n" + _FOOTER


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--blocks", type=Path, help="Local Blocks.txt (default: download it)"
    )
    parser.add_argument("--version", default=UNICODE_VERSION)
    parser.add_argument("--output", type=Path, default=_OUTPUT)
    args = parser.parse_args()

    if args.blocks is not None:
        text = args.blocks.read_text(encoding="utf-8")
    else:
        url = BLOCKS_URL.format(version=args.version)
        print(f"Downloading {url}")
        with urllib.request.urlopen(url) as response:  # noqa: S310
            text = response.read().decode("utf-8")

    blocks = parse_blocks(text)
    args.output.write_text(render(blocks, args.version), encoding="utf-8")
    print(f"Wrote {len(blocks)} blocks to {args.output}")


if __name__ == "__main__":
    main()
