"""Stage: Emacs-style mode line (``-*- coding: utf-8 -*-``) extraction.

Only the leading comment block of a file is searched, and only for file types
whose line-comment syntax is known.  See
https://www.gnu.org/software/emacs/manual/html_node/emacs/Specifying-File-Variables.html
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from filecharset.enums import DetectionPass
from filecharset.reader import has_charset, open_lines
from filecharset.registry import ISO_8859_1, Charset, lookup_charset

_LOGGER = logging.getLogger(__name__)

# Horizontal whitespace.
_H = r"[ \t\xa0\u1680\u180e\u2000-\u200a\u202f\u205f\u3000]"
# Any character but a line terminator; NEL (U+0085) and the Unicode line and
# paragraph separators count as terminators here.
_ANY = r"[^\n\r\x85\u2028\u2029]"
# Neither a separator nor whitespace, where whitespace is [ \t\n\v\f\r] only.
_WORD = r"[^:;\s]"

_MODE_LINE_SENTINEL = "-*-"

_MODE_LINE_RE = re.compile(
    rf"{_H}*{re.escape(_MODE_LINE_SENTINEL)}{_H}*({_ANY}+?){_H}*"
    rf"{re.escape(_MODE_LINE_SENTINEL)}{_H}*"
)
_MODE_LINE_ENTRY_RE = re.compile(
    rf"{_H}*({_WORD}+){_H}*:{_H}*({_WORD}*){_H}*", re.ASCII
)

#: Mode-line variables that name the file's charset.
CHARSET_KEYS: frozenset[str] = frozenset({"coding", "encoding"})

#: File extensions (case-sensitive) mapped to the string that starts a line
#: comment.  A single-character comment starter may repeat (``#`` and ``##``
#: both start a comment).
COMMENT_PREFIXES: dict[str, str] = {
    "py": "#",
    "pl": "#",
    "PL": "#",
    "rb": "#",
    "el": ";",
    "vim": '"',
}


def _comment_pattern(prefix: str) -> re.Pattern[str]:
    if not prefix:
        msg = "comment prefix must not be empty"
        raise ValueError(msg)
    if len(prefix) == 1:
        return re.compile(rf"{_H}*(?:{re.escape(prefix)})+({_ANY}*)")
    return re.compile(rf"{_H}*{re.escape(prefix)}({_ANY}*)")


_COMMENT_PATTERNS: dict[str, re.Pattern[str]] = {
    extension: _comment_pattern(prefix)
    for extension, prefix in COMMENT_PREFIXES.items()
}


def file_extension(path: str | os.PathLike[str]) -> str:
    """Return the text after the last ``.`` of the file name, or ``""``."""
    name = Path(path).name
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def detect_mode_line(
    path: str | os.PathLike[str],
    detection_pass: DetectionPass,
    logger: logging.Logger = _LOGGER,
) -> Charset | None:
    """Return the charset named by the mode line of *path*, if it applies.

    Each charset hint is verified by decoding the whole file; the first hint
    that decodes cleanly wins.  Conflicting or inapplicable hints are logged
    but never raise.

    :param path: The file to examine.
    :param detection_pass: The current pipeline pass.
    :param logger: Sink for diagnostics.
    :returns: The first applicable hinted charset, or ``None``.
    """
    if detection_pass is not DetectionPass.CONTENT_SCAN:
        return None
    try:
        hints = charset_hints(path)
        if len(hints) > 1:
            logger.warning(
                "%s: specifies more than one charset: %s",
                path,
                [hint.name for hint in hints],
            )
        for hint in hints:
            if has_charset(path, hint):
                return hint
    except OSError:
        logger.warning("When reading file: %s", path, exc_info=True)
        return None
    if hints:
        logger.warning(
            "%s: none of the specified charsets is applicable: %s",
            path,
            [hint.name for hint in hints],
        )
    return None


def charset_hints(path: str | os.PathLike[str]) -> list[Charset]:
    """Return the distinct, supported charsets named in the mode lines of *path*.

    Files with an unknown extension are not read at all.

    :raises OSError: If the file cannot be read.
    """
    pattern = _COMMENT_PATTERNS.get(file_extension(path))
    if pattern is None:
        return []

    hints: list[Charset] = []
    # ISO-8859-1 maps every byte to a character, so it never fails to
    # decode, and it is enough to read an ASCII mode line.
    with open_lines(path, ISO_8859_1) as lines:
        for comment in _leading_comments(lines, pattern):
            for key, value in parse_mode_line(comment):
                if key not in CHARSET_KEYS:
                    continue
                charset = lookup_charset(value)
                if charset is not None and charset not in hints:
                    hints.append(charset)
    return hints


def _is_blank(line: str) -> bool:
    # NEL is a line terminator for the comment patterns, not blank space.
    return not line or (line.isspace() and "\x85" not in line)


def _leading_comments(
    lines: Iterable[str], pattern: re.Pattern[str]
) -> Iterator[str]:
    """Yield the comment text of the blank-or-comment lines heading the file."""
    for line in lines:
        if _is_blank(line):
            continue
        match = pattern.fullmatch(line)
        if match is None:
            return
        yield match.group(1)


def parse_mode_line(comment: str) -> list[tuple[str, str]]:
    """Parse ``-*- key1: value1; key2: value2 -*-`` into key/value pairs.

    :param comment: A comment line without its leading comment starter.
    :returns: The well-formed entries in order; an empty list if *comment*
        is not a mode line.
    """
    match = _MODE_LINE_RE.fullmatch(comment)
    if match is None:
        return []
    entries = []
    for entry in match.group(1).split(";"):
        entry_match = _MODE_LINE_ENTRY_RE.fullmatch(entry)
        if entry_match is not None:
            entries.append((entry_match.group(1), entry_match.group(2)))
    return entries
