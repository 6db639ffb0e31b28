"""Charset registry: the charsets filecharset knows how to name and decode.

Names follow the IANA-style spelling callers of a source-file charset detector
usually expect (``UTF-8``, ``windows-1251``, ``x-mswin-936``); each entry also
carries the Python codec used to actually decode bytes.
"""

from __future__ import annotations

import codecs
import dataclasses

from filecharset.ms936 import CODEC_NAME as _MS936_CODEC


@dataclasses.dataclass(frozen=True, slots=True)
class Charset:
    """A named charset backed by a Python codec."""

    name: str
    python_codec: str
    aliases: tuple[str, ...] = ()
    is_multibyte: bool = False

    @property
    def is_supported(self) -> bool:
        """Whether the host interpreter can decode this charset."""
        try:
            codecs.lookup(self.python_codec)
        except LookupError:
            return False
        return True

    def __str__(self) -> str:
        return self.name


US_ASCII = Charset("US-ASCII", "ascii", ("ascii", "us", "iso646-us"))
ISO_8859_1 = Charset("ISO-8859-1", "latin-1", ("latin1", "l1", "iso8859-1"))
UTF_8 = Charset("UTF-8", "utf-8", ("utf8",), is_multibyte=True)
UTF_16BE = Charset("UTF-16BE", "utf-16-be", ("utf-16-be",), is_multibyte=True)
UTF_16LE = Charset("UTF-16LE", "utf-16-le", ("utf-16-le",), is_multibyte=True)

#: Every charset the detectors may report or a mode line may name.  Order
#: matters only where two entries share a Python codec: the first one wins
#: when a name is resolved through :func:`codecs.lookup`.
REGISTRY: tuple[Charset, ...] = (
    US_ASCII,
    ISO_8859_1,
    UTF_8,
    Charset("UTF-16", "utf-16", ("utf16",), is_multibyte=True),
    UTF_16BE,
    UTF_16LE,
    Charset("UTF-32", "utf-32", ("utf32",), is_multibyte=True),
    Charset("UTF-32BE", "utf-32-be", ("utf-32-be",), is_multibyte=True),
    Charset("UTF-32LE", "utf-32-le", ("utf-32-le",), is_multibyte=True),
    Charset("ISO-8859-2", "iso8859-2", ("latin2", "l2")),
    Charset("ISO-8859-3", "iso8859-3", ("latin3", "l3")),
    Charset("ISO-8859-4", "iso8859-4", ("latin4", "l4")),
    Charset("ISO-8859-5", "iso8859-5", ("cyrillic",)),
    Charset("ISO-8859-6", "iso8859-6", ("arabic",)),
    Charset("ISO-8859-7", "iso8859-7", ("greek",)),
    Charset("ISO-8859-8", "iso8859-8", ("hebrew",)),
    Charset("ISO-8859-9", "iso8859-9", ("latin5", "l5")),
    Charset("ISO-8859-10", "iso8859-10", ("latin6", "l6")),
    Charset("ISO-8859-11", "iso8859-11", ("thai",)),
    Charset("ISO-8859-13", "iso8859-13", ("latin7", "l7")),
    Charset("ISO-8859-14", "iso8859-14", ("latin8", "l8")),
    Charset("ISO-8859-15", "iso8859-15", ("latin9", "l9", "latin-9")),
    Charset("ISO-8859-16", "iso8859-16", ("latin10", "l10")),
    Charset("windows-1250", "cp1250", ("cp1250",)),
    Charset("windows-1251", "cp1251", ("cp1251",)),
    Charset("windows-1252", "cp1252", ("cp1252",)),
    Charset("windows-1253", "cp1253", ("cp1253",)),
    Charset("windows-1254", "cp1254", ("cp1254",)),
    Charset("windows-1255", "cp1255", ("cp1255",)),
    Charset("windows-1256", "cp1256", ("cp1256",)),
    Charset("windows-1257", "cp1257", ("cp1257",)),
    Charset("windows-1258", "cp1258", ("cp1258",)),
    Charset("KOI8-R", "koi8-r", ("koi8",)),
    Charset("KOI8-U", "koi8-u"),
    Charset("IBM437", "cp437", ("cp437", "437")),
    Charset("IBM850", "cp850", ("cp850", "850")),
    Charset("IBM866", "cp866", ("cp866", "866")),
    Charset("x-MacRoman", "mac-roman", ("macroman", "macintosh")),
    Charset("GB2312", "gb2312", ("euc-cn", "euccn"), is_multibyte=True),
    Charset("GBK", "gbk", ("cp936", "windows-936"), is_multibyte=True),
    Charset("x-mswin-936", _MS936_CODEC, ("ms936",), is_multibyte=True),
    Charset("GB18030", "gb18030", ("gb18030-2000",), is_multibyte=True),
    Charset("Big5", "big5", ("big5-tw", "csbig5"), is_multibyte=True),
    Charset("Big5-HKSCS", "big5hkscs", ("big5-hkscs",), is_multibyte=True),
    Charset("Shift_JIS", "shift_jis", ("sjis", "s_jis"), is_multibyte=True),
    Charset("windows-31j", "cp932", ("cp932", "ms932"), is_multibyte=True),
    Charset("EUC-JP", "euc-jp", ("eucjp",), is_multibyte=True),
    Charset("ISO-2022-JP", "iso2022-jp", ("csiso2022jp",), is_multibyte=True),
    Charset("EUC-KR", "euc-kr", ("euckr",), is_multibyte=True),
    Charset("x-windows-949", "cp949", ("cp949", "ms949"), is_multibyte=True),
    Charset("TIS-620", "tis-620", ("tis620",)),
    Charset("x-IBM874", "cp874", ("cp874", "windows-874")),
)


def _build_name_index() -> dict[str, Charset]:
    index: dict[str, Charset] = {}
    for charset in REGISTRY:
        for name in (charset.name, *charset.aliases):
            index.setdefault(name.lower(), charset)
    return index


def _build_codec_index() -> dict[str, Charset]:
    index: dict[str, Charset] = {}
    for charset in REGISTRY:
        if charset.is_supported:
            index.setdefault(codecs.lookup(charset.python_codec).name, charset)
    return index


_BY_NAME: dict[str, Charset] = _build_name_index()
_BY_CODEC: dict[str, Charset] = _build_codec_index()


def lookup_charset(name: str) -> Charset | None:
    """Resolve a charset name or alias to a registry entry.

    Registry names and aliases are matched case-insensitively first; anything
    else is normalized through :func:`codecs.lookup` so that Python spellings
    such as ``utf8`` or ``latin-1`` resolve too.  Names that are unknown, or
    whose codec the host interpreter lacks, resolve to ``None``.

    :param name: The charset name, e.g. from a mode line.
    :returns: The matching :class:`Charset`, or ``None``.
    """
    key = name.strip().lower()
    if not key:
        return None
    charset = _BY_NAME.get(key)
    if charset is not None:
        return charset if charset.is_supported else None
    try:
        codec_name = codecs.lookup(key).name
    except LookupError:
        return None
    return _BY_CODEC.get(codec_name)


def supported_charsets(names: tuple[str, ...]) -> tuple[Charset, ...]:
    """Resolve *names* in order, dropping any the host cannot decode."""
    resolved = (lookup_charset(name) for name in names)
    return tuple(charset for charset in resolved if charset is not None)
