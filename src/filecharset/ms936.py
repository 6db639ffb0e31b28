"""Microsoft's code page 936, registered as the ``x_mswin_936`` codec.

Python resolves ``cp936`` to plain GBK.  Windows' code page 936 also decodes
the single byte ``0x80`` as the euro sign (U+20AC), which GBK rejects.  This
codec decodes GBK and maps a lone ``0x80`` to the euro sign; encoding is
plain GBK.
"""

from __future__ import annotations

import codecs

#: Name to pass to :func:`codecs.lookup` or ``open(..., encoding=...)``.
CODEC_NAME = "x_mswin_936"

_ERRORS = "filecharset.ms936-euro"
_EURO_BYTE = 0x80
_EURO = "\u20ac"

_GBK = codecs.lookup("gbk")


def _euro_or_raise(error: UnicodeError) -> tuple[str, int]:
    if (
        isinstance(error, UnicodeDecodeError)
        and error.object[error.start] == _EURO_BYTE
    ):
        return _EURO, error.start + 1
    raise error


def _decode_errors(errors: str) -> str:
    # The euro mapping is applied under strict decoding only; other modes
    # keep GBK's handling of 0x80.
    return _ERRORS if errors == "strict" else errors


def _decode(data: bytes, errors: str = "strict") -> tuple[str, int]:
    return _GBK.decode(data, _decode_errors(errors))


class IncrementalDecoder(codecs.IncrementalDecoder):
    """GBK incremental decoder with the euro sign at ``0x80``."""

    def __init__(self, errors: str = "strict") -> None:
        super().__init__(errors)
        self._gbk = _GBK.incrementaldecoder(_decode_errors(errors))

    def decode(self, input: bytes, final: bool = False) -> str:
        return self._gbk.decode(input, final)

    def reset(self) -> None:
        self._gbk.reset()

    def getstate(self) -> tuple[bytes, int]:
        return self._gbk.getstate()

    def setstate(self, state: tuple[bytes, int]) -> None:
        self._gbk.setstate(state)


def _search(name: str) -> codecs.CodecInfo | None:
    if name.replace("-", "_").replace(" ", "_") != CODEC_NAME:
        return None
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=_GBK.encode,
        decode=_decode,
        incrementalencoder=_GBK.incrementalencoder,
        incrementaldecoder=IncrementalDecoder,
    )


codecs.register_error(_ERRORS, _euro_or_raise)
codecs.register(_search)
