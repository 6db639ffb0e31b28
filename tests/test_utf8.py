# tests/test_utf8.py
from __future__ import annotations

import logging

from filecharset.enums import DetectionPass
from filecharset.pipeline.utf8 import detect_utf8, has_utf8_bom, has_utf8_content
from filecharset.registry import UTF_8


def test_bom_detected_in_metadata_pass(make_file):
    path = make_file("a.txt", b"\xef\xbb\xbfHello")
    assert has_utf8_bom(path) is True
    assert detect_utf8(path, DetectionPass.METADATA_ONLY) == UTF_8


def test_bom_alone(make_file):
    path = make_file("a.txt", b"\xef\xbb\xbf")
    assert detect_utf8(path, DetectionPass.METADATA_ONLY) == UTF_8


def test_truncated_bom(make_file):
    path = make_file("a.txt", b"\xef\xbb")
    assert has_utf8_bom(path) is False
    assert detect_utf8(path, DetectionPass.METADATA_ONLY) is None


def test_no_bom_metadata_pass(make_file):
    path = make_file("a.txt", "naïve café".encode())
    assert detect_utf8(path, DetectionPass.METADATA_ONLY) is None


def test_bom_trusted_over_malformed_content(make_file):
    path = make_file("a.txt", b"\xef\xbb\xbfab\xff\n")
    assert detect_utf8(path, DetectionPass.METADATA_ONLY) == UTF_8
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) is None


def test_multibyte_content(make_file):
    text = "naïve café\nПривет, мир\n日本語のテキスト\n😀\n"
    path = make_file("a.txt", text.encode())
    assert has_utf8_content(path) is True
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) == UTF_8


def test_content_with_bom(make_file):
    path = make_file("a.txt", "\ufeffcafé\n".encode())
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) == UTF_8


def test_ascii_is_valid_utf8(make_file):
    path = make_file("a.txt", b"plain text\n")
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) == UTF_8


def test_latin1_is_not_utf8(make_file):
    path = make_file("a.txt", "café\n".encode("latin-1"))
    assert has_utf8_content(path) is False


def test_truncated_sequence_at_end(make_file):
    path = make_file("a.txt", "café".encode()[:-1])
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) is None


def test_overlong_encoding_rejected(make_file):
    path = make_file("a.txt", b"a\xc0\xafb")
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) is None


def test_encoded_surrogate_rejected(make_file):
    path = make_file("a.txt", b"a\xed\xa0\x80b")
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) is None


def test_invalid_byte_deep_in_file(make_file):
    path = make_file("a.txt", "é".encode() * 100_000 + b"\xff")
    assert detect_utf8(path, DetectionPass.CONTENT_SCAN) is None


def test_content_scan_logs_timing(make_file, caplog):
    caplog.set_level(logging.DEBUG)
    path = make_file("a.txt", "é\nü\n".encode())
    detect_utf8(path, DetectionPass.CONTENT_SCAN)
    assert "testing for UTF-8; 2 line(s) read" in caplog.text


def test_missing_file_is_logged_not_raised(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    missing = tmp_path / "missing.txt"
    assert detect_utf8(missing, DetectionPass.METADATA_ONLY) is None
    assert detect_utf8(missing, DetectionPass.CONTENT_SCAN) is None
    assert "When reading file" in caplog.text
