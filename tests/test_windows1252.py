"""Tests for the Windows-1252 byte encoder."""

from __future__ import annotations

import pytest

from core.windows1252 import WINDOWS_1252_TABLE, encode_windows_1252, encode_with_report


def test_latin1_range_maps_to_same_byte():
    text = "".join(chr(i) for i in range(256))
    assert encode_windows_1252(text) == bytes(range(256))


def test_table_matches_windows_1252_codec():
    for code_point, byte in WINDOWS_1252_TABLE.items():
        assert chr(code_point).encode("cp1252") == bytes([byte])
        assert encode_windows_1252(chr(code_point)) == bytes([byte])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("€ 5", b"\x80 5"),
        ("Œuvre", b"\x8cuvre"),
        ("Dimmen – 50%", b"Dimmen \x96 50%"),
        ("“Scène”", b"\x93Sc\xe8ne\x94"),
    ],
)
def test_windows_1252_punctuation(text: str, expected: bytes):
    assert encode_windows_1252(text) == expected


@pytest.mark.parametrize("text", ["Ω", "中", "\U0001f4a1", "ł"])
def test_unmappable_becomes_question_mark(text: str):
    assert encode_windows_1252(text) == b"?"


def test_input_is_nfc_normalised_first():
    assert encode_windows_1252("Ve\u0301randa") == b"V\xe9randa"


def test_uncomposable_combining_mark_is_replaced():
    assert encode_windows_1252("q\u0303") == b"q?"


def test_report_counts_replacements():
    content, replaced = encode_with_report("Zoł ★ Keuken")
    assert content == b"Zo? ? Keuken"
    assert replaced == 2


def test_no_bom_and_no_terminator():
    assert encode_windows_1252("Main;Middle") == b"Main;Middle"
    assert encode_windows_1252("") == b""
