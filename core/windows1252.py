"""Windows-1252 byte encoding for the ETS CSV file.

ETS reads imported CSV files in the Windows ANSI codepage, not UTF-8.

Encoding rules, per code point after NFC normalisation:
  - U+0000-U+00FF are written as the byte of the same value. Windows-1252
    and Latin-1 agree everywhere except 0x80-0x9F, where Latin-1 has C1
    control characters and Windows-1252 has punctuation. U+0080-U+009F are
    written through unchanged; the names this exporter sees never contain
    C1 controls.
  - Characters Windows-1252 places in 0x80-0x9F (€, Š, œ, curly quotes,
    dashes, ...) are looked up in WINDOWS_1252_TABLE.
  - Anything else becomes "?" (0x3F). Encoding never fails.

No byte order mark is written.
"""

import unicodedata

REPLACEMENT_BYTE = 0x3F  # "?"

WINDOWS_1252_TABLE = {
    0x20AC: 0x80,  # €
    0x201A: 0x82,  # ‚
    0x0192: 0x83,  # ƒ
    0x201E: 0x84,  # „
    0x2026: 0x85,  # …
    0x2020: 0x86,  # †
    0x2021: 0x87,  # ‡
    0x02C6: 0x88,  # ˆ
    0x2030: 0x89,  # ‰
    0x0160: 0x8A,  # Š
    0x2039: 0x8B,  # ‹
    0x0152: 0x8C,  # Œ
    0x017D: 0x8E,  # Ž
    0x2018: 0x91,  # ‘
    0x2019: 0x92,  # ’
    0x201C: 0x93,  # “
    0x201D: 0x94,  # ”
    0x2022: 0x95,  # •
    0x2013: 0x96,  # –
    0x2014: 0x97,  # —
    0x02DC: 0x98,  # ˜
    0x2122: 0x99,  # ™
    0x0161: 0x9A,  # š
    0x203A: 0x9B,  # ›
    0x0153: 0x9C,  # œ
    0x017E: 0x9E,  # ž
    0x0178: 0x9F,  # Ÿ
}


def encode_with_report(text: str) -> tuple[bytes, int]:
    """Encode text and return (bytes, number of characters replaced by "?")."""
    out = bytearray()
    replaced = 0
    for ch in unicodedata.normalize("NFC", text or ""):
        code = ord(ch)
        if code <= 0xFF:
            out.append(code)
        elif code in WINDOWS_1252_TABLE:
            out.append(WINDOWS_1252_TABLE[code])
        else:
            out.append(REPLACEMENT_BYTE)
            replaced += 1
    return bytes(out), replaced


def encode_windows_1252(text: str) -> bytes:
    """Encode text as Windows-1252 bytes, replacing unmappable characters with "?"."""
    return encode_with_report(text)[0]
