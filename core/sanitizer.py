"""Display name sanitizing for the ETS export.

Names reach the exporter from stored projects and translation tables, and
some of them were saved after UTF-8 bytes had been decoded as a single-byte
codepage ("scÃ¨nes" instead of "scènes"). Every accented letter of the
supported locales is encoded in UTF-8 as 0xC3 plus one continuation byte
(0x80-0xBF), so the damage always shows up as "Ã" followed by the
continuation byte rendered in Latin-1 or Windows-1252.

Repair runs in two stages:
  1. a single pass over every "Ã" + follower pair using MOJIBAKE_TABLE
  2. WORD_FIXES for recurring words whose continuation byte got lost,
     where the bare "Ã" cannot tell which letter it stood for

Usage:
    from core.sanitizer import sanitize_name, capitalize_first

    sanitize_name("atenuaciÃ³n")   # → "atenuación"
    capitalize_first("schakelen")   # → "Schakelen"
"""

import logging
import re
import unicodedata

logger = logging.getLogger("etscsv.sanitizer")

MOJIBAKE_MARKER = "\u00c3"  # "Ã", UTF-8 lead byte 0xC3 seen as Latin-1

# Windows-1252 renders most of 0x80-0x9F as punctuation instead of the
# Latin-1 C1 controls; 0x81, 0x8D, 0x8F, 0x90 and 0x9D are unassigned.
_CP1252_HIGH = {
    0x80: "€", 0x82: "‚", 0x83: "ƒ", 0x84: "„",
    0x85: "…", 0x86: "†", 0x87: "‡", 0x88: "ˆ",
    0x89: "‰", 0x8A: "Š", 0x8B: "‹", 0x8C: "Œ",
    0x8E: "Ž", 0x91: "‘", 0x92: "’", 0x93: "“",
    0x94: "”", 0x95: "•", 0x96: "–", 0x97: "—",
    0x98: "˜", 0x99: "™", 0x9A: "š", 0x9B: "›",
    0x9C: "œ", 0x9E: "ž", 0x9F: "Ÿ",
}


def _build_mojibake_table() -> dict[str, str]:
    """Map every corrupted two-character sequence to the letter it encodes.

    U+00C0-U+00FF are C3 80 - C3 BF in UTF-8. Each continuation byte is
    registered in both its Latin-1 form and, for 0x80-0x9F, its
    Windows-1252 form, so uppercase letters stay distinguishable.
    """
    table = {}
    for byte in range(0x80, 0xC0):
        correct = chr(0x40 + byte)
        table[MOJIBAKE_MARKER + chr(byte)] = correct
        if byte in _CP1252_HIGH:
            table[MOJIBAKE_MARKER + _CP1252_HIGH[byte]] = correct
    # A non-breaking space (0xA0, "à") is often flattened to a plain space
    table[MOJIBAKE_MARKER + " "] = "à"
    return table


MOJIBAKE_TABLE = _build_mojibake_table()

_MOJIBAKE_RE = re.compile(
    MOJIBAKE_MARKER + "[" + "".join(re.escape(seq[1]) for seq in MOJIBAKE_TABLE) + "]"
)

# Applied after MOJIBAKE_TABLE, case-insensitive. Only forms whose
# continuation byte was dropped reach this table.
WORD_FIXES = (
    ("scÃnes", "scènes"),
    ("atenuaciÃn", "atenuación"),
    ("posiciÃn", "posición"),
)

_WORD_FIX_RES = tuple(
    (re.compile(re.escape(broken), re.IGNORECASE), fixed) for broken, fixed in WORD_FIXES
)


def repair_mojibake(text: str) -> str:
    """Undo one round of UTF-8-read-as-Latin-1 corruption.

    Strings without the marker are returned as they are.
    """
    if not text or MOJIBAKE_MARKER not in text:
        return text

    fixed = _MOJIBAKE_RE.sub(lambda m: MOJIBAKE_TABLE[m.group(0)], text)
    for pattern, replacement in _WORD_FIX_RES:
        fixed = pattern.sub(replacement, fixed)

    if fixed != text:
        logger.debug("Repaired mojibake: %r -> %r", text, fixed)
    return fixed


def sanitize_name(raw: str | None) -> str:
    """Repair mojibake and normalise to NFC. Never raises."""
    if not raw:
        return ""
    return unicodedata.normalize("NFC", repair_mojibake(raw))


def capitalize_first(text: str) -> str:
    """Uppercase the first character only, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]
