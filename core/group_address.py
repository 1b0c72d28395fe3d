"""Lenient group address parsing for export rows."""

from typing import NamedTuple


class GroupAddress(NamedTuple):
    main: int
    middle: int
    sub: int

    def __str__(self) -> str:
        return f"{self.main}/{self.middle}/{self.sub}"


def _to_int(part: str) -> int:
    try:
        return int(part.strip())
    except ValueError:
        return 0


def parse_group_address(text: str | None) -> GroupAddress:
    """Parse "1/0/0" or "1/0" into (main, middle, sub).

    Missing or non-numeric parts become 0 so a malformed address still
    yields a row. Parts after the third are ignored.
    """
    parts = (text or "").split("/")
    values = [_to_int(p) for p in parts[:3]]
    values += [0] * (3 - len(values))
    return GroupAddress(*values)
