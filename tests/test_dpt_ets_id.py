"""Tests for DPT code to ETS DPST identifier conversion."""

from __future__ import annotations

import pytest

from dpt import to_ets_id


@pytest.mark.parametrize(
    "dpt, expected",
    [
        ("DPT1.001", "DPST-1-1"),
        ("DPT1.008", "DPST-1-8"),
        ("DPT5.001", "DPST-5-1"),
        ("DPT5.010", "DPST-5-10"),
        ("DPT9.001", "DPST-9-1"),
        ("DPT14.027", "DPST-14-27"),
        ("DPT20.102", "DPST-20-102"),
        ("DPT1.000", "DPST-1-0"),
    ],
)
def test_human_codes_convert(dpt: str, expected: str):
    assert to_ets_id(dpt) == expected


@pytest.mark.parametrize("dpt", ["not-a-dpt", "1.001", "DPST-1-1", "DPT1", "custom 16 bit"])
def test_unknown_codes_pass_through(dpt: str):
    """Anything outside DPT<main>.<sub> is written unchanged."""
    assert to_ets_id(dpt) == dpt


def test_empty_and_none():
    assert to_ets_id("") == ""
    assert to_ets_id(None) == ""
