from __future__ import annotations

import pytest

from util.color import canonical_hex, hex_to_rgb, rgb_to_hex


def test_canonical_hex_valid_variants() -> None:
    assert canonical_hex("#ec4899") == "#EC4899"
    assert canonical_hex("EC4899") == "#EC4899"
    assert canonical_hex("#AbCdEf") == "#ABCDEF"


@pytest.mark.parametrize(
    "bad", ["#123", "not-a-color", "#GGGGGG", "##EC4899", " #EC4899", "#EC4899\n", "0xEC4899", ""]
)
def test_canonical_hex_invalid(bad: str) -> None:
    with pytest.raises(ValueError):
        canonical_hex(bad)


def test_hex_to_rgb_and_back() -> None:
    assert hex_to_rgb("#112233") == (0x11, 0x22, 0x33)
    assert rgb_to_hex(0x11, 0x22, 0x33) == "#112233"


def test_rgb_to_hex_rounds_and_clamps() -> None:
    assert rgb_to_hex(-4.0, 255.4, 300.0) == "#00FFFF"
    assert rgb_to_hex(127.5, 0.49, 254.6) == "#8000FF"
