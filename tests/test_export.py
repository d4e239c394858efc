from __future__ import annotations

"""エクスポート形式のテスト。"""

import json

import pytest

from tonematrix import ExportFormat, PaletteResult, export_palette
from tonematrix.export import (
    EXPORT_FORMAT_OPTIONS,
    HARMONY_MODE_OPTIONS,
    PROCREATE_MAX_SWATCHES,
)


def _hexes(pal: PaletteResult) -> list[str]:
    return [e.hex for e in pal.flat()]


def test_w3c_tokens(pink_palette: PaletteResult) -> None:
    data = json.loads(export_palette(pink_palette, ExportFormat.W3C_TOKENS))
    assert data["color"]["mother"] == {"$value": "#EC4899", "$type": "color"}
    tokens = data["color"]["palette"]
    assert len(tokens) == 36
    assert tokens["tone-2-4"]["$value"] == "#EC4899"
    assert tokens["tone-0-0"]["description"] == pink_palette.matrix[0][0].name


def test_procreate(pink_palette: PaletteResult) -> None:
    data = json.loads(export_palette(pink_palette, "procreate"))
    assert len(data) == 1
    assert data[0]["name"] == f"Palettable: {pink_palette.featured[0].name}"
    swatches = data[0]["swatches"]
    assert len(swatches) == PROCREATE_MAX_SWATCHES
    for s in swatches:
        assert 0.0 <= s["hue"] <= 1.0
        assert 0.0 <= s["saturation"] <= 1.0
        assert 0.0 <= s["brightness"] <= 1.0
        assert s["alpha"] == 1


def test_css(pink_palette: PaletteResult) -> None:
    css = export_palette(pink_palette, "css")
    assert css.startswith("/* Palettable: ")
    assert "  --mother-color: #EC4899;" in css
    assert css.count("--tone-") == 36
    assert css.rstrip().endswith("}")


def test_hex_list(pink_palette: PaletteResult) -> None:
    out = export_palette(pink_palette, "hex_list")
    assert out.split("\n") == _hexes(pink_palette)


def test_json_matches_record(pink_palette: PaletteResult) -> None:
    data = json.loads(export_palette(pink_palette, ExportFormat.JSON))
    assert [e["hex"] for e in data["matrix"]] == _hexes(pink_palette)


def test_title_comes_from_settings(monkeypatch: pytest.MonkeyPatch, pink_palette: PaletteResult) -> None:
    from common import settings

    monkeypatch.setattr(settings, "load_config", lambda: {"export": {"title": "Studio"}})
    settings.reload_from_env()
    assert export_palette(pink_palette, "css").startswith("/* Studio: ")


def test_unknown_format_is_rejected(pink_palette: PaletteResult) -> None:
    with pytest.raises(ValueError):
        export_palette(pink_palette, "ase")


def test_option_lists_cover_every_value() -> None:
    """UI 用の選択肢リストが全モード・全形式を順序どおりに網羅する。"""
    from tonematrix import HarmonyMode

    assert [m for _, m in HARMONY_MODE_OPTIONS] == list(HarmonyMode)
    assert [f for _, f in EXPORT_FORMAT_OPTIONS] == list(ExportFormat)
