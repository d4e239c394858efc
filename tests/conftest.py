"""共通フィクスチャ。

- 設定（`TMX_*` 環境変数）の隔離
- 乱数シード固定の命名器
- よく使うパレット試料
"""

from __future__ import annotations

import os
from typing import Iterator

import pytest

from common import settings
from tonematrix import ColorNamer, PaletteResult, generate_palette

SEED_HEX = "#EC4899"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """テストごとに `TMX_*` を除去して設定を再読込し、終了後にも戻す。"""
    for name in list(os.environ):
        if name.startswith("TMX_"):
            monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()


@pytest.fixture()
def namer() -> ColorNamer:
    """シード固定の命名器。"""
    return ColorNamer(seed=12345)


@pytest.fixture()
def pink_palette(namer: ColorNamer) -> PaletteResult:
    """`#EC4899` / vibrant のパレット。"""
    return generate_palette(SEED_HEX, "vibrant", namer=namer)
