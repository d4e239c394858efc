"""
どこで: `common.settings`
何を: 実行時設定（既定モード/命名シード/ログレベル/形容詞リスト/エクスポート名）を型付きで一元管理する。
なぜ: `os.getenv` や YAML 参照の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

優先順（後勝ち）:
1) `_Settings` のコード既定値
2) `configs/default.yaml` → ルート `config.yaml`（`util.utils.load_config`）
3) 環境変数 `TMX_*`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from util.utils import load_config

from .env import env_int, env_str

DEFAULT_ADJECTIVES: tuple[str, ...] = (
    "Vibrant",
    "Soft",
    "Deep",
    "Electric",
    "Misty",
    "Royal",
    "Sunset",
    "Ocean",
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
# `tonematrix.harmony.HarmonyMode` の値と一致させること（L0 から上位層は import しない）
HARMONY_MODES = ("vibrant", "monochrome", "analogous", "tetradic", "quadratic")


@dataclass
class _Settings:
    # Palette
    DEFAULT_MODE: str = "vibrant"

    # Naming
    NAME_SEED: int | None = None
    ADJECTIVES: tuple[str, ...] = field(default=DEFAULT_ADJECTIVES)

    # Export
    EXPORT_TITLE: str = "Palettable"

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def _section(cfg: dict[str, Any], key: str) -> dict[str, Any]:
    value = cfg.get(key)
    return value if isinstance(value, dict) else {}


def _apply_config(cfg: dict[str, Any]) -> None:
    palette = _section(cfg, "palette")
    mode = palette.get("default_mode")
    if isinstance(mode, str) and mode.strip().lower() in HARMONY_MODES:
        _settings.DEFAULT_MODE = mode.strip().lower()

    naming = _section(cfg, "naming")
    adjectives = naming.get("adjectives")
    if isinstance(adjectives, (list, tuple)):
        words = tuple(str(w).strip() for w in adjectives if str(w).strip())
        if words:
            _settings.ADJECTIVES = words
    seed = naming.get("seed")
    if isinstance(seed, int) and not isinstance(seed, bool):
        _settings.NAME_SEED = seed

    export = _section(cfg, "export")
    title = export.get("title")
    if isinstance(title, str) and title.strip():
        _settings.EXPORT_TITLE = title.strip()

    logging_cfg = _section(cfg, "logging")
    level = logging_cfg.get("level")
    if isinstance(level, str) and level.strip().upper() in _LOG_LEVELS:
        _settings.LOG_LEVEL = level.strip().upper()


def reload_from_env() -> None:
    """設定ファイルと環境変数から設定を再読込。

    - まずコード既定値に戻し、YAML → 環境変数の順に上書きする。
    - 不正値はいずれも黙って無視し、直前の値を保つ（フェイルソフト）。
    """
    defaults = _Settings()
    for name in defaults.__dataclass_fields__:
        setattr(_settings, name, getattr(defaults, name))

    _apply_config(load_config())

    mode = env_str("TMX_DEFAULT_MODE", choices=HARMONY_MODES)
    if mode is not None:
        _settings.DEFAULT_MODE = mode
    _settings.NAME_SEED = env_int("TMX_NAME_SEED", _settings.NAME_SEED)
    level = env_str("TMX_LOG_LEVEL", choices=_LOG_LEVELS)
    if level is not None:
        _settings.LOG_LEVEL = level.upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings", "DEFAULT_ADJECTIVES", "HARMONY_MODES"]
