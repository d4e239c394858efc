from __future__ import annotations

"""`common.logging` の初期化ヘルパのテスト。"""

import logging

import pytest

from common.logging import resolve_level, setup_default_logging


def test_resolve_level_names_and_numbers() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(" WARNING ") == logging.WARNING
    assert resolve_level("nonsense") == logging.INFO
    assert resolve_level(logging.ERROR) == logging.ERROR


def test_setup_default_logging_is_noop_when_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    """ルートにハンドラがあれば設定を変更しない。"""
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    before = root.level
    setup_default_logging("DEBUG")
    assert root.handlers == [handler]
    assert root.level == before
