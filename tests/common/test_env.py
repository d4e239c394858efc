from __future__ import annotations

"""`common.env` の環境変数パーサのテスト。"""

import pytest

from common.env import env_bool, env_int, env_str


def test_env_int_parses_and_clamps(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMX_TEST_INT", " 7 ")
    assert env_int("TMX_TEST_INT", 1) == 7
    monkeypatch.setenv("TMX_TEST_INT", "-3")
    assert env_int("TMX_TEST_INT", 1, min_value=0) == 0


def test_env_int_invalid_or_missing_returns_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TMX_TEST_INT", raising=False)
    assert env_int("TMX_TEST_INT", 5) == 5
    assert env_int("TMX_TEST_INT") is None
    monkeypatch.setenv("TMX_TEST_INT", "abc")
    assert env_int("TMX_TEST_INT", 5) == 5
    monkeypatch.setenv("TMX_TEST_INT", "")
    assert env_int("TMX_TEST_INT", 5) == 5


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("yes", True), ("off", False), ("maybe", True)],
)
def test_env_bool_variants(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("TMX_TEST_BOOL", raw)
    # 不明な文字列は既定値（True）
    assert env_bool("TMX_TEST_BOOL", True) is expected


def test_env_str_choices(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMX_TEST_STR", "  Debug ")
    assert env_str("TMX_TEST_STR") == "Debug"
    assert env_str("TMX_TEST_STR", choices=("DEBUG", "INFO")) == "debug"
    monkeypatch.setenv("TMX_TEST_STR", "loud")
    assert env_str("TMX_TEST_STR", "info", choices=("DEBUG", "INFO")) == "info"
    monkeypatch.setenv("TMX_TEST_STR", "   ")
    assert env_str("TMX_TEST_STR", "x") == "x"
