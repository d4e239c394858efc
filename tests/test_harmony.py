from __future__ import annotations

"""ハーモニー・プロファイル表のテスト。"""

import pytest

from tonematrix import HarmonyMode, HueOffsetProfile, UnknownHarmonyMode, profile_for
from tonematrix.harmony import CENTER_INDEX, SPINE_LENGTH, ShapingRule, shaping_for


def test_from_value_accepts_enum_and_names() -> None:
    assert HarmonyMode.from_value(HarmonyMode.TETRADIC) is HarmonyMode.TETRADIC
    assert HarmonyMode.from_value("vibrant") is HarmonyMode.VIBRANT
    assert HarmonyMode.from_value(" Monochrome ") is HarmonyMode.MONOCHROME


@pytest.mark.parametrize("bad", ["triadic", "", None, 3])
def test_from_value_rejects_unknown(bad: object) -> None:
    with pytest.raises(UnknownHarmonyMode) as ei:
        HarmonyMode.from_value(bad)  # type: ignore[arg-type]
    assert ei.value.value == bad
    assert "vibrant" in str(ei.value)


def test_every_mode_has_a_nine_step_profile_centered_on_zero() -> None:
    for mode in HarmonyMode:
        prof = profile_for(mode)
        assert len(prof) == SPINE_LENGTH
        assert prof[CENTER_INDEX] == 0


@pytest.mark.parametrize(
    "mode, step",
    [(HarmonyMode.VIBRANT, 22.0), (HarmonyMode.ANALOGOUS, 7.5), (HarmonyMode.MONOCHROME, 2.0)],
)
def test_linear_profiles(mode: HarmonyMode, step: float) -> None:
    prof = profile_for(mode)
    assert list(prof.offsets) == [(i - 4) * step for i in range(9)]


def test_table_profiles() -> None:
    assert profile_for("tetradic").offsets == (-180, -120, -60, -30, 0, 30, 60, 120, 180)
    assert profile_for("quadratic").offsets == (-180, -135, -90, -45, 0, 45, 90, 135, 180)


def test_profile_validation() -> None:
    with pytest.raises(ValueError):
        HueOffsetProfile((0.0,) * 8)
    with pytest.raises(ValueError):
        HueOffsetProfile((1.0,) * 9)


def test_shaping_rule_is_shared_and_signed() -> None:
    rules = {shaping_for(m) for m in HarmonyMode}
    assert rules == {ShapingRule(5.0, 5.0)}
    rule = shaping_for("vibrant")
    assert rule.deltas(4) == (0.0, 0.0)
    # 左側: 明るく・低彩度、右側: 暗く・高彩度
    assert rule.deltas(0) == (20.0, -20.0)
    assert rule.deltas(8) == (-20.0, 20.0)
