from __future__ import annotations

"""CLI（`tonematrix.cli.main`）のテスト。"""

import json

import pytest

from tonematrix.cli import build_parser, main
from tonematrix.export import EXPORT_FORMAT_OPTIONS, HARMONY_MODE_OPTIONS


def test_hex_list_default(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["#EC4899", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 36
    assert lines[2 * 9 + 4] == "#EC4899"


def test_json_format_with_mode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["ec4899", "--mode", "Tetradic", "--format", "json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "tetradic"
    assert data["featured"][0]["hex"] == "#EC4899"


def test_seed_makes_names_reproducible(capsys: pytest.CaptureFixture[str]) -> None:
    main(["#2563EB", "--format", "css", "--seed", "5"])
    first = capsys.readouterr().out
    main(["#2563EB", "--format", "css", "--seed", "5"])
    assert capsys.readouterr().out == first


@pytest.mark.parametrize(
    "argv, fragment",
    [(["#12345"], "invalid color"), (["#123456", "--mode", "pastel"], "unknown harmony mode")],
)
def test_bad_input_exits_2(argv: list[str], fragment: str, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(argv) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert fragment in captured.err


def test_unknown_format_is_an_argparse_error() -> None:
    with pytest.raises(SystemExit) as ei:
        main(["#123456", "--format", "ase"])
    assert ei.value.code == 2


def test_parser_choices_and_help_follow_option_lists() -> None:
    """`--format` の候補とヘルプ文が選択肢リストから組み立てられる。"""
    parser = build_parser()
    fmt_action = next(a for a in parser._actions if a.dest == "fmt")
    assert fmt_action.choices == [fmt.value for _, fmt in EXPORT_FORMAT_OPTIONS]

    help_text = parser.format_help()
    for label, _ in HARMONY_MODE_OPTIONS + EXPORT_FORMAT_OPTIONS:
        assert label in " ".join(help_text.split())
