from __future__ import annotations

import argparse

import pytest

import main
from config import config


def _run(argv: list[str]) -> int:
    return main.main(main.build_parser().parse_args(argv))


def _result(output: str) -> float:
    line = [ln for ln in output.splitlines() if ln.startswith("result = ")][-1]
    return float(line.split("=", 1)[1])


def test_expression_with_variables(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["sin(rad($x$))", "--var", "x=90"]) == 0
    assert _result(capsys.readouterr().out) == pytest.approx(1.0)


def test_show_rpn(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["2^3^2", "--show_rpn"]) == 0
    out = capsys.readouterr().out
    assert "rpn = 2 3 ^ 2 ^" in out
    assert _result(out) == 64.0


def test_marker_option(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["'a'+'b'", "--marker", "'", "--var", "a=1", "--var", "b=2"]) == 0
    assert _result(capsys.readouterr().out) == 3.0


def test_errors_return_nonzero(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["(1+2"]) == 1
    assert _run(["$x$", "--var", "y=1"]) == 1
    assert "result" not in capsys.readouterr().out


def test_missing_expression() -> None:
    assert _run([]) == 2


def test_demo(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["--demo"]) == 0
    out = capsys.readouterr().out
    assert "EXAMPLE 1" in out and "EXAMPLE 2" in out
    results = [float(ln.split("=", 1)[1]) for ln in out.splitlines() if ln.startswith("result = ")]
    assert results[0] == pytest.approx(3.44461, abs=1e-4)
    assert results[1] == pytest.approx(results[0])


@pytest.mark.parametrize("text", ["x", "=1", "x=abc"])
def test_bad_binding_argument(text: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        main.parse_binding(text)


def test_validate_config_rejects_grammar_marker(monkeypatch: pytest.MonkeyPatch) -> None:
    config.validate_config()
    monkeypatch.setitem(config.PARSER_CONFIG, "variable_marker", "+")
    with pytest.raises(AssertionError):
        config.validate_config()
