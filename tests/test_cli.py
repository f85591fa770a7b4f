from __future__ import annotations

import logging

import pytest

from stringcraft.cli import build_parser, main


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_cli_sprintf_writes_rendered_template(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["sprintf", "%s costs $%.2f", "Coffee", "2"])
    assert exit_code == 0
    assert capsys.readouterr().out == "Coffee costs $2.00\n"


def test_cli_sprintf_applies_config_options(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["sprintf", "%f %x", "1.5", "-1", "--float-precision", "1", "--integer-bits", "8"])
    assert exit_code == 0
    assert capsys.readouterr().out == "1.5 ff\n"


def test_cli_sprintf_reports_format_errors(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["sprintf", "%s %s", "only"])
    captured = capsys.readouterr()
    assert exit_code == 1
    assert captured.out == ""
    assert "sprintf(): Too few arguments" in captured.err


def test_cli_sprintf_rejects_invalid_config(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["sprintf", "%s", "x", "--integer-bits", "0"])
    assert exit_code == 2
    assert "integer_bits must be positive" in capsys.readouterr().err


def test_cli_chain_applies_functions_in_order(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["chain", "  XMLHttpRequest ", "trim", "snake_case"])
    assert exit_code == 0
    assert capsys.readouterr().out == "xml_http_request\n"


def test_cli_chain_prints_lists_one_item_per_line(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["chain", "Hello brave world", "words"])
    assert exit_code == 0
    assert capsys.readouterr().out == "Hello\nbrave\nworld\n"


def test_cli_chain_prints_non_string_results(capsys: pytest.CaptureFixture[str]):
    assert main(["chain", "two words", "count_words"]) == 0
    assert capsys.readouterr().out == "2\n"


def test_cli_chain_rejects_unknown_functions(capsys: pytest.CaptureFixture[str]):
    exit_code = main(["chain", "text", "trim", "explode"])
    assert exit_code == 2
    assert "unknown function(s): explode" in capsys.readouterr().err


def test_cli_verbose_enables_debug_logging(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]):
    levels: list[int] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: levels.append(kwargs["level"]))

    assert main(["-v", "sprintf", "%d", "7"]) == 0
    assert levels == [logging.DEBUG]
    assert capsys.readouterr().out == "7\n"
