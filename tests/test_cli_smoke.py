"""End-to-end checks for the tabalign CLI."""

from __future__ import annotations

import json
from pathlib import Path

from tabalign import __version__


def test_help_lists_commands(run_tabalign) -> None:
    result = run_tabalign(["--help"])

    assert result.returncode == 0
    for expected in ["align", "indent", "format", "config"]:
        assert expected in result.stdout


def test_version_flag_prints_package_version(run_tabalign) -> None:
    result = run_tabalign(["--version"])

    assert result.returncode == 0
    assert __version__ in result.stdout


def test_align_reads_stdin(run_tabalign) -> None:
    result = run_tabalign(["align", "-d", ":"], stdin="a: bb\nccc: d\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a   :bb\nccc :d \n"


def test_align_json_output(run_tabalign) -> None:
    result = run_tabalign(["--json", "align", "-d", ",", "-f", "r1"], stdin="1,22\n333,4\n")

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload == {
        "start": 1,
        "end": 2,
        "lines": ["  1 ,22", "333 , 4"],
        "changed": 2,
    }


def test_align_in_place_with_cursor(run_tabalign, tmp_path: Path) -> None:
    source = tmp_path / "settings.txt"
    source.write_text("[section]\nx = 1\nlong = 2\n\nother\n", encoding="utf-8")

    result = run_tabalign(["align", str(source), "-d", "=", "--line", "2", "--in-place"])

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""
    assert source.read_text(encoding="utf-8") == "[section]\nx    =1\nlong =2\n\nother\n"


def test_align_uses_config_default_delimiter(run_tabalign, tmp_path: Path) -> None:
    (tmp_path / ".tabalign.toml").write_text(
        "[defaults]\ndelimiter = '\\|'\nformat = 'c0'\n",
        encoding="utf-8",
    )

    result = run_tabalign(["align"], stdin="a|bbb\nccc|d\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == " a |bbb\nccc| d \n"


def test_align_without_delimiter_fails(run_tabalign) -> None:
    result = run_tabalign(["align"], stdin="a,b\n")

    assert result.returncode == 1
    assert "Delimiter cannot be empty" in result.stderr


def test_align_bad_format_reports_position(run_tabalign) -> None:
    result = run_tabalign(["align", "-d", ",", "-f", "l1q"], stdin="a,b\n")

    assert result.returncode == 1
    assert "position 2" in result.stderr
    assert result.stdout == ""


def test_align_bad_pattern_fails(run_tabalign) -> None:
    result = run_tabalign(["align", "-d", "["], stdin="a,b\n")

    assert result.returncode == 1
    assert "Invalid delimiter pattern" in result.stderr


def test_format_parse_json(run_tabalign) -> None:
    result = run_tabalign(["--json", "format", "parse", "r2c3"])

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout) == {
        "spec": "r2c3",
        "items": [{"alignment": "r", "pad": 2}, {"alignment": "c", "pad": 3}],
    }


def test_indent_porcelain(run_tabalign) -> None:
    result = run_tabalign(["--porcelain", "indent"], stdin="    a\n  b\n\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "indentation=  \twidth=2\n"


def test_config_show_defaults(run_tabalign) -> None:
    result = run_tabalign(["config", "show"])

    assert result.returncode == 0, result.stderr
    assert "delimiter: (unset)" in result.stdout
    assert "format: l1" in result.stdout


def test_align_in_place_preserves_terminators_outside_selection(
    run_tabalign, tmp_path: Path
) -> None:
    source = tmp_path / "table.txt"
    source.write_bytes(b"a,b\r\nccc,d\r\nsection\x0cbreak\r\nx,y")

    result = run_tabalign(
        ["align", str(source), "-d", ",", "--start", "1", "--end", "2", "--in-place"]
    )

    assert result.returncode == 0, result.stderr
    assert source.read_bytes() == b"a   ,b\r\nccc ,d\r\nsection\x0cbreak\r\nx,y"


def test_align_line_numbers_ignore_form_feeds(run_tabalign, tmp_path: Path) -> None:
    source = tmp_path / "table.txt"
    source.write_bytes(b"a,b\r\nccc,d\r\nsection\x0cbreak\r\nx,y")

    result = run_tabalign(["align", str(source), "-d", ",", "--line", "4", "-i"])

    assert result.returncode == 0, result.stderr
    assert source.read_bytes() == b"a,b\r\nccc,d\r\nsection\x0cbreak\r\nx ,y"


def test_align_flag_wins_over_empty_env_default(run_tabalign, cli_env) -> None:
    cli_env["TABALIGN_DEFAULT_DELIMITER"] = ""
    cli_env["TABALIGN_DEFAULT_FORMAT"] = ""

    result = run_tabalign(["align", "-d", ","], stdin="a,bb\nccc,d\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a   ,bb\nccc ,d \n"


def test_align_flags_skip_broken_config(run_tabalign, tmp_path: Path) -> None:
    (tmp_path / ".tabalign.toml").write_text("[defaults]\ndelimiter = '('\n", encoding="utf-8")

    result = run_tabalign(["align", "-d", ",", "-f", "l1"], stdin="a,b\n")

    assert result.returncode == 0, result.stderr
    assert result.stdout == "a ,b\n"


def test_align_porcelain_lists_replaced_lines(run_tabalign) -> None:
    result = run_tabalign(
        ["--porcelain", "align", "-d", "=", "--line", "2"],
        stdin="intro\nx=1\nlong=2\n",
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout == "2\tx    =1\n3\tlong =2\n"


def test_format_parse_porcelain(run_tabalign) -> None:
    result = run_tabalign(["--porcelain", "format", "parse", "r2c3"])

    assert result.returncode == 0, result.stderr
    assert result.stdout == "0\tr\t2\n1\tc\t3\n"


def test_serve_reuses_last_inputs(run_tabalign) -> None:
    requests = "\n".join(
        json.dumps(request)
        for request in (
            {
                "id": 1,
                "op": "align.run",
                "input": {"lines": ["a,bb", "ccc,d"], "delimiter": ",", "format_spec": "r1"},
            },
            {"id": 2, "op": "align.run", "input": {"lines": ["1,22", "333,4"]}},
        )
    )

    result = run_tabalign(["serve"], stdin=requests + "\n")

    assert result.returncode == 0, result.stderr
    responses = [json.loads(line) for line in result.stdout.splitlines()]
    assert [response["ok"] for response in responses] == [True, True]
    assert responses[0]["result"]["lines"] == ["  a ,bb", "ccc , d"]
    assert responses[1]["result"]["lines"] == ["  1 ,22", "333 , 4"]
