"""Tests for the command dispatcher."""

import errno

import pytest

from ptsim import cli

EMPTY_ROW = "." * 16 + "\n"


def test_no_commands_prints_usage(capsys) -> None:
    assert cli.main([]) == 1
    assert "usage: ptsim commands" in capsys.readouterr().err


def test_full_session(capsys) -> None:
    status = cli.main("np 0 2 pfm ppt 0 sb 0 261 7 lb 0 261 kp 0 pfm".split())
    assert status == 0
    assert capsys.readouterr().out == (
        "--- PAGE FREE MAP ---\n"
        "####............\n" + EMPTY_ROW * 3 +
        "--- PROCESS 0 PAGE TABLE ---\n"
        "00 -> 02\n"
        "01 -> 03\n"
        "Store proc 0: 261 => 773, value=7\n"
        "Load proc 0: 261 => 773, value=7\n"
        "--- PAGE FREE MAP ---\n"
        "#...............\n" + EMPTY_ROW * 3
    )


def test_hex_operands(capsys) -> None:
    assert cli.main("np 0 2 sb 0 0x105 0xff".split()) == 0
    assert capsys.readouterr().out == "Store proc 0: 261 => 773, value=255\n"


def test_pmap(capsys) -> None:
    assert cli.main("np 1 1 pmap".split()) == 0
    out = capsys.readouterr().out
    assert "--- PHYSICAL MEMORY MAP ---\n" in out
    assert "0x0100-0x01ff process 1 page table\n" in out
    assert "0x0200-0x02ff process 1 vpage 0x00\n" in out


def test_error_is_reported_and_execution_continues(capsys) -> None:
    status = cli.main("lb 0 0 np 0 1 lb 0 0 lb 0 0x100 kp 5 pfm".split())
    assert status == errno.EINVAL
    captured = capsys.readouterr()
    assert "process 0 has no page table" in captured.err
    assert "virtual page 0x01" in captured.err
    assert "process 5 has no page table" in captured.err
    assert "Load proc 0: 0 => 512, value=0\n" in captured.out
    assert "--- PAGE FREE MAP ---\n###" in captured.out


def test_bad_value_is_reported(capsys) -> None:
    assert cli.main("np 0 1 sb 0 0 300".split()) == errno.EINVAL
    assert "byte value out of range" in capsys.readouterr().err


@pytest.mark.parametrize("words", [
    ["np", "0"],
    ["xx"],
    ["np", "0", "two"],
    ["pfm", "ppt"],
])
def test_syntax_errors_exit_before_running(words, capsys) -> None:
    with pytest.raises(SystemExit) as e:
        cli.main(words)
    assert e.value.code == errno.EINVAL
    captured = capsys.readouterr()
    assert "bad command" in captured.err
    assert captured.out == ""


def test_caret_points_at_bad_word(capsys) -> None:
    with pytest.raises(SystemExit):
        cli.main(["np", "0", "two"])
    lines = capsys.readouterr().err.splitlines()
    assert lines[0] == "[ERROR] bad command np: argument: two"
    assert lines[1] == "[ERROR] " + " " * 4 + "np 0 two"
    assert lines[2] == "[ERROR] " + " " * 4 + " " * len("np 0 ") + "^^^"


def test_verbose_flag(capsys) -> None:
    assert cli.main(["-v", "np", "0", "1", "kp", "0"]) == 0
    out = capsys.readouterr().out
    assert "[VERBOSE] created process 0" in out
    assert "[VERBOSE] terminated process 0" in out
    assert "[DEBUG]" not in out


def test_debug_flag(capsys) -> None:
    assert cli.main(["-vv", "np", "0", "1"]) == 0
    assert "[DEBUG] allocated page 0x01" in capsys.readouterr().out


def test_leading_zero_operands_are_decimal(capsys) -> None:
    assert cli.main("np 0 2 sb 0 0261 07 lb 0 010".split()) == 0
    assert capsys.readouterr().out == (
        "Store proc 0: 261 => 773, value=7\n"
        "Load proc 0: 10 => 522, value=0\n"
    )
