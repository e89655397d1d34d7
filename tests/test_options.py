"""Tests for option resolution."""

from __future__ import annotations

import pytest

from systemstat.options import Options, build_parser, resolve


def _resolve(*argv: str) -> Options:
    return resolve(build_parser().parse_args(list(argv)))


def test_no_flags_enables_nothing() -> None:
    options = _resolve()
    assert options == Options()
    assert not options.any_enabled


def test_all_equals_every_domain_flag() -> None:
    assert _resolve("--all") == _resolve("-c", "-d", "-m", "-n", "-p")
    assert _resolve("-a") == Options(cpu=True, disk=True, mem=True, net=True, proc=True)


def test_all_excludes_host() -> None:
    assert not _resolve("--all").host
    assert _resolve("-a", "-H").host


@pytest.mark.parametrize(
    ("flag", "field"),
    [
        ("--cpu", "cpu"),
        ("-c", "cpu"),
        ("--disk", "disk"),
        ("-d", "disk"),
        ("--mem", "mem"),
        ("-m", "mem"),
        ("--net", "net"),
        ("-n", "net"),
        ("--proc", "proc"),
        ("-p", "proc"),
        ("--host", "host"),
        ("-H", "host"),
        ("--version", "version"),
        ("-v", "version"),
    ],
)
def test_single_flag(flag: str, field: str) -> None:
    options = _resolve(flag)
    assert getattr(options, field) is True


def test_unknown_flag_exits_2(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _resolve("--bogus")
    assert exc_info.value.code == 2
    assert "usage:" in capsys.readouterr().err


def test_abbreviations_rejected() -> None:
    with pytest.raises(SystemExit):
        _resolve("--pro")


def test_options_are_immutable() -> None:
    options = _resolve("-c")
    with pytest.raises(AttributeError):
        options.cpu = False  # type: ignore[misc]
