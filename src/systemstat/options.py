"""Command-line option resolution."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

DOMAINS = ("cpu", "disk", "mem", "net", "proc")


@dataclass(frozen=True, slots=True)
class Options:
    """Which report sections are enabled. Fixed once parsing is done."""

    cpu: bool = False
    disk: bool = False
    mem: bool = False
    net: bool = False
    proc: bool = False
    host: bool = False
    version: bool = False

    @property
    def any_enabled(self) -> bool:
        return any((self.cpu, self.disk, self.mem, self.net, self.proc, self.host))


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="systemstat",
        description="Display system information.",
        epilog="example: systemstat -a    # list all system info",
        allow_abbrev=False,
    )

    parser.add_argument(
        "--all",
        "-a",
        action="store_true",
        help="Same as -c, -d, -m, -n, -p",
    )
    parser.add_argument("--cpu", "-c", action="store_true", help="CPU stats")
    parser.add_argument("--disk", "-d", action="store_true", help="Disk stats")
    parser.add_argument("--mem", "-m", action="store_true", help="Memory stats")
    parser.add_argument("--net", "-n", action="store_true", help="Network stats")
    parser.add_argument("--proc", "-p", action="store_true", help="Process stats")
    parser.add_argument(
        "--host",
        "-H",
        action="store_true",
        help="Host stats (not included in --all)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Print version",
    )

    return parser


def resolve(args: argparse.Namespace) -> Options:
    """Turn parsed flags into Options, expanding --all to every domain."""
    return Options(
        **{domain: bool(args.all or getattr(args, domain)) for domain in DOMAINS},
        host=bool(args.host),
        version=bool(args.version),
    )
