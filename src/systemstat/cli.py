"""CLI interface for systemstat."""

from __future__ import annotations

import sys

from . import __version__
from .config import Settings, settings as default_settings
from .logging import configure_logging
from .options import build_parser, resolve
from .provider import MetricsProvider, PsutilProvider
from .report import write_report
from .style import bold, use_color

VERSION = f"v{__version__}"


def cmd_version(color: bool) -> int:
    """Show version."""
    sys.stdout.write(f"\n{bold('Version:', color)} {VERSION}\n")
    return 0


def main(
    argv: list[str] | None = None,
    *,
    provider: MetricsProvider | None = None,
    config: Settings | None = None,
) -> None:
    """Main entry point."""
    config = config or default_settings
    configure_logging(level=config.log_level)
    parser = build_parser()
    options = resolve(parser.parse_args(argv))
    color = use_color(sys.stdout, config.color)

    if options.version:
        raise SystemExit(cmd_version(color))

    if not options.any_enabled:
        parser.print_help()
        raise SystemExit(0)

    rc = write_report(
        options,
        provider or PsutilProvider(),
        sys.stdout,
        sys.stderr,
        color=color,
        config=config,
    )
    raise SystemExit(rc)
