"""Report orchestration: run enabled collectors in a fixed order."""

from __future__ import annotations

import logging
from typing import TextIO

from .collectors import (
    BaseCollector,
    CPUCollector,
    DiskCollector,
    HostCollector,
    MemoryCollector,
    NetworkCollector,
    ProcessCollector,
)
from .config import Settings, settings as default_settings
from .errors import ProviderError
from .options import Options
from .provider import MetricsProvider
from .style import bold

log = logging.getLogger(__name__)


def enabled_collectors(
    options: Options,
    provider: MetricsProvider,
    config: Settings = default_settings,
) -> list[BaseCollector]:
    """Collectors for the enabled domains, always in report order."""
    collectors: list[BaseCollector] = [
        CPUCollector(provider),
        DiskCollector(provider, excluded_fstypes=config.excluded_fstypes),
        MemoryCollector(provider),
        NetworkCollector(provider),
        ProcessCollector(provider),
        HostCollector(provider),
    ]
    return [c for c in collectors if getattr(options, c.name)]


def write_report(
    options: Options,
    provider: MetricsProvider,
    out: TextIO,
    err: TextIO,
    *,
    color: bool = False,
    config: Settings = default_settings,
) -> int:
    """Write labeled sections to *out* and return the exit code.

    The first ProviderError aborts the report unless ``config.keep_going``
    is set, in which case the failing domain is reported on *err* and the
    remaining domains still run.
    """
    failures = 0
    out.write("\n")

    for collector in enabled_collectors(options, provider, config):
        log.debug("collecting", extra={"domain": collector.name})
        try:
            text = collector.collect()
        except ProviderError as e:
            log.debug("collector failed", extra={"domain": collector.name, "subject": e.subject})
            out.flush()
            err.write(f"{e}\n")
            err.flush()
            if not config.keep_going:
                return 1
            failures += 1
            continue

        out.write(f"\n{bold(collector.label, color)}\n{text}\n")

    out.write("\n")
    out.flush()
    return 1 if failures else 0
