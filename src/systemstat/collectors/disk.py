"""Disk partition collector."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import retrieving
from ..provider import MetricsProvider
from .base import BaseCollector

log = logging.getLogger(__name__)


class DiskCollector(BaseCollector):
    """Report device and mountpoint of every real partition."""

    def __init__(
        self, provider: MetricsProvider, excluded_fstypes: Iterable[str] = ("autofs",)
    ) -> None:
        super().__init__(provider)
        self.excluded_fstypes = frozenset(excluded_fstypes)

    @property
    def name(self) -> str:
        return "disk"

    @property
    def label(self) -> str:
        return "Disk:"

    def collect(self) -> str:
        # Pseudo filesystems are requested too, then filtered here
        with retrieving("disk stat"):
            partitions = self.provider.disk_partitions(include_pseudo=True)

        if not partitions:
            return "no disk was found"

        blocks = [
            f"Device: {part.device}\nMountpoint: {part.mountpoint}\n"
            for part in partitions
            if part.fstype not in self.excluded_fstypes
        ]
        if not blocks:
            log.info("all partitions filtered out", extra={"domain": self.name})
        return "\n".join(blocks)
