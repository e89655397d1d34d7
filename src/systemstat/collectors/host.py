"""Host info collector."""

from __future__ import annotations

from ..errors import retrieving
from .base import BaseCollector


class HostCollector(BaseCollector):
    """Report OS, hostname, uptime and boot time."""

    @property
    def name(self) -> str:
        return "host"

    @property
    def label(self) -> str:
        return "Host:"

    def collect(self) -> str:
        with retrieving("host stat"):
            host = self.provider.host_info()

        return (
            f"OS: {host.os}\n"
            f"Hostname: {host.hostname}\n"
            f"Uptime: {host.uptime}\n"
            f"BootTime: {host.boot_time}\n"
        )
