"""Network metrics collector."""

from __future__ import annotations

import logging

from ..errors import retrieving
from .base import BaseCollector

log = logging.getLogger(__name__)


class NetworkCollector(BaseCollector):
    """Report packet counters for interfaces with traffic both ways."""

    @property
    def name(self) -> str:
        return "net"

    @property
    def label(self) -> str:
        return "Net:"

    def collect(self) -> str:
        with retrieving("net stat"):
            interfaces = self.provider.net_io_counters(per_interface=True)

        if not interfaces:
            return "no net was found"

        blocks = [
            f"Interface: {iface.name}\n"
            f"PacketsSent: {iface.packets_sent}\n"
            f"PacketsRecv: {iface.packets_recv}\n"
            for iface in interfaces
            if iface.packets_sent > 0 and iface.packets_recv > 0
        ]
        if not blocks:
            log.info("all interfaces filtered out", extra={"domain": self.name})
        return "\n".join(blocks)
