"""Memory metrics collector."""

from __future__ import annotations

from ..errors import retrieving
from .base import BaseCollector


class MemoryCollector(BaseCollector):
    """Report virtual memory totals."""

    @property
    def name(self) -> str:
        return "mem"

    @property
    def label(self) -> str:
        return "Mem:"

    def collect(self) -> str:
        with retrieving("mem stat"):
            vm = self.provider.virtual_memory()

        return f"Total: {vm.total}\nFree: {vm.free}\nUsedPercent: {vm.used_percent:f}%\n"
