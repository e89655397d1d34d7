"""Init process collector."""

from __future__ import annotations

import logging

from ..errors import retrieving
from .base import BaseCollector

log = logging.getLogger(__name__)

INIT_PID = 1


class ProcessCollector(BaseCollector):
    """Report name, memory, CPU times and child count of the init process."""

    @property
    def name(self) -> str:
        return "proc"

    @property
    def label(self) -> str:
        return "Proc:"

    def collect(self) -> str:
        with retrieving("pid stat"):
            pids = self.provider.process_ids()

        if not pids:
            return "no pid was found"

        if INIT_PID not in pids:
            log.info("init process not visible", extra={"domain": self.name, "pid": INIT_PID})
            return ""

        return self._describe(INIT_PID)

    def _describe(self, pid: int) -> str:
        with retrieving(f"proc stat pid:{pid}"):
            proc = self.provider.process(pid)
        with retrieving("proc stat name"):
            name = proc.name()
        with retrieving("proc stat mem info"):
            mem = proc.memory_info()
        with retrieving("proc stat times"):
            times = proc.times()
        with retrieving("proc stat children"):
            children = proc.children()

        return (
            f"Init(pid={pid}):\n"
            f" Name: {name}\n"
            f" ResidentSetSize: {mem.rss}\n"
            f" VirtualMemorySize: {mem.vms}\n"
            f" SwapSize: {mem.swap}\n"
            f" UserTime: {times.user}\n"
            f" SystemTime: {times.system}\n"
            f" Children: {len(children)}\n"
        )
