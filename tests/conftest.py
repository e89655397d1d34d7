from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from systemstat.errors import ProviderError
from systemstat.provider import (
    CPUInfo,
    DiskPartition,
    HostInfo,
    MemoryStat,
    MetricsProvider,
    NetworkInterfaceCounters,
    ProcessHandle,
    ProcessMemory,
    ProcessTimes,
)


@dataclass
class FakeProcess(ProcessHandle):
    proc_name: str = "systemd"
    memory: ProcessMemory = field(default_factory=lambda: ProcessMemory(rss=4096, vms=8192, swap=0))
    cpu_times: ProcessTimes = field(default_factory=lambda: ProcessTimes(user=1.5, system=0.25))
    child_pids: list[int] = field(default_factory=lambda: [50, 200])
    fail_on: str | None = None

    def _check(self, method: str) -> None:
        if self.fail_on == method:
            raise ProviderError("permission denied")

    def name(self) -> str:
        self._check("name")
        return self.proc_name

    def memory_info(self) -> ProcessMemory:
        self._check("memory_info")
        return self.memory

    def times(self) -> ProcessTimes:
        self._check("times")
        return self.cpu_times

    def children(self) -> list[int]:
        self._check("children")
        return self.child_pids


@dataclass
class FakeProvider(MetricsProvider):
    """In-memory provider; ``fail_on`` names a method that raises ProviderError."""

    cpus: list[CPUInfo] = field(
        default_factory=lambda: [CPUInfo(model_name="Intel(R) Xeon(R) CPU", cores=4)]
    )
    partitions: list[DiskPartition] = field(
        default_factory=lambda: [DiskPartition("/dev/sda1", "/", "ext4")]
    )
    memory: MemoryStat = field(
        default_factory=lambda: MemoryStat(total=1000, free=250, used_percent=75.0)
    )
    interfaces: list[NetworkInterfaceCounters] = field(
        default_factory=lambda: [NetworkInterfaceCounters("eth0", 10, 5)]
    )
    pids: list[int] = field(default_factory=lambda: [1, 50, 200])
    init: FakeProcess = field(default_factory=FakeProcess)
    host: HostInfo = field(
        default_factory=lambda: HostInfo(os="linux", hostname="box", uptime=60, boot_time=1000)
    )
    fail_on: str | None = None
    calls: list[str] = field(default_factory=list)

    def _record(self, method: str) -> None:
        self.calls.append(method)
        if self.fail_on == method:
            raise ProviderError("permission denied")

    def cpu_info(self) -> list[CPUInfo]:
        self._record("cpu_info")
        return self.cpus

    def disk_partitions(self, include_pseudo: bool) -> list[DiskPartition]:
        self._record("disk_partitions")
        return self.partitions

    def virtual_memory(self) -> MemoryStat:
        self._record("virtual_memory")
        return self.memory

    def net_io_counters(self, per_interface: bool) -> list[NetworkInterfaceCounters]:
        self._record("net_io_counters")
        return self.interfaces

    def process_ids(self) -> list[int]:
        self._record("process_ids")
        return self.pids

    def process(self, pid: int) -> ProcessHandle:
        self._record("process")
        return self.init

    def host_info(self) -> HostInfo:
        self._record("host_info")
        return self.host


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
