"""Metrics provider interface and its psutil-backed implementation.

Collectors never talk to psutil directly; they go through a
:class:`MetricsProvider` so the reporting logic can run against any source
of readings (tests use an in-memory one).
"""

from __future__ import annotations

import logging
import platform
import socket
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import psutil

from .errors import ProviderError

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CPUInfo:
    model_name: str
    cores: int


@dataclass(frozen=True, slots=True)
class DiskPartition:
    device: str
    mountpoint: str
    fstype: str


@dataclass(frozen=True, slots=True)
class MemoryStat:
    total: int
    free: int
    used_percent: float


@dataclass(frozen=True, slots=True)
class NetworkInterfaceCounters:
    name: str
    packets_sent: int
    packets_recv: int


@dataclass(frozen=True, slots=True)
class ProcessMemory:
    rss: int
    vms: int
    swap: int


@dataclass(frozen=True, slots=True)
class ProcessTimes:
    user: float
    system: float


@dataclass(frozen=True, slots=True)
class HostInfo:
    os: str
    hostname: str
    uptime: int
    boot_time: int


class ProcessHandle(ABC):
    """A single process as seen by the provider."""

    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def memory_info(self) -> ProcessMemory: ...

    @abstractmethod
    def times(self) -> ProcessTimes: ...

    @abstractmethod
    def children(self) -> list[int]:
        """Return the pids of direct children."""
        ...


class MetricsProvider(ABC):
    """Source of raw OS readings. Every method raises ProviderError on failure."""

    @abstractmethod
    def cpu_info(self) -> list[CPUInfo]: ...

    @abstractmethod
    def disk_partitions(self, include_pseudo: bool) -> list[DiskPartition]: ...

    @abstractmethod
    def virtual_memory(self) -> MemoryStat: ...

    @abstractmethod
    def net_io_counters(self, per_interface: bool) -> list[NetworkInterfaceCounters]: ...

    @abstractmethod
    def process_ids(self) -> list[int]: ...

    @abstractmethod
    def process(self, pid: int) -> ProcessHandle: ...

    @abstractmethod
    def host_info(self) -> HostInfo: ...


@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except (psutil.Error, OSError) as exc:
        raise ProviderError(str(exc) or type(exc).__name__) from exc


# ── /proc/cpuinfo ────────────────────────────────────────────────────


@dataclass
class _Package:
    model: str = ""
    cores: int | None = None
    threads: int = 0


def _read_cpuinfo(path: Path = Path("/proc/cpuinfo")) -> list[CPUInfo]:
    """Group /proc/cpuinfo processor blocks by physical package.

    Returns an empty list when the file is missing or has no processor
    entries.
    """
    try:
        text = path.read_text()
    except OSError:
        return []

    packages: dict[str, _Package] = {}
    for block in text.split("\n\n"):
        fields: dict[str, str] = {}
        for line in block.splitlines():
            key, sep, value = line.partition(":")
            if sep:
                fields[key.strip().lower()] = value.strip()
        if "processor" not in fields:
            continue

        package = packages.setdefault(fields.get("physical id", "0"), _Package())
        package.threads += 1
        if not package.model:
            package.model = fields.get("model name", "")
        if package.cores is None and fields.get("cpu cores", "").isdigit():
            package.cores = int(fields["cpu cores"])

    return [
        CPUInfo(
            model_name=p.model or platform.processor() or platform.machine(),
            cores=p.cores if p.cores is not None else p.threads,
        )
        for p in packages.values()
    ]


class PsutilProcess(ProcessHandle):
    def __init__(self, proc: psutil.Process) -> None:
        self._proc = proc

    def name(self) -> str:
        with _translate_errors():
            return self._proc.name()

    def memory_info(self) -> ProcessMemory:
        with _translate_errors():
            mem = self._proc.memory_info()

        # Swap is only exposed by memory_full_info, which may need privileges
        swap = 0
        try:
            swap = getattr(self._proc.memory_full_info(), "swap", 0)
        except (psutil.AccessDenied, psutil.ZombieProcess):
            log.debug("swap size unavailable", extra={"pid": self._proc.pid})
        except (psutil.Error, OSError) as exc:
            raise ProviderError(str(exc) or type(exc).__name__) from exc

        return ProcessMemory(rss=mem.rss, vms=mem.vms, swap=swap)

    def times(self) -> ProcessTimes:
        with _translate_errors():
            t = self._proc.cpu_times()
        return ProcessTimes(user=t.user, system=t.system)

    def children(self) -> list[int]:
        with _translate_errors():
            return [child.pid for child in self._proc.children(recursive=False)]


class PsutilProvider(MetricsProvider):
    """Read metrics from the local machine through psutil."""

    def cpu_info(self) -> list[CPUInfo]:
        cpus = _read_cpuinfo()
        if cpus:
            return cpus

        with _translate_errors():
            cores = psutil.cpu_count(logical=False) or psutil.cpu_count(logical=True)
        if not cores:
            return []
        return [CPUInfo(model_name=platform.processor() or platform.machine(), cores=cores)]

    def disk_partitions(self, include_pseudo: bool) -> list[DiskPartition]:
        with _translate_errors():
            parts = psutil.disk_partitions(all=include_pseudo)
        return [
            DiskPartition(device=p.device, mountpoint=p.mountpoint, fstype=p.fstype)
            for p in parts
        ]

    def virtual_memory(self) -> MemoryStat:
        with _translate_errors():
            vm = psutil.virtual_memory()
        return MemoryStat(total=vm.total, free=vm.free, used_percent=float(vm.percent))

    def net_io_counters(self, per_interface: bool) -> list[NetworkInterfaceCounters]:
        with _translate_errors():
            if per_interface:
                counters = psutil.net_io_counters(pernic=True)
                return [
                    NetworkInterfaceCounters(
                        name=name, packets_sent=c.packets_sent, packets_recv=c.packets_recv
                    )
                    for name, c in counters.items()
                ]
            total = psutil.net_io_counters(pernic=False)
        if total is None:
            return []
        return [
            NetworkInterfaceCounters(
                name="all", packets_sent=total.packets_sent, packets_recv=total.packets_recv
            )
        ]

    def process_ids(self) -> list[int]:
        with _translate_errors():
            return psutil.pids()

    def process(self, pid: int) -> ProcessHandle:
        with _translate_errors():
            return PsutilProcess(psutil.Process(pid))

    def host_info(self) -> HostInfo:
        with _translate_errors():
            boot_time = int(psutil.boot_time())
        return HostInfo(
            os=platform.system().lower(),
            hostname=socket.gethostname(),
            uptime=max(int(time.time()) - boot_time, 0),
            boot_time=boot_time,
        )
