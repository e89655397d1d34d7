"""Domain collectors."""

from __future__ import annotations

from .base import BaseCollector
from .cpu import CPUCollector
from .disk import DiskCollector
from .host import HostCollector
from .memory import MemoryCollector
from .network import NetworkCollector
from .process import ProcessCollector

__all__ = [
    "BaseCollector",
    "CPUCollector",
    "DiskCollector",
    "HostCollector",
    "MemoryCollector",
    "NetworkCollector",
    "ProcessCollector",
]
