"""CPU info collector."""

from __future__ import annotations

from ..errors import retrieving
from .base import BaseCollector


class CPUCollector(BaseCollector):
    """Report model name and core count per CPU."""

    @property
    def name(self) -> str:
        return "cpu"

    @property
    def label(self) -> str:
        return "CPU:"

    def collect(self) -> str:
        with retrieving("cpu stat"):
            cpus = self.provider.cpu_info()

        if not cpus:
            return "no cpu was found"

        return "\n".join(f"ModelName: {cpu.model_name}\nCores: {cpu.cores}\n" for cpu in cpus)
