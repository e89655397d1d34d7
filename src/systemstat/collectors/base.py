"""Base collector interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..provider import MetricsProvider


class BaseCollector(ABC):
    """Abstract base class for all domain collectors.

    A collector asks its provider for one domain's readings and renders them
    as a plain text block.
    """

    def __init__(self, provider: MetricsProvider) -> None:
        self.provider = provider

    @property
    @abstractmethod
    def name(self) -> str:
        """Domain name, matching the option that enables it."""
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Section heading printed above the report."""
        ...

    @abstractmethod
    def collect(self) -> str:
        """Query the provider and return the formatted report."""
        ...
