from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass(eq=False)
class ProviderError(Exception):
    """A failure reported by the metrics provider.

    ``subject`` names what was being retrieved when the failure happened
    (e.g. ``cpu stat``); it is filled in by :func:`retrieving`.
    """

    cause: str
    subject: str = "system stat"

    def __str__(self) -> str:
        return f"There was an error retrieving {self.subject}: {self.cause}"


@contextmanager
def retrieving(subject: str) -> Iterator[None]:
    """Re-raise provider failures inside the block tagged with *subject*."""
    try:
        yield
    except ProviderError as err:
        raise ProviderError(err.cause, subject) from err
