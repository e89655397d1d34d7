from __future__ import annotations

import os
from dataclasses import dataclass, field

COLOR_MODES = ("auto", "always", "never")


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw not in {"0", "false", "False"}


def _get_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _get_color_mode() -> str:
    if os.getenv("NO_COLOR"):
        return "never"
    mode = _get_str("SYSTEMSTAT_COLOR", "auto").lower()
    return mode if mode in COLOR_MODES else "auto"


@dataclass(frozen=True, slots=True)
class Settings:
    color: str = field(default_factory=_get_color_mode)
    log_level: str = field(default_factory=lambda: _get_str("LOG_LEVEL", "WARNING"))

    # Report a failing domain and carry on instead of aborting the run
    keep_going: bool = field(default_factory=lambda: _get_bool("SYSTEMSTAT_KEEP_GOING", False))

    # Pseudo filesystems hidden from the disk report
    excluded_fstypes: tuple[str, ...] = field(
        default_factory=lambda: _get_list("SYSTEMSTAT_EXCLUDE_FSTYPES", ("autofs",))
    )


settings = Settings()
