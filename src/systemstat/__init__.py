"""
systemstat

Display point-in-time system information (CPU, disk, memory, network and
the init process) in the terminal.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "1.0.0"
