#!/usr/bin/env python3
"""Build a standalone systemstat binary with PyInstaller.

Requires the ``build`` extra: ``pip install -e .[build]``.
"""

import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent
NAME = "systemstat"


def build_pyinstaller(onefile: bool = True) -> Path:
    """Bundle ``python -m systemstat`` into dist/ and return the binary path."""
    entry_point = ROOT / "src" / NAME / "__main__.py"

    cmd = [
        sys.executable,
        "-m",
        "PyInstaller",
        "--name",
        NAME,
        "--paths",
        str(ROOT / "src"),
        "--distpath",
        str(ROOT / "dist"),
        "--workpath",
        str(ROOT / "build"),
        "--specpath",
        str(ROOT / "build"),
        "--clean",
        str(entry_point),
    ]
    if onefile:
        cmd.insert(3, "--onefile")

    subprocess.run(cmd, check=True, cwd=ROOT)
    return ROOT / "dist" / NAME


if __name__ == "__main__":
    binary = build_pyinstaller(onefile="--onedir" not in sys.argv[1:])
    print(f"\nBinary built: {binary}")
