#!/usr/bin/env python3
"""Repo-standard test runner.

Installs the package with its ``dev`` extra, then runs pytest. Arguments after
the script name are passed to pytest; ``--no-install`` skips the pip step.
"""

from __future__ import annotations

import subprocess
import sys


def run(command: list[str]) -> None:
    print(f"+ {' '.join(command)}", flush=True)
    subprocess.run(command, check=True)


def main(argv: list[str]) -> int:
    install = "--no-install" not in argv
    pytest_args = [arg for arg in argv if arg != "--no-install"] or ["-q"]
    print(f"Python interpreter: {sys.executable}", flush=True)
    try:
        if install:
            run([sys.executable, "-m", "pip", "install", "-e", ".[dev]"])
        run([sys.executable, "-m", "pytest", *pytest_args])
    except subprocess.CalledProcessError as exc:
        return exc.returncode or 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
