"""Run script.

Allows `python src/main.py ...` during development, next to the `zoo`
console script declared in pyproject.toml.
"""

from __future__ import annotations

import sys

# Windows terminals may default to cp1252; animal names are free-form UTF-8.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run  # noqa: E402


if __name__ == "__main__":
    run()
