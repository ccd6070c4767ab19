from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the src/ packages importable for local runs without an editable install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.domain.models import Lion, Parrot, Snake  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep ZOO_* variables and a stray .env in the cwd out of the tests."""
    for key in ("ZOO_DATA_FILE", "ZOO_LOG_LEVEL", "ZOO_SEED_ON_EMPTY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def residents():
    return [
        Lion(name="Simba", age=5, is_alpha=True),
        Parrot(name="Polly", age=2, vocabulary=["Hello", "Cracker"]),
        Snake(name="Nagini", age=4, is_venomous=True),
    ]


@pytest.fixture()
def data_file(tmp_path):
    return tmp_path / "data" / "animals.json"
