"""Shared fixtures and import path setup."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]

root_path = str(ROOT)
if root_path not in sys.path:
    sys.path.insert(0, root_path)

from envloader.store import ConfigStore  # noqa: E402  (path adjusted above)


@pytest.fixture
def store() -> ConfigStore:
    """A fresh store so tests never share loaded keys."""

    return ConfigStore()


@pytest.fixture
def write_env(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing ``text`` to a file under ``tmp_path``."""

    def _write(text: str, name: str = ".env") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
