"""Exceptions raised while loading an environment file."""

from __future__ import annotations

from pathlib import Path


class LoadError(Exception):
    """Base class for failures of :meth:`EnvLoader.load`."""

    def __init__(self, path: Path | str, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self.describe()}: {self.path}{detail}")

    def describe(self) -> str:
        return "failed to load"


class EnvFileNotFoundError(LoadError):
    """Raised when neither the direct nor the executable-relative path exists."""

    def describe(self) -> str:
        return "environment file not found"


class EnvFileOpenError(LoadError):
    """Raised when the file exists but cannot be opened."""

    def describe(self) -> str:
        return "could not open environment file"


class EnvFileScanError(LoadError):
    """Raised when reading lines from an opened file fails."""

    def describe(self) -> str:
        return "could not read environment file"


__all__ = [
    "EnvFileNotFoundError",
    "EnvFileOpenError",
    "EnvFileScanError",
    "LoadError",
]
