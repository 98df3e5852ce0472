"""In-memory key/value store populated by the loader."""

from __future__ import annotations

import os
from typing import Iterator, Mapping


class ConfigStore:
    """Mapping of configuration keys to string values.

    Lookups that miss fall back to the live process environment. The store
    has no locking; load it once during start-up before sharing it.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = {}
        for key, value in (values or {}).items():
            self.set(key, value)

    # ------------------------------------------------------------------
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

        self._values[key] = value

    # ------------------------------------------------------------------
    def get(self, key: str) -> str:
        """Return the stored value, else the environment value, else ``""``."""

        if key in self._values:
            return self._values[key]
        return os.environ.get(key, "")

    def clear(self) -> None:
        self._values.clear()

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._values.items())

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigStore({len(self._values)} keys)"


# Shared by loaders that are not given a store of their own
DEFAULT_STORE = ConfigStore()


def get(key: str) -> str:
    """Look up ``key`` in :data:`DEFAULT_STORE`."""

    return DEFAULT_STORE.get(key)


__all__ = ["ConfigStore", "DEFAULT_STORE", "get"]
