"""Load ``KEY=VALUE`` environment files into a :class:`ConfigStore`.

Typical start-up usage::

    from envloader import EnvLoader, LoaderConfig

    loader = EnvLoader(LoaderConfig(path=".env", override_from_process_env=True))
    loader.load()
    database_url = loader.get("DATABASE_URL")

Loading is meant to happen once, before any worker threads start.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import EnvFileOpenError, EnvFileScanError
from .formatting import print_listing
from .parser import iter_entries
from .paths import resolve_env_path
from .settings import DEFAULT_ENV_FILE, ENV_FILE_ENCODING
from .store import DEFAULT_STORE, ConfigStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoaderConfig:
    """How a file is located, merged and reported.

    Attributes
    ----------
    path:
        File to read. An empty value means :data:`DEFAULT_ENV_FILE`.
    override_from_process_env:
        When ``True`` a non-empty process environment variable wins over the
        file value for the same key.
    hide_output:
        Suppress the listing printed after a successful load.
    """

    path: Path | str = DEFAULT_ENV_FILE
    override_from_process_env: bool = False
    hide_output: bool = False

    @property
    def env_path(self) -> Path:
        return Path(self.path or DEFAULT_ENV_FILE)


class EnvLoader:
    """Read an environment file into a store and answer lookups from it."""

    def __init__(
        self,
        config: LoaderConfig | None = None,
        store: ConfigStore | None = None,
        base_dir: Path | str | None = None,
    ) -> None:
        self.config = config or LoaderConfig()
        self.store = store if store is not None else DEFAULT_STORE
        self.base_dir = base_dir
        self.resolved_path: Path | None = None

    # ------------------------------------------------------------------
    def load(self) -> Path:
        """Parse the configured file into :attr:`store` and return its path.

        Raises
        ------
        EnvFileNotFoundError
            Neither the direct nor the executable-relative path exists.
        EnvFileOpenError
            The file exists but could not be opened.
        EnvFileScanError
            Reading failed part way; lines read before the failure are kept.
        """

        path = resolve_env_path(self.config.env_path, self.base_dir)
        logger.debug("Loading environment from %s", path)

        try:
            handle = open(path, "r", encoding=ENV_FILE_ENCODING, newline="\n")
        except OSError as exc:
            raise EnvFileOpenError(path, exc) from exc

        count = 0
        with handle:
            try:
                for entry in iter_entries(handle):
                    self.store.set(entry.key, self._merge(entry.key, entry.value))
                    count += 1
            except (OSError, UnicodeDecodeError) as exc:
                raise EnvFileScanError(path, exc) from exc

        self.resolved_path = path
        logger.debug("Loaded %d entries from %s", count, path)

        if not self.config.hide_output:
            print_listing(self.store.as_dict())
        return path

    def _merge(self, key: str, file_value: str) -> str:
        if self.config.override_from_process_env:
            live = os.environ.get(key)
            if live:
                return live
        return file_value

    # ------------------------------------------------------------------
    def get(self, key: str) -> str:
        """Return ``key`` from the store, falling back to the environment."""

        return self.store.get(key)


def load_env(
    path: Path | str = DEFAULT_ENV_FILE,
    *,
    override: bool = False,
    hide_output: bool = False,
    store: ConfigStore | None = None,
) -> Path:
    """Load ``path`` into ``store`` (the shared store by default) in one call."""

    config = LoaderConfig(
        path=path,
        override_from_process_env=override,
        hide_output=hide_output,
    )
    return EnvLoader(config, store=store).load()


__all__ = ["EnvLoader", "LoaderConfig", "load_env"]
