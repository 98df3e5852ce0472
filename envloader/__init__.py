"""Load ``KEY=VALUE`` environment files with process-environment fallback."""

from .errors import EnvFileNotFoundError, EnvFileOpenError, EnvFileScanError, LoadError
from .loader import EnvLoader, LoaderConfig, load_env
from .store import DEFAULT_STORE, ConfigStore, get

__all__ = [
    "ConfigStore",
    "DEFAULT_STORE",
    "EnvFileNotFoundError",
    "EnvFileOpenError",
    "EnvFileScanError",
    "EnvLoader",
    "LoadError",
    "LoaderConfig",
    "get",
    "load_env",
]
