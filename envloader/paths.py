"""Locate environment files next to the caller or next to the running program."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .errors import EnvFileNotFoundError


def executable_dir() -> Path:
    """Return the absolute directory of the running program.

    Frozen applications report their bundle through ``sys.executable``;
    otherwise ``sys.argv[0]`` names the script that was started. With no
    usable ``argv[0]`` (interactive sessions, ``-c``) the current directory
    is returned.
    """

    if getattr(sys, "frozen", False):
        program = sys.executable
    else:
        program = sys.argv[0] if sys.argv else ""
    if program in ("", "-c"):
        return Path(os.path.abspath(os.curdir))
    return Path(os.path.abspath(os.path.dirname(program)))


def resolve_env_path(path: Path | str, base_dir: Path | str | None = None) -> Path:
    """Return the file to read for ``path``.

    ``path`` is used as given when it exists relative to the working
    directory. Otherwise it is looked up below ``base_dir`` (the executable
    directory by default). :class:`EnvFileNotFoundError` is raised when both
    lookups fail and carries the first ``stat`` error as its cause.
    """

    direct = Path(path)
    try:
        os.stat(direct)
    except OSError as exc:
        first_error = exc
    else:
        return direct

    base = Path(base_dir) if base_dir is not None else executable_dir()
    candidate = base / direct
    try:
        os.stat(candidate)
    except OSError:
        raise EnvFileNotFoundError(direct, first_error) from first_error
    return candidate


__all__ = ["executable_dir", "resolve_env_path"]
