"""Split ``KEY=VALUE`` lines.

There is no quoting, escaping or interpolation: everything after
the first ``=`` is the value, trimmed of surrounding whitespace.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from .settings import COMMENT_PREFIX, KEY_VALUE_SEPARATOR

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """A parsed assignment and the line it came from."""

    key: str
    value: str
    lineno: int


def is_ignored(line: str) -> bool:
    """Return ``True`` for empty, whitespace-only and ``#`` comment lines."""

    return not line or line[0] == COMMENT_PREFIX or not line.strip()


def parse_line(line: str, lineno: int = 0) -> Entry | None:
    """Parse a single line without its newline.

    Ignored lines return ``None``. Lines without ``=`` or with an empty key
    are malformed: they are skipped with a warning.
    """

    if is_ignored(line):
        return None
    key, sep, value = line.partition(KEY_VALUE_SEPARATOR)
    key = key.strip()
    if not sep or not key:
        logger.warning("Skipping malformed line %d: no KEY=VALUE assignment", lineno)
        return None
    return Entry(key=key, value=value.strip(), lineno=lineno)


def iter_entries(lines: Iterable[str]) -> Iterator[Entry]:
    """Yield an :class:`Entry` for every assignment in ``lines``.

    Trailing ``\\n`` or ``\\r\\n`` is removed from each line first. Errors
    raised by ``lines`` itself propagate to the caller.
    """

    for lineno, raw in enumerate(lines, start=1):
        entry = parse_line(raw.rstrip("\r\n"), lineno)
        if entry is not None:
            yield entry


__all__ = ["Entry", "is_ignored", "iter_entries", "parse_line"]
