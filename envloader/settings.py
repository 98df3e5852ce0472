"""Defaults shared by the loader and its diagnostic output."""

from __future__ import annotations

import os

# File looked up when a loader is configured without a path
DEFAULT_ENV_FILE = os.environ.get("ENVLOADER_DEFAULT_FILE", ".env")
ENV_FILE_ENCODING = "utf-8"

COMMENT_PREFIX = "#"
KEY_VALUE_SEPARATOR = "="

# Startup dump
BANNER = "ENV LOADED"
SEPARATOR = "----------"
ENTRY_DELIMITER = "  :  "
