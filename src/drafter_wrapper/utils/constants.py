"""Shared constants for the drafter wrapper."""
from __future__ import annotations

from pathlib import Path

DEFAULT_BINARY_PATH = "drafter"
BINARY_ENV_VAR = "DRAFTER_BIN"
STDIN_INPUT = "-"

CONFIG_SCHEMA_PATH = Path(__file__).resolve().parents[1] / "data" / "config.schema.json"

VERSION_PATTERN = r"v(\d+)\.(\d+)\.(\d+)"
