"""Helpers turning raw drafter output into Python values."""
from __future__ import annotations

import json
import re
from typing import Any, Tuple, Union

import yaml

from ..domain.models import OutputFormat
from .constants import VERSION_PATTERN
from .errors import OutputDecodeError

_VERSION_RE = re.compile(VERSION_PATTERN)


def decode_output(text: str, fmt: Union[str, OutputFormat] = OutputFormat.JSON) -> Any:
    """Decode a serialized AST into plain dicts and lists."""
    try:
        output_format = fmt if isinstance(fmt, OutputFormat) else OutputFormat.from_string(fmt)
    except ValueError as exc:
        raise OutputDecodeError(str(exc)) from exc

    try:
        if output_format is OutputFormat.JSON:
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise OutputDecodeError(f"cannot decode drafter {output_format.value} output: {exc}") from exc


def parse_version(text: str) -> Tuple[int, int, int]:
    """Extract ``(major, minor, patch)`` from output such as ``v0.1.9\\n``."""
    match = _VERSION_RE.search(text)
    if match is None:
        raise OutputDecodeError(f"no version string in drafter output: {text.strip()!r}")
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch
