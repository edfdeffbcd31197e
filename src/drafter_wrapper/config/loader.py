"""Load and validate wrapper configuration files."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from jsonschema import Draft7Validator  # type: ignore

from ..domain.models import OutputFormat
from ..utils.constants import CONFIG_SCHEMA_PATH
from ..utils.errors import ConfigFileNotFound, ConfigValidationError
from ..utils.logging import get_logger

LOG = get_logger()


@dataclass(frozen=True)
class DrafterConfig:
    """Defaults applied to a freshly constructed :class:`~drafter_wrapper.drafter.Drafter`."""

    binary: Optional[str] = None
    format: Optional[OutputFormat] = None
    use_line_num: bool = False


def load_json_file(json_path: Path) -> Dict:
    if not json_path.exists():
        raise ConfigFileNotFound(f"config not found: {json_path}")
    with json_path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"config is not valid JSON: {json_path}: {exc}") from exc
    LOG.info("loaded config: %s", json_path)
    return data


def load_schema_file(schema_path: Path = CONFIG_SCHEMA_PATH) -> Dict:
    with schema_path.open("r", encoding="utf-8") as f:
        return json.load(f)


def _format_json_path(path_iterable) -> str:
    parts: List[str] = ["root"]
    for p in path_iterable:
        if isinstance(p, int):
            parts[-1] = parts[-1] + f"[{p}]"
        else:
            parts.append(str(p))
    return ".".join(parts)


def validate_config(config_json: Dict, schema_json: Optional[Dict] = None) -> None:
    validator = Draft7Validator(schema_json if schema_json is not None else load_schema_file())
    errors = sorted(validator.iter_errors(config_json), key=lambda e: (list(e.path), list(e.schema_path)))
    if not errors:
        return
    LOG.error("config validation: FAILED (count=%d)", len(errors))
    for i, err in enumerate(errors, start=1):
        LOG.error(
            "#%d path=%s | msg=%s | validator=%s",
            i,
            _format_json_path(err.path),
            err.message,
            err.validator,
        )
    raise ConfigValidationError(
        f"config validation failed with {len(errors)} error(s): {errors[0].message}"
    )


def parse_config(config_json: Dict) -> DrafterConfig:
    validate_config(config_json)
    raw_format = config_json.get("format")
    return DrafterConfig(
        binary=config_json.get("binary"),
        format=OutputFormat.from_string(raw_format) if raw_format is not None else None,
        use_line_num=bool(config_json.get("use_line_num", False)),
    )


def load_config(path: Path) -> DrafterConfig:
    return parse_config(load_json_file(Path(path)))


__all__ = ["DrafterConfig", "load_config", "parse_config", "validate_config"]
