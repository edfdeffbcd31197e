"""Fluent command builder and runner for the drafter API Blueprint parser."""
from __future__ import annotations

from .builder.invocation import InvocationBuilder
from .config.loader import DrafterConfig, load_config
from .domain.models import DrafterOption, InvocationState, OutputFormat, ProcessDescriptor
from .drafter import Drafter
from .executor.process import execute
from .utils.decode import decode_output, parse_version
from .utils.errors import (
    ConfigError,
    ConfigFileNotFound,
    ConfigValidationError,
    DrafterError,
    ExternalToolFailure,
    InputMissing,
    InvalidOptionError,
    LaunchFailure,
    OutputDecodeError,
)

__all__ = [
    "ConfigError",
    "ConfigFileNotFound",
    "ConfigValidationError",
    "Drafter",
    "DrafterConfig",
    "DrafterError",
    "DrafterOption",
    "ExternalToolFailure",
    "InputMissing",
    "InvalidOptionError",
    "InvocationBuilder",
    "InvocationState",
    "LaunchFailure",
    "OutputDecodeError",
    "OutputFormat",
    "ProcessDescriptor",
    "decode_output",
    "execute",
    "load_config",
    "parse_version",
]
