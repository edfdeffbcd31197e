"""Domain models describing a drafter invocation."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from ..utils.constants import DEFAULT_BINARY_PATH


class DrafterOption(str, Enum):
    """Command-line options understood by the drafter binary."""

    OUTPUT = "--output"
    VERSION = "--version"
    VALIDATE = "--validate"
    FORMAT = "--format"
    SOURCEMAP = "--sourcemap"
    USE_LINE_NUM = "--use-line-num"

    @property
    def takes_value(self) -> bool:
        return self in (DrafterOption.OUTPUT, DrafterOption.FORMAT, DrafterOption.SOURCEMAP)

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(option.value for option in cls)


class OutputFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_string(cls, value: str) -> "OutputFormat":
        normalized = value.strip().lower()
        for fmt in cls:
            if fmt.value == normalized:
                return fmt
        raise ValueError(f"unsupported output format: {value}")


@dataclass(slots=True)
class InvocationState:
    """Mutable state accumulated by a single builder instance."""

    executable_path: str = DEFAULT_BINARY_PATH
    input_argument: Optional[str] = None
    # insertion ordered; "" marks a flag without value
    options: Dict[str, str] = field(default_factory=dict)

    def copy(self) -> "InvocationState":
        return InvocationState(
            executable_path=self.executable_path,
            input_argument=self.input_argument,
            options=dict(self.options),
        )


@dataclass(frozen=True)
class ProcessDescriptor:
    """A rendered command ready to be executed.

    Use :func:`dataclasses.replace` to adjust a descriptor before running it.
    """

    argv: Tuple[str, ...]
    cwd: Path
    env: Optional[Mapping[str, str]] = None
    stdin: Optional[str] = None

    @property
    def executable(self) -> str:
        return self.argv[0]

    def command_line(self) -> str:
        return " ".join(self.argv)
