"""Exception hierarchy shared across the wrapper."""
from __future__ import annotations

from typing import Sequence


class DrafterError(Exception):
    """Base class for all wrapper failures.

    ``diagnostic`` carries the raw text describing the failure, either as
    produced by the external tool or synthesized by the wrapper.
    """

    def __init__(self, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.diagnostic = diagnostic


class LaunchFailure(DrafterError):
    """The executable could not be found or spawned."""

    def __init__(self, executable: str, diagnostic: str) -> None:
        super().__init__(diagnostic)
        self.executable = executable


class InputMissing(DrafterError):
    def __init__(self, diagnostic: str = "Input argument missing") -> None:
        super().__init__(diagnostic)


class ExternalToolFailure(DrafterError):
    """The process was launched but exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int, stderr: str) -> None:
        message = stderr.strip() or f"drafter exited with rc={returncode}"
        super().__init__(message)
        self.argv = tuple(argv)
        self.returncode = returncode
        self.stderr = stderr


class InvalidOptionError(DrafterError):
    pass


class OutputDecodeError(DrafterError):
    pass


class ConfigError(DrafterError):
    pass


class ConfigFileNotFound(ConfigError):
    pass


class ConfigValidationError(ConfigError):
    pass
