"""Fluent wrapper around the drafter API Blueprint parser."""
from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from .builder.invocation import InvocationBuilder
from .domain.models import DrafterOption, ProcessDescriptor
from .executor.process import execute, make_descriptor
from .utils.constants import BINARY_ENV_VAR, DEFAULT_BINARY_PATH
from .utils.errors import InputMissing
from .utils.logging import get_logger

if TYPE_CHECKING:  # pragma: no cover
    from .config.loader import DrafterConfig

LOG = get_logger()


def default_binary_path() -> str:
    return os.environ.get(BINARY_ENV_VAR) or DEFAULT_BINARY_PATH


class Drafter(InvocationBuilder):
    """Builder plus executor for one logical drafter command.

    State survives :meth:`run`, so the same command can be executed again
    without reconfiguring it::

        drafter = Drafter().set_input("api.apib").format("json")
        first = drafter.run()
        again = drafter.run()
    """

    def __init__(self, binary: Optional[str] = None) -> None:
        super().__init__(binary or default_binary_path())

    @classmethod
    def from_config(cls, config: "DrafterConfig") -> "Drafter":
        drafter = cls(config.binary)
        if config.format is not None:
            drafter.format(config.format.value)
        if config.use_line_num:
            drafter.use_line_num()
        return drafter

    # short aliases
    def set_binary(self, path: str) -> "Drafter":
        return self.set_executable_path(path)

    def get_binary(self) -> str:
        return self.get_executable_path()

    def input(self, path: str) -> "Drafter":
        return self.set_input(path)

    def requires_input(self) -> bool:
        """``--version`` is the only option that makes the input optional."""
        return not self.has_option(DrafterOption.VERSION)

    def build(self, *, stdin: Optional[str] = None, cwd: Optional[Path] = None) -> ProcessDescriptor:
        """Render the current state into a process descriptor without running it."""
        return make_descriptor(self.render(), cwd=cwd, stdin=stdin)

    def run(self, process: Optional[ProcessDescriptor] = None) -> str:
        """Execute ``process`` (or the current state) and return raw stdout."""
        if process is None:
            if self.get_input() is None and self.requires_input():
                LOG.error("drafter run aborted: no input argument configured")
                raise InputMissing()
            process = self.build()
        return execute(process)


__all__ = ["Drafter", "default_binary_path"]
