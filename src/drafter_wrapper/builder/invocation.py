"""Chainable builder accumulating a drafter command line."""
from __future__ import annotations

import os
from typing import Dict, List, Optional, Union

from ..domain.models import DrafterOption, InvocationState
from ..utils.constants import DEFAULT_BINARY_PATH
from ..utils.errors import InvalidOptionError

OptionName = Union[str, DrafterOption]
PathArg = Union[str, "os.PathLike[str]"]

_RECOGNIZED_OPTIONS = frozenset(DrafterOption.names())


def _option_name(name: OptionName) -> str:
    key = name.value if isinstance(name, DrafterOption) else str(name)
    if key not in _RECOGNIZED_OPTIONS:
        raise InvalidOptionError(
            f"unknown drafter option '{key}'. Expected one of: {', '.join(DrafterOption.names())}."
        )
    return key


def _render_option(name: str, value: str) -> str:
    if value == "":
        return name
    return f"{name}={value}"


class InvocationBuilder:
    """Accumulate the executable, input argument and options of one invocation.

    Every mutating method returns the builder itself so calls can be chained::

        argv = InvocationBuilder().set_input("api.apib").format("json").render()

    Nothing is executed here; see :class:`drafter_wrapper.drafter.Drafter`.
    """

    def __init__(self, executable_path: Optional[str] = None) -> None:
        self._state = InvocationState(executable_path=executable_path or DEFAULT_BINARY_PATH)

    @classmethod
    def from_state(cls, state: InvocationState) -> "InvocationBuilder":
        builder = cls(state.executable_path)
        builder._state = state.copy()
        return builder

    @property
    def state(self) -> InvocationState:
        return self._state.copy()

    def set_executable_path(self, path: PathArg) -> "InvocationBuilder":
        self._state.executable_path = os.fspath(path)
        return self

    def get_executable_path(self) -> str:
        return self._state.executable_path

    def set_input(self, path: PathArg) -> "InvocationBuilder":
        self._state.input_argument = os.fspath(path)
        return self

    def get_input(self) -> Optional[str]:
        return self._state.input_argument

    def reset_input(self) -> "InvocationBuilder":
        self._state.input_argument = None
        return self

    def set_option(self, name: OptionName, value: PathArg = "") -> "InvocationBuilder":
        """Insert or overwrite ``name``; flags take no value, the others require one.

        An overwritten option keeps the position it was first set at.
        """
        key = _option_name(name)
        option = DrafterOption(key)
        rendered = os.fspath(value)
        if option.takes_value != (rendered != ""):
            expected = "a value" if option.takes_value else "no value"
            raise InvalidOptionError(f"drafter option '{key}' takes {expected} (got {rendered!r})")
        self._state.options[key] = rendered
        return self

    def get_options(self) -> Dict[str, str]:
        return dict(self._state.options)

    def has_option(self, name: OptionName) -> bool:
        return _option_name(name) in self._state.options

    def reset_options(self) -> "InvocationBuilder":
        self._state.options.clear()
        return self

    def output(self, path: PathArg) -> "InvocationBuilder":
        return self.set_option(DrafterOption.OUTPUT, path)

    def version(self) -> "InvocationBuilder":
        return self.set_option(DrafterOption.VERSION)

    def validate(self) -> "InvocationBuilder":
        return self.set_option(DrafterOption.VALIDATE)

    def format(self, value: str) -> "InvocationBuilder":
        # the binary rejects unknown formats itself
        return self.set_option(DrafterOption.FORMAT, value)

    def sourcemap(self, path: PathArg) -> "InvocationBuilder":
        return self.set_option(DrafterOption.SOURCEMAP, path)

    def use_line_num(self) -> "InvocationBuilder":
        return self.set_option(DrafterOption.USE_LINE_NUM)

    def render(self) -> List[str]:
        """Return ``[executable, *options, input]`` without touching state."""
        argv = [self._state.executable_path]
        argv.extend(_render_option(name, value) for name, value in self._state.options.items())
        if self._state.input_argument is not None:
            argv.append(self._state.input_argument)
        return argv

    def __repr__(self) -> str:
        return f"{type(self).__name__}({' '.join(self.render())!r})"


__all__ = ["InvocationBuilder", "OptionName"]
