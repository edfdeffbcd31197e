"""Execute rendered drafter commands and classify the outcome."""
from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence

from ..domain.models import ProcessDescriptor
from ..utils.errors import ExternalToolFailure, LaunchFailure
from ..utils.logging import get_logger

LOG = get_logger()


def make_descriptor(
    argv: Sequence[str],
    *,
    cwd: Optional[Path] = None,
    stdin: Optional[str] = None,
) -> ProcessDescriptor:
    """Wrap ``argv`` into a descriptor bound to ``cwd`` (default: current directory)."""
    if not argv:
        raise ValueError("argv must contain at least the executable")
    return ProcessDescriptor(
        argv=tuple(argv),
        cwd=Path(cwd) if cwd is not None else Path.cwd(),
        stdin=stdin,
    )


def _merged_env(extra: Optional[Mapping[str, str]]) -> Optional[Dict[str, str]]:
    if not extra:
        return None
    env = dict(os.environ)
    env.update(extra)
    return env


def _resolve_executable(exe: str, cwd: Path) -> Optional[str]:
    """Locate ``exe`` the way the spawned process will.

    A relative path with a directory part is resolved against the process
    working directory; a bare name is looked up on ``PATH``.
    """
    has_dir = os.sep in exe or (os.altsep is not None and os.altsep in exe)
    if has_dir and not os.path.isabs(exe):
        candidate = cwd / exe
        if candidate.is_file() and os.access(candidate, os.X_OK):
            return str(candidate)
        return None
    return shutil.which(exe)


def execute(process: ProcessDescriptor) -> str:
    """Run ``process`` synchronously and return its stdout.

    Raises
    ------
    LaunchFailure
        The executable cannot be resolved or the OS refuses to spawn it.
    ExternalToolFailure
        The process exited with a non-zero status; the message is its stderr.
    """

    exe = process.executable
    if _resolve_executable(exe, process.cwd) is None:
        LOG.warning("drafter executable not found: %s", exe)
        raise LaunchFailure(exe, f"{exe}: command not found")

    cmd = list(process.argv)
    LOG.info("drafter: %s", process.command_line())
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(process.cwd),
            env=_merged_env(process.env),
            input=process.stdin,
            stdin=None if process.stdin is not None else subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        LOG.error("Failed to start drafter: %s", exc)
        raise LaunchFailure(exe, f"{exe}: {exc.strerror or exc}") from exc

    LOG.info("[drafter] rc=%d", proc.returncode)
    if proc.returncode != 0:
        if proc.stderr:
            LOG.error("[drafter STDERR]\n%s", proc.stderr)
        raise ExternalToolFailure(cmd, proc.returncode, proc.stderr or "")

    if proc.stderr:
        LOG.info("[drafter STDERR]\n%s", proc.stderr)
    return proc.stdout


__all__ = ["execute", "make_descriptor"]
