"""Tests for process execution and failure classification."""
from __future__ import annotations

import dataclasses
import subprocess
import sys
from pathlib import Path

import pytest

from drafter_wrapper.domain.models import ProcessDescriptor
from drafter_wrapper.drafter import Drafter
from drafter_wrapper.executor import process as executor
from drafter_wrapper.utils.errors import ExternalToolFailure, LaunchFailure


class _CompletedProcess:
    """Minimal stand-in for ``subprocess.CompletedProcess``."""

    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _descriptor(tmp_path: Path, *argv: str, stdin: str | None = None) -> ProcessDescriptor:
    return executor.make_descriptor(["drafter", *argv], cwd=tmp_path, stdin=stdin)


def test_execute_returns_stdout_unmodified(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    calls: list[tuple[list[str], dict]] = []

    def fake_run(cmd: list[str], **kwargs: object) -> _CompletedProcess:
        calls.append((cmd, kwargs))
        return _CompletedProcess(stdout="v0.1.9\n")

    monkeypatch.setattr(executor.shutil, "which", lambda _: "/usr/bin/drafter")
    monkeypatch.setattr(executor.subprocess, "run", fake_run)

    result = executor.execute(_descriptor(tmp_path, "--version"))

    assert result == "v0.1.9\n"
    cmd, kwargs = calls[0]
    assert cmd == ["drafter", "--version"]
    assert kwargs["cwd"] == str(tmp_path)
    assert kwargs["capture_output"] is True
    assert kwargs["stdin"] is subprocess.DEVNULL
    assert kwargs["env"] is None


def test_execute_pipes_stdin_text(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict = {}

    def fake_run(cmd: list[str], **kwargs: object) -> _CompletedProcess:
        seen.update(kwargs)
        return _CompletedProcess(stdout="{}")

    monkeypatch.setattr(executor.shutil, "which", lambda _: "/usr/bin/drafter")
    monkeypatch.setattr(executor.subprocess, "run", fake_run)

    executor.execute(_descriptor(tmp_path, "--format=json", "-", stdin="FORMAT: 1A\n"))

    assert seen["input"] == "FORMAT: 1A\n"
    assert seen["stdin"] is None


def test_execute_raises_launch_failure_when_binary_missing(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, caplog) -> None:
    def fail_run(*_: object, **__: object) -> _CompletedProcess:  # pragma: no cover - must not be reached
        raise AssertionError("process must not be spawned")

    monkeypatch.setattr(executor.shutil, "which", lambda _: None)
    monkeypatch.setattr(executor.subprocess, "run", fail_run)

    descriptor = executor.make_descriptor(["INVALID", "--version"], cwd=tmp_path)
    with caplog.at_level("WARNING"), pytest.raises(LaunchFailure) as excinfo:
        executor.execute(descriptor)

    assert excinfo.value.diagnostic == "INVALID: command not found"
    assert excinfo.value.executable == "INVALID"
    assert "drafter executable not found" in caplog.text


def test_execute_wraps_os_errors_as_launch_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def fake_run(*_: object, **__: object) -> _CompletedProcess:
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(executor.shutil, "which", lambda _: "/usr/bin/drafter")
    monkeypatch.setattr(executor.subprocess, "run", fake_run)

    with pytest.raises(LaunchFailure, match="Permission denied"):
        executor.execute(_descriptor(tmp_path, "--version"))


def test_execute_relays_stderr_on_non_zero_exit(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    stderr = "fatal: unable to open file 'INVALID'\n"
    monkeypatch.setattr(executor.shutil, "which", lambda _: "/usr/bin/drafter")
    monkeypatch.setattr(
        executor.subprocess,
        "run",
        lambda cmd, **_: _CompletedProcess(returncode=1, stdout="", stderr=stderr),
    )

    with pytest.raises(ExternalToolFailure) as excinfo:
        executor.execute(_descriptor(tmp_path, "INVALID"))

    error = excinfo.value
    assert str(error) == "fatal: unable to open file 'INVALID'"
    assert error.stderr == stderr
    assert error.returncode == 1
    assert error.argv == ("drafter", "INVALID")


def test_execute_synthesizes_message_for_silent_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(executor.shutil, "which", lambda _: "/usr/bin/drafter")
    monkeypatch.setattr(executor.subprocess, "run", lambda cmd, **_: _CompletedProcess(returncode=3))

    with pytest.raises(ExternalToolFailure, match=r"drafter exited with rc=3"):
        executor.execute(_descriptor(tmp_path, "api.apib"))


def test_extra_environment_is_merged_over_os_environ(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    seen: dict = {}

    def fake_run(cmd: list[str], **kwargs: object) -> _CompletedProcess:
        seen.update(kwargs)
        return _CompletedProcess()

    monkeypatch.setenv("HOME_MARKER", "1")
    monkeypatch.setattr(executor.shutil, "which", lambda _: "/usr/bin/drafter")
    monkeypatch.setattr(executor.subprocess, "run", fake_run)

    descriptor = ProcessDescriptor(argv=("drafter", "--version"), cwd=tmp_path, env={"LANG": "C"})
    executor.execute(descriptor)

    assert seen["env"]["LANG"] == "C"
    assert seen["env"]["HOME_MARKER"] == "1"


def test_make_descriptor_requires_an_executable() -> None:
    with pytest.raises(ValueError):
        executor.make_descriptor([])


def _write_script(path: Path, body: str) -> Path:
    if sys.platform == "win32":
        pytest.skip("shebang executables are not supported on Windows")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!{sys.executable}\n{body}", encoding="utf-8")
    path.chmod(0o755)
    return path


def test_undecodable_stderr_is_still_classified(tmp_path: Path) -> None:
    exe = _write_script(
        tmp_path / "drafter",
        "import sys\n"
        "sys.stderr.buffer.write(b\"fatal: unable to open file '\\xff'\\n\")\n"
        "sys.exit(1)\n",
    )

    with pytest.raises(ExternalToolFailure) as excinfo:
        Drafter(str(exe)).input("x").run()

    assert "unable to open file" in excinfo.value.diagnostic
    assert "\ufffd" in excinfo.value.stderr
    assert excinfo.value.returncode == 1


def test_undecodable_stdout_is_returned(tmp_path: Path) -> None:
    exe = _write_script(tmp_path / "drafter", "import sys\nsys.stdout.buffer.write(b'v0.1.9 \\xfe\\n')\n")

    assert Drafter(str(exe)).version().run().startswith("v0.1.9")


def test_relative_binary_resolves_against_descriptor_cwd(tmp_path: Path) -> None:
    workdir = tmp_path / "project"
    _write_script(workdir / "bin" / "drafter", "print('v0.1.9')\n")

    process = dataclasses.replace(Drafter("./bin/drafter").version().build(), cwd=workdir)

    assert Drafter().run(process) == "v0.1.9\n"


def test_relative_binary_missing_from_descriptor_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_script(tmp_path / "bin" / "drafter", "print('v0.1.9')\n")
    monkeypatch.chdir(tmp_path)
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()

    process = executor.make_descriptor(["./bin/drafter", "--version"], cwd=elsewhere)

    with pytest.raises(LaunchFailure, match=r"\./bin/drafter: command not found"):
        executor.execute(process)
