from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from drafter_wrapper.utils.logging import LOGGER_NAME

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixture_path() -> Path:
    return FIXTURES


@pytest.fixture
def fake_drafter(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Install an executable stand-in for drafter under ``tmp_path``."""
    if sys.platform == "win32":
        pytest.skip("shebang executables are not supported on Windows")

    source = (FIXTURES / "fake_drafter.py").read_text(encoding="utf-8")
    exe = tmp_path / "bin" / "drafter"
    exe.parent.mkdir()
    exe.write_text(f"#!{sys.executable}\n{source}", encoding="utf-8")
    exe.chmod(0o755)
    monkeypatch.setenv("FAKE_DRAFTER_AST", str(FIXTURES / "simplest-example-ast.json"))
    monkeypatch.delenv("DRAFTER_BIN", raising=False)
    return exe


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo handler changes made by ``configure_logger`` so caplog keeps working."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
