"""Pytest configuration.

Puts the workspace ``packages/`` dir on ``sys.path`` so ``ach_transactions``
imports without an install, and runs every test inside its own temporary
working directory: the drivers write ``transactions.ach``/``chargebacks.ach``
relative to the CWD and the CLI reads ``.env`` from it.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR)] if p not in sys.path]

FIXED_NOW = datetime(2024, 1, 2, 15, 4, 0)


@pytest.fixture(autouse=True)
def _isolate_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in a per-test directory with no inherited package env vars."""

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for name in ("ACH_TRANSACTIONS_OUTPUT_DIR", "ACH_TRANSACTIONS_LOG_LEVEL"):
        # setenv first so monkeypatch restores the variable even when the
        # test (via load_dotenv) sets it later.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return workdir


@pytest.fixture
def fixed_now():
    """A clock returning 2024-01-02 15:04."""

    return lambda: FIXED_NOW


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo CLI logging configuration so ``caplog`` sees package records."""

    import logging

    from ach_transactions import logging_setup

    yield
    logger = logging.getLogger("ach_transactions")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False
