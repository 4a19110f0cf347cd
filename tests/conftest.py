"""Pytest setup: make the repo root importable without installing."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart(session):
    repo_root = str(Path(__file__).resolve().parents[1])
    if repo_root not in sys.path:
        sys.path.insert(0, repo_root)


@pytest.fixture
def reference_raw():
    """Form values of the 1 MW reference case."""
    from liquid_cooling.main import DefaultParameters

    return DefaultParameters.as_raw()
