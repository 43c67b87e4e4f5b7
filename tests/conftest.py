from __future__ import annotations

import io

import pytest
from rich.console import Console

from core.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def stdout() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def stderr() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)
