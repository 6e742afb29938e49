"""Shared fixtures: keep config discovery away from the real environment."""
from __future__ import annotations

import sys

import pytest

from gommit.config import GommitConfig


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.delenv("GOMMIT_CONFIG", raising=False)
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "bin" / "gommit")])


@pytest.fixture
def config() -> GommitConfig:
    return GommitConfig(header_max_length=50, body_line_max_length=72)
