"""Shared pytest fixtures for table rendering checks."""

from __future__ import annotations

import pytest

from textgrid import Table


@pytest.fixture
def table() -> Table:
    return Table()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEXTGRID_SEPARATOR", "TEXTGRID_RULE_CHAR", "TEXTGRID_TOTAL_RULE"):
        monkeypatch.delenv(name, raising=False)
