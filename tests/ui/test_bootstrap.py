"""Tests for application bootstrap helpers."""

from __future__ import annotations

import logging

import pytest

from tictac.ui import bootstrap
from tictac.ui.settings import AppSettings


def test_configure_logging_known_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    bootstrap._configure_logging("debug")

    assert calls[0]["level"] == logging.DEBUG


def test_configure_logging_unknown_level_falls_back(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

    with caplog.at_level(logging.WARNING, logger="tictac.ui.bootstrap"):
        bootstrap._configure_logging("chatty")

    assert calls[0]["level"] == logging.WARNING
    assert "Unknown log level" in caplog.text


def test_configure_application(qapp: object) -> None:
    bootstrap._configure_application(qapp)  # type: ignore[arg-type]
    assert qapp.applicationName() == "Tic-Tac-Toe"  # type: ignore[attr-defined]


def test_effective_cell_size_is_clamped() -> None:
    assert AppSettings(cell_size=5).effective_cell_size == 48
    assert AppSettings(cell_size=120).effective_cell_size == 120
