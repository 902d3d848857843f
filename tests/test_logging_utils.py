from __future__ import annotations

import logging

import pytest

from cli.logging_utils import configure_logging, resolve_level


def _our_handlers() -> list[logging.Handler]:
    return [
        h for h in logging.getLogger().handlers if getattr(h, "_added_by_configure_logging", False)
    ]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("error", logging.ERROR),
        ("bogus", logging.WARNING),
        (None, logging.WARNING),
    ],
)
def test_resolve_level(raw, expected: int) -> None:
    assert resolve_level(raw) == expected


def test_configure_logging_is_idempotent() -> None:
    configure_logging("info")
    configure_logging("info")

    assert len(_our_handlers()) == 1
    assert logging.getLogger().level == logging.INFO


def test_level_comes_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("FALLO_LOG_LEVEL", "debug")

    configure_logging()

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG


def test_default_level_hides_httpx_chatter() -> None:
    configure_logging()

    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING
