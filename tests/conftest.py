"""Shared pytest fixtures for relay configuration and scores."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from decorum.config import DecorumConfig
from decorum.types import MarkerSet

MARKERS_RAW: dict[str, str] = {
    "passed_check": "PASS",
    "failed_check": "FAIL",
    "passed_check_highest": "PASS_HI",
    "passed_check_lowest": "PASS_LO",
    "failed_check_highest": "FAIL_HI",
    "failed_check_lowest": "FAIL_LO",
}


@pytest.fixture(scope="session")
def markers() -> MarkerSet:
    """Return distinct, readable markers for assertions."""
    return MarkerSet(**MARKERS_RAW)


@pytest.fixture
def make_config(markers: MarkerSet) -> Callable[[dict[str, float]], DecorumConfig]:
    """Return a factory building a config from a threshold mapping."""

    def _make(thresholds: dict[str, float]) -> DecorumConfig:
        return DecorumConfig(attributes=thresholds, markers=markers)

    return _make


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Any], Path]:
    """Return a helper that writes a raw config payload to ``config.json``."""

    def _write(payload: Any) -> Path:
        path = tmp_path / "config.json"
        text = payload if isinstance(payload, str) else json.dumps(payload)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_config_payload() -> dict[str, Any]:
    """Return a minimal valid config document."""
    return {
        "emotes": dict(MARKERS_RAW),
        "attributes": {
            "TOXICITY": {"threshold": 0.7},
            "INSULT": {"threshold": 0.5},
        },
    }
