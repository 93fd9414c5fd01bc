"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Callable, Dict, Any

import yaml


@pytest.fixture
def reference_pair() -> Dict[str, Any]:
    """Colour pair with a known contrast ratio."""
    return {
        "foreground": "#ffffff",
        "background": "#2660a1",
        "ratio": 6.421617658233243,
    }


@pytest.fixture
def equivalent_whites() -> list[str]:
    """Different notations that all describe pure white."""
    return [
        "#fff",
        "#ffffff",
        "#FFFFFF",
        "#ffffff80",
        "rgb(255, 255, 255)",
        "rgba(255, 255, 255, 0.5)",
        "rgb(100%, 100%, 100%)",
        "hsl(0, 0%, 100%)",
        "hsla(0, 0%, 100%, 1)",
    ]


@pytest.fixture
def valid_colours() -> list[str]:
    """A spread of valid colour strings across all supported notations."""
    return [
        "#000",
        "#fff",
        "#abc",
        "#2660a1",
        "#767676",
        "rgb(255, 0, 0)",
        "rgba(0, 128, 0, 0.3)",
        "rgb(10%, 20%, 30%)",
        "hsl(210, 50%, 40%)",
        "hsla(60, 100%, 50%, 0.8)",
        "hsl(300, 25%, 75%)",
    ]


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """Write a contrast.yaml into a temporary config directory."""
    def _write(config: Dict[str, Any]) -> Path:
        with open(tmp_path / "contrast.yaml", "w") as f:
            yaml.safe_dump(config, f)
        return tmp_path

    return _write
