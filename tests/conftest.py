"""Shared pytest fixtures for tokencraft tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def alpha_schedule() -> dict[str, float]:
    return {
        "min": 0.07,
        "lo-x": 0.125,
        "lo": 0.25,
        "hi": 0.68,
        "hi-x": 0.85,
        "max": 0.93,
    }


@pytest.fixture
def basic_colors(alpha_schedule: dict[str, float]) -> dict[str, Any]:
    """Single-mode color family with seven colors."""
    return {
        "alphaSchedule": alpha_schedule,
        "modes": [
            {
                "name": "default",
                "isDefault": True,
                "tokens": {
                    "bg": {"l": 0.26, "c": 0, "h": 180},
                    "primary": {"l": 0.8, "c": 0.12, "h": 296},
                    "ink": {"l": 0.93, "c": 0.04, "h": 299},
                    "ev": {"l": 0.29, "c": 0, "h": 286},
                    "neutral": {"l": 0.93, "c": 0.04, "h": 299},
                    "positive": {"l": 0.76, "c": 0.2, "h": 150},
                    "negative": {"l": 0.69, "c": 0.21, "h": 7},
                },
            }
        ],
    }


@pytest.fixture
def multi_mode_colors(alpha_schedule: dict[str, float]) -> dict[str, Any]:
    """Light default mode plus a sparse dark override."""
    return {
        "alphaSchedule": alpha_schedule,
        "modes": [
            {
                "name": "light",
                "isDefault": True,
                "tokens": {
                    "bg": {"l": 0.98, "c": 0, "h": 0},
                    "primary": {"l": 0.6, "c": 0.2, "h": 250},
                    "ink": {"l": 0.15, "c": 0, "h": 0},
                },
            },
            {
                "name": "dark",
                "tokens": {
                    "bg": {"l": 0.15, "c": 0, "h": 0},
                    "ink": {"l": 0.95, "c": 0, "h": 0},
                },
            },
        ],
    }


@pytest.fixture
def spacing_config() -> dict[str, Any]:
    return {
        "modes": [
            {
                "name": "default",
                "isDefault": True,
                "tokens": {"unit": "px", "base": 8, "min": 4, "range": 12},
            },
            {"name": "small", "tokens": {"unit": "px", "base": 4, "min": 2, "range": 12}},
            {"name": "large", "tokens": {"unit": "px", "base": 16, "min": 8, "range": 12}},
        ]
    }


@pytest.fixture
def typography_config() -> dict[str, Any]:
    return {
        "modes": [
            {
                "name": "default",
                "isDefault": True,
                "tokens": {
                    "unit": "rem",
                    "base": 0.875,
                    "min": 0.625,
                    "increment": 0.125,
                    "range": 3,
                },
            },
            {
                "name": "large",
                "tokens": {"unit": "rem", "base": 1, "min": 0.75, "increment": 0.25, "range": 3},
            },
        ]
    }


@pytest.fixture
def time_config() -> dict[str, Any]:
    return {
        "modes": [
            {
                "name": "default",
                "isDefault": True,
                "tokens": {"unit": "ms", "base": 100, "min": 50, "range": 2},
            },
            {"name": "anim", "tokens": {"unit": "ms", "base": 1000, "min": 500, "range": 1}},
        ]
    }


@pytest.fixture
def full_config(
    multi_mode_colors: dict[str, Any],
    spacing_config: dict[str, Any],
    typography_config: dict[str, Any],
    time_config: dict[str, Any],
) -> dict[str, Any]:
    """A design system using every family."""
    return {
        "colors": multi_mode_colors,
        "spacing": spacing_config,
        "gap": {
            "modes": [
                {"name": "default", "isDefault": True, "tokens": {"min": "min", "s": 1, "l": 2}},
                {"name": "small", "tokens": {"min": "min", "s": 1, "l": 2}},
            ]
        },
        "typography": typography_config,
        "border": {
            "radius": {
                "modes": [
                    {"name": "default", "tokens": {"s": 1, "max": 3}},
                ]
            },
            "width": {
                "modes": [
                    {"name": "default", "tokens": {"unit": "px", "value": 1}},
                    {"name": "thick", "tokens": {"unit": "px", "value": 2}},
                ]
            },
        },
        "time": time_config,
    }
