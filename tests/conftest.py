"""Shared fixtures for pyoptic tests."""

import pytest

from pyoptic import create_lens, from_path


@pytest.fixture
def a_lens():
    """A hand-written lens onto the 'a' key of a dict."""
    return create_lens(lambda obj: obj["a"], lambda obj, a: {**obj, "a": a})


@pytest.fixture
def nested():
    """A nested structure with several independent branches."""
    return {
        "a": {"b": 1, "c": [10, 20]},
        "d": {"e": {"f": "deep"}},
        "g": 3,
    }


@pytest.fixture
def path_lenses():
    """Single-key path lenses a, b and c."""
    return from_path("a"), from_path("b"), from_path("c")
