"""Global pytest fixtures and default marks for xtend."""

from __future__ import annotations

import random
from pathlib import Path

import numpy as np
import pytest

# pylint: disable=unused-argument

SEED = 1234

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKERS = {  # directory under tests/ -> marker name
    "unit": "unit",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default mark of the top-level test directory to each item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        marker_name = DEFAULT_MARKERS.get(top)
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def rng() -> np.random.Generator:
    """A seeded numpy generator for the vector helpers."""
    return np.random.default_rng(SEED)


@pytest.fixture
def py_random() -> random.Random:
    """A seeded standard-library random source for the string helpers."""
    return random.Random(SEED)
