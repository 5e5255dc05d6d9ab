"""Shared fixtures for figure_regions tests."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from figure_regions import RegionAllocator, RegionCanvas  # noqa: E402


@pytest.fixture
def allocator():
    """Fresh allocator with no layout declared."""
    return RegionAllocator()


@pytest.fixture
def canvas():
    """Canvas whose figure is closed after the test."""
    c = RegionCanvas(figsize=(4, 3))
    yield c
    c.close()


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
