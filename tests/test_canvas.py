"""Tests for the matplotlib RegionCanvas binding."""

import logging
import os

import matplotlib.pyplot as plt
import pytest

from figure_regions import (
    AlreadyActiveError,
    NotActiveError,
    RegionAllocator,
    RegionCanvas,
    UnknownRegionError,
    grid_regions,
)


class TestActivation:
    """Tests for mapping regions onto Axes."""

    def test_activate_places_axes_at_region_bounds(self, canvas):
        canvas.declare_layout([(0.1, 0.6, 0.2, 0.9)])

        ax = canvas.activate(1)

        assert ax.get_position().bounds == pytest.approx((0.1, 0.2, 0.5, 0.7))
        assert canvas.axes is ax

    def test_reactivating_region_reuses_axes(self, canvas):
        canvas.declare_layout(grid_regions(1, 2))
        first = canvas.activate(1)
        canvas.deactivate(1)

        again = canvas.activate(1)

        assert again is first
        assert len(canvas.figure.axes) == 1

    def test_axes_when_idle_then_raises(self, canvas):
        canvas.declare_layout(grid_regions(1, 2))

        with pytest.raises(NotActiveError):
            canvas.axes

    def test_activate_when_other_active_then_raises(self, canvas):
        canvas.declare_layout(grid_regions(1, 2))
        canvas.activate(1)

        with pytest.raises(AlreadyActiveError):
            canvas.activate(2)

        assert len(canvas.figure.axes) == 1

    def test_activate_when_unknown_then_no_axes_created(self, canvas):
        canvas.declare_layout(grid_regions(1, 2))

        with pytest.raises(UnknownRegionError):
            canvas.activate(3)

        assert canvas.figure.axes == []

    def test_new_layout_keeps_drawn_axes_on_figure(self, canvas):
        canvas.declare_layout([(0, 1, 0, 1)])
        old = canvas.activate(1)
        canvas.deactivate(1)

        canvas.declare_layout([(0.5, 1, 0.5, 1)])
        new = canvas.activate(1)

        assert new is not old
        assert canvas.figure.axes == [old, new]

    def test_activate_when_shared_allocator_redeclared_then_axes_follow_new_bounds(self):
        allocator = RegionAllocator()
        with RegionCanvas(allocator=allocator) as canvas:
            canvas.declare_layout([(0, 1, 0, 1)])
            old = canvas.activate(1)
            canvas.deactivate(1)

            allocator.declare_layout([(0.5, 1, 0.5, 1)])
            ax = canvas.activate(1)

            assert ax is not old
            assert ax.get_position().bounds == pytest.approx((0.5, 0.5, 0.5, 0.5))

    def test_axes_when_activated_on_shared_allocator_then_created_for_region(self):
        allocator = RegionAllocator()
        with RegionCanvas(allocator=allocator) as canvas:
            canvas.declare_layout([(0.1, 0.6, 0.2, 0.9), (0.6, 1, 0, 1)])
            allocator.activate(1)

            ax = canvas.axes

            assert ax.get_position().bounds == pytest.approx((0.1, 0.2, 0.5, 0.7))
            assert canvas.axes is ax
            allocator.deactivate(1)
            assert canvas.activate(1) is ax

    def test_shared_allocator_is_used(self):
        allocator = RegionAllocator()
        with RegionCanvas(allocator=allocator) as canvas:
            canvas.declare_layout([(0, 1, 0, 1)])
            canvas.activate(1)

            assert allocator.active == 1


class TestRegionContext:
    """Tests for the region() context manager."""

    def test_region_deactivates_on_exit(self, canvas):
        canvas.declare_layout(grid_regions(2, 1))

        with canvas.region(2) as ax:
            ax.plot([0, 1], [1, 0])
            assert canvas.allocator.active == 2

        assert canvas.allocator.active is None

    def test_region_deactivates_when_body_raises(self, canvas):
        canvas.declare_layout(grid_regions(2, 1))

        with pytest.raises(RuntimeError):
            with canvas.region(1):
                raise RuntimeError("boom")

        assert canvas.allocator.active is None

    def test_region_when_body_switches_region_then_leaves_it_active(self, canvas):
        canvas.declare_layout(grid_regions(2, 1))

        with canvas.region(1):
            canvas.deactivate(1)
            canvas.activate(2)

        assert canvas.allocator.active == 2


class TestSessionLifecycle:
    """Tests for reset, save and close."""

    def test_reset_clears_figure_and_layout(self, canvas):
        canvas.declare_layout([(0, 1, 0, 1)])
        canvas.activate(1)

        canvas.reset()

        assert canvas.figure.axes == []
        assert canvas.regions == ()
        assert canvas.allocator.active is None

    def test_save_writes_png(self, canvas, tmp_path):
        canvas.declare_layout([(0.1, 0.9, 0.1, 0.9)])
        with canvas.region(1) as ax:
            ax.plot([0, 1], [0, 1])

        path = canvas.save("out.png", output_dir=str(tmp_path), dpi=50)

        assert path == os.path.join(str(tmp_path), "out.png")
        assert os.path.getsize(path) > 0

    def test_close_when_region_left_active_then_warns(self, caplog):
        canvas = RegionCanvas(figsize=(2, 2))
        canvas.declare_layout([(0, 1, 0, 1)])
        canvas.activate(1)

        with caplog.at_level(logging.WARNING, logger="figure_regions.canvas"):
            canvas.close()

        assert canvas.allocator.active is None
        assert "region 1 still active" in caplog.text
        assert not plt.fignum_exists(canvas.figure.number)

    def test_close_when_idle_then_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="figure_regions.canvas"):
            with RegionCanvas(figsize=(2, 2)) as canvas:
                canvas.declare_layout([(0, 1, 0, 1)])
                with canvas.region(1):
                    pass

        assert caplog.records == []
