"""matplotlib binding: one figure whose regions each get their own Axes."""

import logging
from contextlib import contextmanager

from ._common import close_figure, new_figure, save
from .allocator import RegionAllocator
from .errors import NotActiveError

logger = logging.getLogger(__name__)


class RegionCanvas:
    """A figure split into allocator-managed regions.

    Each region's Axes is created the first time the region is activated,
    placed at the region's figure-fraction bounds, and reused afterwards.
    Declaring a new layout forgets those Axes but leaves what was drawn on
    the figure.
    """

    def __init__(self, figsize=None, allocator=None):
        self.figure = new_figure(figsize)
        self.allocator = allocator if allocator is not None else RegionAllocator()
        self._axes = {}

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def regions(self):
        return self.allocator.regions

    @property
    def axes(self):
        """Axes of the active region."""
        region = self.allocator.active_region
        if region is None:
            raise NotActiveError(None, None)
        return self._axes_for(region)

    def _axes_for(self, region):
        # A shared allocator may have declared a new layout since the Axes was made
        entry = self._axes.get(region.index)
        if entry is None or entry[0] is not region:
            entry = (region, self.figure.add_axes(region.bounds))
            self._axes[region.index] = entry
        return entry[1]

    def declare_layout(self, regions):
        handles = self.allocator.declare_layout(regions)
        self._axes = {}
        return handles

    def activate(self, index):
        """Activate region ``index`` and return the Axes drawing goes to."""
        return self._axes_for(self.allocator.activate(index))

    def deactivate(self, index):
        self.allocator.deactivate(index)

    def deactivate_all(self):
        self.allocator.deactivate_all()

    @contextmanager
    def region(self, index):
        """Activate ``index`` for the duration of a ``with`` block."""
        ax = self.activate(index)
        position = self.allocator.active
        try:
            yield ax
        finally:
            if self.allocator.active == position:
                self.allocator.deactivate(position)

    def reset(self):
        """Clear the figure and forget the layout."""
        self.figure.clf()
        self.allocator.reset()
        self._axes = {}

    def save(self, filename, output_dir=None, dpi=None):
        return save(self.figure, filename, output_dir=output_dir, dpi=dpi)

    def close(self):
        """End the drawing session, closing any region left active."""
        if self.allocator.active is not None:
            logger.warning(
                "region %d still active when the canvas was closed", self.allocator.active
            )
            self.allocator.deactivate_all()
        close_figure(self.figure)
