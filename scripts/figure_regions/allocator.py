"""Coordinate-based region allocator for splitting a figure into panels.

A layout is declared as a batch of ``(left, right, bottom, top)`` tuples in
figure-fraction coordinates (the canvas is the unit square, origin at the
bottom-left).  Regions are numbered from 1 in declaration order.  At most
one region is active at a time; the two illegal transitions of the
``idle -> active -> idle`` cycle raise instead of being silently allowed.

The allocator is not thread-safe.  Callers sharing one instance between
threads must serialize access to it.
"""

import logging
import math
import numbers
import operator
from dataclasses import dataclass

from .errors import (
    AlreadyActiveError,
    InvalidRegionError,
    NotActiveError,
    UnknownRegionError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Region:
    """One rectangular sub-area of the canvas, in figure fractions."""

    index: int
    left: float
    right: float
    bottom: float
    top: float

    def __post_init__(self):
        if not _is_index(self.index) or self.index < 1:
            raise InvalidRegionError(
                None, self.index, f"region index must be a positive integer, got {self.index!r}"
            )
        coords = validate_coords((self.left, self.right, self.bottom, self.top), self.index)
        # Frozen, so normalize through object.__setattr__
        object.__setattr__(self, "index", int(self.index))
        for name, value in zip(("left", "right", "bottom", "top"), coords):
            object.__setattr__(self, name, value)

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.top - self.bottom

    @property
    def coords(self):
        """The ``(left, right, bottom, top)`` tuple the region was declared with."""
        return (self.left, self.right, self.bottom, self.top)

    @property
    def bounds(self):
        """``(left, bottom, width, height)``, the rectangle ``Figure.add_axes`` takes."""
        return (self.left, self.bottom, self.width, self.height)

    def contains(self, x, y):
        return self.left <= x <= self.right and self.bottom <= y <= self.top

    def overlaps(self, other):
        return not (
            self.right <= other.left
            or self.left >= other.right
            or self.top <= other.bottom
            or self.bottom >= other.top
        )


def _is_index(value):
    return not isinstance(value, bool) and isinstance(value, numbers.Integral)


def _as_position(index):
    """``index`` as a plain int, or None for bools, floats and other non-integers."""
    if isinstance(index, bool):
        return None
    try:
        return operator.index(index)
    except TypeError:
        return None


def validate_coords(coords, position=None):
    """Check one ``(left, right, bottom, top)`` entry and return it as floats."""
    try:
        values = tuple(coords)
    except TypeError:
        raise InvalidRegionError(position, coords, "expected (left, right, bottom, top)") from None
    if len(values) != 4:
        raise InvalidRegionError(
            position, coords, f"expected 4 coordinates, got {len(values)}"
        )
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidRegionError(position, coords, f"{value!r} is not a number")
    left, right, bottom, top = (float(v) for v in values)
    if any(math.isnan(v) for v in (left, right, bottom, top)):
        raise InvalidRegionError(position, coords, "coordinates must not be NaN")
    if not 0.0 <= left < right <= 1.0:
        raise InvalidRegionError(position, coords, "need 0 <= left < right <= 1")
    if not 0.0 <= bottom < top <= 1.0:
        raise InvalidRegionError(position, coords, "need 0 <= bottom < top <= 1")
    return left, right, bottom, top


class RegionAllocator:
    """Holds the current layout and which of its regions is active."""

    def __init__(self):
        self._regions = ()
        self._active = None

    def __len__(self):
        return len(self._regions)

    def __iter__(self):
        return iter(self._regions)

    def __repr__(self):
        return f"<RegionAllocator regions={len(self._regions)} active={self._active}>"

    @property
    def regions(self):
        return self._regions

    @property
    def active(self):
        """Index of the active region, or ``None`` when idle."""
        return self._active

    @property
    def active_region(self):
        if self._active is None:
            return None
        return self._regions[self._active - 1]

    def _resolve(self, index):
        position = _as_position(index)
        if position is None or not 1 <= position <= len(self._regions):
            raise UnknownRegionError(index, len(self._regions))
        return position

    def region(self, index):
        """Return the handle for ``index`` in the current layout."""
        return self._regions[self._resolve(index) - 1]

    def declare_layout(self, regions):
        """Replace the current layout with ``regions`` and return their handles.

        All entries are validated before anything changes, so a rejected
        layout keeps the previous one (and its active region) in place.
        """
        entries = list(regions)
        if not entries:
            raise InvalidRegionError(None, entries, "a layout needs at least one region")
        handles = tuple(
            Region(position, *validate_coords(coords, position))
            for position, coords in enumerate(entries, start=1)
        )
        if self._active is not None:
            logger.debug("new layout discards active region %d", self._active)
        self._regions = handles
        self._active = None
        logger.debug("declared layout with %d region(s)", len(handles))
        return handles

    def activate(self, index):
        """Make region ``index`` the target of subsequent drawing."""
        position = self._resolve(index)
        if self._active is not None:
            raise AlreadyActiveError(position, self._active)
        self._active = position
        logger.debug("activated region %d", position)
        return self._regions[position - 1]

    def deactivate(self, index):
        """Close region ``index``; it must be the active one."""
        if self._active is None or _as_position(index) != self._active:
            raise NotActiveError(index, self._active)
        logger.debug("deactivated region %d", self._active)
        self._active = None

    def deactivate_all(self):
        """Clear any active region.  Safe to call at any time."""
        if self._active is not None:
            logger.debug("deactivate_all closed region %d", self._active)
        self._active = None

    def reset(self):
        """Forget the layout entirely, as when the canvas is cleared."""
        self._regions = ()
        self._active = None
