"""Exceptions raised when regions are declared or used incorrectly.

Every error signals caller misuse.  None of them leave the allocator in a
half-updated state, so it can keep being used after catching one.
"""


class RegionError(Exception):
    """Base class for region allocator errors."""


class InvalidRegionError(RegionError, ValueError):
    """A region's coordinates are malformed or degenerate."""

    def __init__(self, position, coords, reason):
        self.position = position
        self.coords = coords
        self.reason = reason
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f"region {position} {coords!r}: {reason}")


class InvalidLayoutError(RegionError, ValueError):
    """Grid or matrix layout parameters cannot produce any regions."""


class UnknownRegionError(RegionError, IndexError):
    """The index does not name a region of the current layout."""

    def __init__(self, index, count):
        self.index = index
        self.count = count
        if count:
            msg = f"no region {index!r}, layout has regions 1..{count}"
        else:
            msg = f"no region {index!r}, no layout declared"
        super().__init__(msg)


class AlreadyActiveError(RegionError):
    """A region was activated while another one is still active."""

    def __init__(self, requested, active):
        self.requested = requested
        self.active = active
        super().__init__(
            f"cannot activate region {requested}: region {active} is still active"
        )


class NotActiveError(RegionError):
    """The region being closed (or drawn into) is not the active one."""

    def __init__(self, index, active):
        self.index = index
        self.active = active
        if active is None:
            msg = "no region is active"
            if index is not None:
                msg = f"cannot deactivate region {index}: {msg}"
        else:
            msg = f"cannot deactivate region {index}: region {active} is active"
        super().__init__(msg)
