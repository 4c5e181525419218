# errors.py
#
# Exceptions raised by the heat map core.
# "No data" is not in here on purpose: a missing region/day is just None.


class DashboardError(Exception):
    """Base class for everything the core raises."""


class InvalidIndex(DashboardError, ValueError):
    """Day index outside 0..6 (the UI should never offer one)."""

    def __init__(self, index):
        self.index = index
        super().__init__(f"day index must be an integer 0-6, got {index!r}")


class UnknownPreference(DashboardError, ValueError):
    """Preference key not in the catalog."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"unknown temperature preference: {key!r}")


class ForecastShapeError(DashboardError, ValueError):
    """Bulk forecast payload doesn't look like region -> 7 days."""


class GeoDataError(DashboardError):
    """Geo data could not be fetched or has no usable region records."""
