"""Location adapters."""

from septa_tracker.adapters.location.static_location_provider import StaticLocationProvider

__all__ = ["StaticLocationProvider"]
