"""Reference data adapters."""

from septa_tracker.adapters.reference.reference_data_cache import (
    ReferenceDataCache,
    ReferenceKind,
    ReferenceSource,
)

__all__ = ["ReferenceDataCache", "ReferenceKind", "ReferenceSource"]
