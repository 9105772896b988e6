"""
Repository adapters for arc path caching.
"""

from flight_progress.adapters.repositories.arc_path_cache import (
    InMemoryArcPathCache,
)

__all__ = ["InMemoryArcPathCache"]
