"""
Port interfaces for the Flight Progress Engine.

Ports define the abstract interfaces (ABCs and Protocols) the services
depend on, so cache backends and curvature strategies can be swapped
without touching the computation core.
"""

from flight_progress.ports.arc_cache import ArcCacheKey, ArcPathCache
from flight_progress.ports.curvature import CurvatureProfile

__all__ = [
    "ArcCacheKey",
    "ArcPathCache",
    "CurvatureProfile",
]
