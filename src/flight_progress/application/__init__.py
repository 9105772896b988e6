"""
Application layer for the Flight Progress Engine.

This layer provides the public API for hosts. It acts as a facade,
handling dependency initialization and providing a simple interface.
"""

from flight_progress.application.track_flight_progress import TrackFlightProgress

__all__ = ["TrackFlightProgress"]
