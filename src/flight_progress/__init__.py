"""
Flight Progress Engine.

Derives a flight's lifecycle phase, its progress fraction and a curved
route split into traveled/remaining segments from scheduled and actual
timestamps plus the two airport coordinates.
"""

__version__ = "0.1.0"
