"""
Curvature profile port interface.

Defines how far an arc bows away from the straight route for a given
route length.
"""

from abc import ABC, abstractmethod


class CurvatureProfile(ABC):
    """
    Abstract strategy mapping planar route distance to bow magnitude.

    Implementations:
    - ConstantCurvature: magnitude proportional to distance
    - DistanceTieredCurvature: factor grows with distance bands
    """

    @abstractmethod
    def magnitude(self, distance: float) -> float:
        """
        Bow magnitude for a route of the given length.

        Args:
            distance: Euclidean distance between endpoints in degrees.

        Returns:
            Perpendicular offset of the control point, in degrees (>= 0).
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Profile identifier, part of arc cache keys.

        Returns:
            Stable profile name including its parameters.
        """
        ...
