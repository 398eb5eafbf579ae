"""
Domain models and value objects.

Contains concrete coordinate types: Point2D, Point3D, GridPoint2D, GridPoint3D.
"""

from src.core.domain.points import (
    AxisPoint,
    GridPoint2D,
    GridPoint3D,
    Point2D,
    Point3D,
)

__all__ = [
    # Base
    "AxisPoint",
    # Float points
    "Point2D",
    "Point3D",
    # Integer points
    "GridPoint2D",
    "GridPoint3D",
]
