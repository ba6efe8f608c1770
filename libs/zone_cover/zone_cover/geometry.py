"""
Value types for circle covers: points, circles and the cover itself.
"""

import math
import numpy as np
from typing import List, Tuple, Dict, Any, Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A point in the horizontal plane."""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: 'Point') -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Circle:
    """Represents a single zone circle."""
    center: Point
    radius: float

    def contains_point(self, point: Point) -> bool:
        """Check if a point lies inside the closed disk."""
        return float(np.hypot(point.x - self.center.x,
                              point.y - self.center.y)) <= self.radius

    def distance_to_point(self, point: Point) -> float:
        """Calculate distance from circle boundary to point."""
        return self.center.distance_to(point) - self.radius

    def area(self) -> float:
        return math.pi * (self.radius ** 2)


@dataclass
class Cover:
    """Ordered circles covering a point set, in selection order."""
    circles: List[Circle] = field(default_factory=list)
    # For each circle, the input indices it removed from the uncovered set.
    assignments: List[np.ndarray] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.circles)

    def __iter__(self) -> Iterator[Circle]:
        return iter(self.circles)

    def bounds(self) -> Tuple[np.ndarray, np.ndarray]:
        """Get bounding box of all circles."""
        if not self.circles:
            return np.zeros(2), np.zeros(2)

        centers = np.array([c.center.as_tuple() for c in self.circles])
        radii = np.array([c.radius for c in self.circles])

        min_bounds = (centers - radii[:, None]).min(axis=0)
        max_bounds = (centers + radii[:, None]).max(axis=0)

        return min_bounds, max_bounds

    def contains_point(self, point: Point) -> bool:
        """Check if point is inside any circle."""
        return any(c.contains_point(point) for c in self.circles)

    def covers_all(self, points) -> bool:
        return all(self.contains_point(p) for p in points)

    def coverage_counts(self) -> List[int]:
        """Number of points each circle took off the uncovered set."""
        return [len(a) for a in self.assignments]

    def total_area(self) -> float:
        return sum(c.area() for c in self.circles)
