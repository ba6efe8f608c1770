"""
Greedy fixed-radius circle cover.

Every step picks, among the points that are still uncovered, the one whose
closed disk of the configured radius holds the most uncovered points. Ties
go to the candidate seen first (lowest input index among the remaining
points). Centres are always data points; no centre is ever placed between
points even when that would cover more.
"""

import math
import numbers
import time
import numpy as np
from typing import List, Tuple, Optional, Dict, Any, Callable, Sequence
from munch import munchify
from scipy.spatial import KDTree

from .geometry import Point, Circle, Cover

# Candidates evaluated per numpy block in the scan method.
SCAN_CHUNK = 256
# Relative slack on the KDTree query radius; results are re-filtered exactly.
KDTREE_SLACK = 1e-9

METHODS = ('scan', 'kdtree')


class InvalidArgument(ValueError):
    """Radius or point coordinates violate the planner's contract."""


class CoverCancelled(RuntimeError):
    """Raised when the should_stop callback asks to abandon a cover."""


def _is_real(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, (bool, np.bool_))


def as_coordinates(points) -> np.ndarray:
    """Convert points (Point, pairs or an (n, 2) array) to a float array."""
    if isinstance(points, np.ndarray):
        if points.size == 0:
            return np.zeros((0, 2))
        if points.dtype.kind not in 'iuf':
            raise InvalidArgument(f'Point coordinates must be real numbers, got dtype {points.dtype}')
        coords = points.astype(float, copy=False)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise InvalidArgument(f'Expected an (n, 2) array, got shape {coords.shape}')
        return coords

    rows = []
    for i, p in enumerate(points):
        if isinstance(p, Point):
            rows.append((p.x, p.y))
            continue
        try:
            x, y = p
        except (TypeError, ValueError):
            raise InvalidArgument(f'Point {i} is not an (x, y) pair: {p!r}')
        if not (_is_real(x) and _is_real(y)):
            raise InvalidArgument(f'Point {i} coordinates must be real numbers: {p!r}')
        rows.append((x, y))
    if not rows:
        return np.zeros((0, 2))
    try:
        return np.array(rows, dtype=float)
    except OverflowError as e:
        raise InvalidArgument(f'Point coordinates out of range: {e}')


def validate_radius(radius) -> float:
    if isinstance(radius, bool) or not isinstance(radius, numbers.Real):
        raise InvalidArgument(f'Radius must be a real number, got {radius!r}')
    radius = float(radius)
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidArgument(f'Radius must be a finite positive number, got {radius}')
    return radius


def validate_coordinates(coords: np.ndarray):
    finite = np.isfinite(coords).all(axis=1)
    if not finite.all():
        bad = int(np.flatnonzero(~finite)[0])
        raise InvalidArgument(
            f'Point {bad} has a non-finite coordinate: {tuple(coords[bad])}')


def _within(coords: np.ndarray, center: np.ndarray, radius: float) -> np.ndarray:
    return np.hypot(coords[:, 0] - center[0], coords[:, 1] - center[1]) <= radius


def _scan_cover(coords: np.ndarray, radius: float,
                should_stop: Optional[Callable[[], bool]]) -> List[Tuple[int, np.ndarray]]:
    uncovered = np.ones(len(coords), dtype=bool)
    selections = []

    while uncovered.any():
        if should_stop is not None and should_stop():
            raise CoverCancelled(f'Cancelled after {len(selections)} circles')

        remaining = np.flatnonzero(uncovered)
        pts = coords[remaining]

        # Every candidate covers at least itself, so the first block always wins.
        best_row, best_count = 0, 0
        for start in range(0, len(pts), SCAN_CHUNK):
            cand = pts[start:start + SCAN_CHUNK]
            dx = pts[None, :, 0] - cand[:, 0, None]
            dy = pts[None, :, 1] - cand[:, 1, None]
            counts = (np.hypot(dx, dy) <= radius).sum(axis=1)
            row = int(np.argmax(counts))
            if counts[row] > best_count:
                best_row, best_count = start + row, int(counts[row])

        covered = remaining[_within(pts, pts[best_row], radius)]
        uncovered[covered] = False
        selections.append((int(remaining[best_row]), covered))

    return selections


def _neighbor_lists(coords: np.ndarray, radius: float) -> List[np.ndarray]:
    tree = KDTree(coords)
    candidates = tree.query_ball_point(coords, radius * (1.0 + KDTREE_SLACK))
    neighbors = []
    for i, idx in enumerate(candidates):
        idx = np.sort(np.asarray(idx, dtype=np.intp))
        neighbors.append(idx[_within(coords[idx], coords[i], radius)])
    return neighbors


def _kdtree_cover(coords: np.ndarray, radius: float,
                  should_stop: Optional[Callable[[], bool]]) -> List[Tuple[int, np.ndarray]]:
    neighbors = _neighbor_lists(coords, radius)
    counts = np.array([len(n) for n in neighbors], dtype=np.int64)
    uncovered = np.ones(len(coords), dtype=bool)
    selections = []

    while uncovered.any():
        if should_stop is not None and should_stop():
            raise CoverCancelled(f'Cancelled after {len(selections)} circles')

        # argmax returns the first maximum, i.e. the lowest remaining index.
        center = int(np.argmax(np.where(uncovered, counts, -1)))
        nearby = neighbors[center]
        covered = nearby[uncovered[nearby]]
        uncovered[covered] = False
        # The within-radius relation is symmetric, so neighbors[j] lists
        # every candidate whose count included j.
        for j in covered:
            counts[neighbors[j]] -= 1
        selections.append((center, covered))

    return selections


_STRATEGIES = {
    'scan': _scan_cover,
    'kdtree': _kdtree_cover,
}


def _greedy_selections(coords: np.ndarray, radius: float, method: str,
                       should_stop) -> List[Tuple[int, np.ndarray]]:
    if method not in _STRATEGIES:
        raise InvalidArgument(f'Unknown cover method {method!r}, expected one of {METHODS}')
    if len(coords) == 0:
        return []
    return _STRATEGIES[method](coords, radius, should_stop)


def _prepare(points, radius) -> Tuple[np.ndarray, float]:
    radius = validate_radius(radius)
    coords = as_coordinates(points)
    validate_coordinates(coords)
    return coords, radius


def _circle(coords: np.ndarray, index: int, radius: float) -> Circle:
    x, y = coords[index]
    return Circle(center=Point(float(x), float(y)), radius=radius)


def compute_cover(points: Sequence, radius: float,
                  method: str = 'scan',
                  should_stop: Optional[Callable[[], bool]] = None) -> List[Circle]:
    """
    Compute a greedy cover of points with circles of a fixed radius.

    Args:
        points: Sequence of Point, (x, y) pairs or an (n, 2) array
        radius: Circle radius, finite and positive
        method: 'scan' (direct evaluation) or 'kdtree' (spatial index);
            both select exactly the same circles
        should_stop: Optional callable polled before each circle is chosen

    Returns:
        Circles in selection order; empty for empty input

    Raises:
        InvalidArgument: bad radius, coordinates or method
        CoverCancelled: should_stop returned True
    """
    coords, radius = _prepare(points, radius)
    selections = _greedy_selections(coords, radius, method, should_stop)
    return [_circle(coords, center, radius) for center, _ in selections]


class CoveragePlanner:
    """
    Configurable front end to compute_cover returning a Cover with the
    per-circle assignments and run metadata.
    """

    DEFAULT_CONFIG = {
        'radius': None,   # Required, either here or per plan() call
        'method': 'scan',
    }

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize planner with configuration.

        Args:
            config: Configuration dict. Uses DEFAULT_CONFIG if None.
        """
        self.config = munchify({**self.DEFAULT_CONFIG, **(config or {})})

    def plan(self, points, radius: Optional[float] = None,
             should_stop: Optional[Callable[[], bool]] = None) -> Cover:
        radius = self.config.radius if radius is None else radius
        if radius is None:
            raise InvalidArgument('No radius configured')
        coords, radius = _prepare(points, radius)
        selections = _greedy_selections(coords, radius, self.config.method, should_stop)

        return Cover(
            circles=[_circle(coords, center, radius) for center, _ in selections],
            assignments=[covered for _, covered in selections],
            metadata={
                'num_points': len(coords),
                'num_circles': len(selections),
                'radius': radius,
                'method': self.config.method,
            }
        )

    @staticmethod
    def compare_methods(points, radius: float) -> Dict[str, Any]:
        """
        Run every method on the same input.

        Returns dict with circle count and elapsed time per method, and
        whether all methods produced the same circles.
        """
        results = {}
        covers = []
        for method in METHODS:
            start = time.time()
            cover = CoveragePlanner({'method': method}).plan(points, radius)
            results[method] = {
                'num_circles': len(cover),
                'elapsed': time.time() - start,
            }
            covers.append(cover.circles)
        results['agree'] = all(c == covers[0] for c in covers[1:])
        return results
