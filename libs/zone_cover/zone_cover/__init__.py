"""
Zone Cover Library

Covers a set of 2-D points with circles of a fixed radius using a greedy
maximum-coverage search whose centres are always data points.
"""

from .geometry import Point, Circle, Cover
from .planner import compute_cover, CoveragePlanner, InvalidArgument, CoverCancelled
from .extractor import extract_points, ObjectSetError
from .emitter import zone_insert, zone_inserts

__all__ = [
    'Point',
    'Circle',
    'Cover',
    'compute_cover',
    'CoveragePlanner',
    'InvalidArgument',
    'CoverCancelled',
    'extract_points',
    'ObjectSetError',
    'zone_insert',
    'zone_inserts',
]

__version__ = '1.0.0'
