"""
Object set reader: pulls horizontal positions out of object-set JSON.

Object positions are stored as [x, z, y] with z the vertical axis.
"""

import json
import numbers
from pathlib import Path
from typing import List, Dict, Any

from .geometry import Point


class ObjectSetError(ValueError):
    """The object-set document is malformed."""


def load_object_set(path) -> Dict[str, Any]:
    """
    Read an object-set JSON file.

    Args:
        path: Path to a JSON document with an "Objects" array

    Returns:
        The parsed document
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Object set not found: {path}")

    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except UnicodeDecodeError as e:
        raise ObjectSetError(f"{path} is not UTF-8 text: {e}")
    except json.JSONDecodeError as e:
        raise ObjectSetError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict) or not isinstance(data.get('Objects'), list):
        raise ObjectSetError(f'{path} does not contain an "Objects" array')
    return data


def _is_number(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool)


def project_positions(objects: List[Dict[str, Any]]) -> List[Point]:
    """Project each object's [x, z, y] position onto the (x, y) plane."""
    points = []
    for i, obj in enumerate(objects):
        name = obj.get('name', f'#{i}') if isinstance(obj, dict) else f'#{i}'
        pos = obj.get('pos') if isinstance(obj, dict) else None
        if not isinstance(pos, list) or len(pos) < 3 or not all(_is_number(v) for v in pos[:3]):
            raise ObjectSetError(f'Object "{name}" does not have a valid pos array')
        x, _, y = pos[:3]
        try:
            points.append(Point(float(x), float(y)))
        except OverflowError:
            raise ObjectSetError(f'Object "{name}" has a position out of range')
    return points


def extract_points(path) -> List[Point]:
    return project_positions(load_object_set(path)['Objects'])
