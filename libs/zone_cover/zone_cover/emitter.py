"""
SQL rendering of zone circles.
"""

import re
from typing import List

from .geometry import Circle, Cover

DEFAULT_TABLE = 'dayz_zones'

_NUMERIC_SID = re.compile(r'-?[0-9]+')
_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_.]*$')


def format_number(value) -> str:
    """Shortest text for a coordinate; integral values drop the '.0'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def quote(text: str) -> str:
    return "'" + str(text).replace("'", "''") + "'"


def zone_insert(circle: Circle, zone_type: str, sid, table: str = DEFAULT_TABLE) -> str:
    if not zone_type:
        raise ValueError('Zone type must not be empty')
    sid = str(sid)
    if not sid:
        raise ValueError('SID must not be empty')
    if not _IDENTIFIER.match(table):
        raise ValueError(f'Invalid table name: {table!r}')

    sid_sql = sid if _NUMERIC_SID.fullmatch(sid) else quote(sid)
    return (f"insert into {table} (ztype, zcoordsx, zcoordsy, zradius, sid)\n"
            f"values ({quote(zone_type)}, {format_number(circle.center.x)}, "
            f"{format_number(circle.center.y)}, {format_number(circle.radius)}, {sid_sql});")


def zone_inserts(cover, zone_type: str, sid, table: str = DEFAULT_TABLE) -> List[str]:
    """Render every circle of a Cover (or any circle iterable) in order."""
    circles = cover.circles if isinstance(cover, Cover) else cover
    return [zone_insert(c, zone_type, sid, table) for c in circles]
