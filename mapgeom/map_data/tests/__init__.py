"""
Helpers for the tests of the map data. The file is also needed for the
relative imports in the tests.
"""

from ..node import MapNode
from ..way_segment import MapWaySegment
from ..area import MapArea


def makeWaySegment(p1, p2, tags=None):
    return MapWaySegment(tags, MapNode(1, p1), MapNode(2, p2))


def makeArea(outline, holes=(), tags=None, id=1):
    # the outline and the holes are given without the closing vertex
    return MapArea(
        id,
        tags,
        tuple(outline) + (outline[0],),
        [tuple(hole) + (hole[0],) for hole in holes]
    )


def rectangle(x1, y1, x2, y2):
    return ((x1, y1), (x2, y1), (x2, y2), (x1, y2))
