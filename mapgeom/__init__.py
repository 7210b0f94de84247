"""
Planar geometry and topology kernel for map features: polygons and their
predicates, a sweep-line check for self-intersections, intersection queries
and the bookkeeping of overlaps between map elements.
"""

from .geometry import GeometryError, LineSegment, BoundingBox, Triangle,\
    Polygon, SimplePolygon, Polygon3d, vector, vectorXY, isSelfIntersecting
from .map_data import MapNode, MapWaySegment, MapArea, MapOverlapType,\
    MapIntersectionWW, MapOverlapWA, MapOverlapAA, addOverlapBetween
