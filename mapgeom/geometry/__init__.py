from .errors import GeometryError
from .vector import vector, vectorXY, distance, orientation, vectorsClose,\
    lineSegmentIntersection, trueLineSegmentIntersection, distanceFromLineSegment
from .LineSegment import LineSegment
from .BoundingBox import BoundingBox
from .Triangle import Triangle
from .Polygon3d import Polygon3d
from .Polygon import Polygon
from .SimplePolygon import SimplePolygon
from .self_intersection import isSelfIntersecting, findSelfIntersection
