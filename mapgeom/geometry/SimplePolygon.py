from .errors import GeometryError
from .vector import vector, pairs, cross, distanceFromLineSegment
from .LineSegment import LineSegment
from .Polygon import Polygon
from .self_intersection import findSelfIntersection
from .intersections import loopIntersectsSegment
from .. import defs


class SimplePolygon(Polygon):
    """
    A polygon that is guaranteed to be simple, i.e. it doesn't intersect
    itself and encloses a non-zero area.
    
    The only way to get an instance is the constructor, it raises
    <GeometryError> if the vertex loop doesn't meet the conditions.
    """
    __slots__ = ()

    def __init__(self, vertexLoop):
        super().__init__(vertexLoop)
        vertexLoop = self._vertexLoop
        intersection = findSelfIntersection(vertexLoop)
        if intersection:
            raise GeometryError(
                "polygon is self-intersecting, the edges %s and %s cross each other" % intersection,
                vertexLoop
            )
        if not self.signedArea():
            raise GeometryError("polygon has zero area", vertexLoop)

    def signedArea(self):
        """
        Returns the area of the polygon, it's positive for the counter-clockwise
        order of the vertices and negative for the clockwise one
        """
        # the shoelace formula https://en.wikipedia.org/wiki/Shoelace_formula
        return 0.5 * sum(v1.x*v2.y - v2.x*v1.y for v1, v2 in pairs(self._vertexLoop))

    def area(self):
        return abs(self.signedArea())

    def isClockwise(self):
        return self.signedArea() < 0.

    def makeClockwise(self):
        return self if self.isClockwise() else self.reverse()

    def makeCounterclockwise(self):
        return self.reverse() if self.isClockwise() else self

    def isConvex(self):
        # all turns at the vertices must go in the same direction, straight angles are ignored
        verts = self.vertices()
        numVerts = len(verts)
        turns = set()
        for i in range(numVerts):
            c = cross(verts[i] - verts[i-1], verts[(i+1) % numVerts] - verts[i])
            if c:
                turns.add(c > 0.)
        return len(turns) == 1

    def isOnOutline(self, point):
        p = vector(point)
        return any(
            distanceFromLineSegment(p, v1, v2) <= defs.zero for v1, v2 in pairs(self._vertexLoop)
        )

    def _containsPoint(self, p):
        # a point on the outline is contained
        if self.isOnOutline(p):
            return True
        # ray casting in the direction of the x-axis
        inside = False
        for v1, v2 in pairs(self._vertexLoop):
            if min(v1.y, v2.y) < p.y <= max(v1.y, v2.y) and p.x <= max(v1.x, v2.x):
                # <v1.y> and <v2.y> differ here
                xints = (p.y - v1.y) * (v2.x - v1.x) / (v2.y - v1.y) + v1.x
                if v1.x == v2.x or p.x <= xints:
                    inside = not inside
        return inside

    def _containsSegment(self, p1, p2):
        if not self._containsPoint(p1) or not self._containsPoint(p2) or\
                loopIntersectsSegment(self._vertexLoop, p1, p2):
            return False
        d = p2 - p1
        lengthSquared = d.length_squared
        if not lengthSquared:
            return True
        # The segment may leave the polygon through a vertex of the outline or
        # run along an edge, neither is a true intersection. The vertices on
        # the segment split it into pieces, each piece is either completely
        # inside or completely outside.
        params = [0., 1.]
        for v in self.vertices():
            if distanceFromLineSegment(v, p1, p2) <= defs.zero:
                t = (v - p1).dot(d)/lengthSquared
                if 0. < t < 1.:
                    params.append(t)
        params.sort()
        return all(
            self._containsPoint(p1 + d*(t1 + t2)/2.) for t1, t2 in pairs(params)
        )

    def contains(self, other):
        """
        Checks if the point, LineSegment or Polygon <other> is located inside
        the polygon. The outline of the polygon belongs to the polygon.
        """
        if isinstance(other, Polygon):
            return all(self._containsPoint(v) for v in other.vertices()) and\
                not self.intersects(other)
        if isinstance(other, LineSegment):
            return self._containsSegment(other.p1, other.p2)
        return self._containsPoint(vector(other))
