import logging

import numpy as np

from .errors import GeometryError
from .vector import vector, vectorXY, pairs, distancesFromLineSegments
from .LineSegment import LineSegment
from .BoundingBox import BoundingBox
from .Triangle import Triangle
from .Polygon3d import Polygon3d
from .self_intersection import isSelfIntersecting
from .intersections import loopsIntersect, loopIntersectsSegment,\
    loopIntersectionSegments, loopIntersectionPositions

logger = logging.getLogger("mapgeom.geometry.polygon")


def _segmentPoints(p1, p2):
    # <p1> is either a LineSegment or the first point of a segment
    if p2 is None:
        return p1.p1, p1.p2
    return vector(p1), vector(p2)


class Polygon():
    """
    A polygon in the ground plane defined by a vertex loop, i.e. a sequence of
    vertices where the first and the last vertex are equal.
    
    A polygon isn't necessarily simple, it may intersect itself. See
    <asSimplePolygon()> to get a polygon that is guaranteed to be simple.
    Polygons are immutable, all derived polygons are new instances.
    """
    __slots__ = ("_vertexLoop",)

    def __init__(self, vertexLoop):
        """
        Args:
            vertexLoop: A sequence of vertices (mathutils.Vector or tuples (x, y))
                where the first and the last vertex must be equal
        """
        vertexLoop = tuple(vector(v) for v in vertexLoop)
        Polygon.assertLoopProperty(vertexLoop)
        self._vertexLoop = vertexLoop

    @staticmethod
    def assertLoopProperty(vertexLoop):
        """
        Checks that the first and the last vertex of <vertexLoop> are equal and
        that there are at least 3 distinct vertices. A violation is a programming
        error, therefore <GeometryError> isn't used.
        """
        assert len(vertexLoop) >= 4,\
            "a polygon needs at least 3 vertices\nPolygon vertices: %s" % list(vertexLoop)
        assert vertexLoop[0] == vertexLoop[-1],\
            "first and last vertex must be equal\nPolygon vertices: %s" % list(vertexLoop)
        assert len(set(vertexLoop)) >= 3,\
            "a polygon needs at least 3 distinct vertices\nPolygon vertices: %s" % list(vertexLoop)

    def vertexCount(self):
        """
        Returns the number of vertices. The duplicated first/last vertex is
        not counted twice.
        """
        return len(self._vertexLoop) - 1

    def __len__(self):
        return len(self._vertexLoop) - 1

    def vertices(self):
        """
        Returns the vertices without the duplication of the first/last vertex
        """
        return self._vertexLoop[:-1]

    def vertexLoop(self):
        """
        Returns the vertices, the first and the last vertex are equal
        """
        return self._vertexLoop

    def vertexAt(self, index):
        assert 0 <= index < self.vertexCount(), "vertex index %s out of range" % index
        return self._vertexLoop[index]

    def vertexAfter(self, index):
        """
        Returns the successor of the vertex at <index>. The successor of the
        last vertex is the first vertex.
        """
        assert 0 <= index < self.vertexCount(), "vertex index %s out of range" % index
        return self.vertexAt((index + 1) % self.vertexCount())

    def vertexBefore(self, index):
        """
        Returns the predecessor of the vertex at <index>. The predecessor of the
        first vertex is the last vertex.
        """
        assert 0 <= index < self.vertexCount(), "vertex index %s out of range" % index
        numVerts = self.vertexCount()
        return self.vertexAt((index + numVerts - 1) % numVerts)

    def segments(self):
        return [LineSegment(v1, v2) for v1, v2 in pairs(self._vertexLoop)]

    def closestSegment(self, point):
        """
        Returns the edge with the minimum distance to <point>. If several edges
        have the same distance, the first one in the vertex order is returned.
        """
        loop = np.array([(v.x, v.y) for v in self._vertexLoop])
        distances = distancesFromLineSegments(vector(point), loop[:-1], loop[1:])
        # <argmin> returns the first occurrence of the minimum
        index = int(np.argmin(distances))
        return LineSegment(self._vertexLoop[index], self._vertexLoop[index+1])

    def intersects(self, p1, p2=None):
        """
        Checks if there is a true intersection between an edge of the polygon and
        - the segment (<p1>,<p2>),
        - the LineSegment <p1> if <p2> isn't given,
        - an edge of the Polygon <p1> if <p2> isn't given.
        """
        if p2 is None and isinstance(p1, Polygon):
            if not self.getBoundingBox().intersects(p1.getBoundingBox()):
                return False
            return loopsIntersect(self._vertexLoop, p1._vertexLoop)
        p1, p2 = _segmentPoints(p1, p2)
        return loopIntersectsSegment(self._vertexLoop, p1, p2)

    def intersectionSegments(self, p1, p2=None):
        """
        Returns the edges having a true intersection with the segment (<p1>,<p2>)
        or with the LineSegment <p1>
        """
        p1, p2 = _segmentPoints(p1, p2)
        return loopIntersectionSegments(self._vertexLoop, p1, p2)

    def intersectionPositions(self, p1, p2=None):
        """
        Returns the points of the true intersections with the segment (<p1>,<p2>)
        or with the LineSegment <p1> in the edge order
        """
        p1, p2 = _segmentPoints(p1, p2)
        return loopIntersectionPositions(self._vertexLoop, p1, p2)

    def isSelfIntersecting(self):
        return isSelfIntersecting(self._vertexLoop)

    def isSimple(self):
        try:
            self.asSimplePolygon()
            return True
        except GeometryError as e:
            logger.debug("The polygon isn't simple: %s", e)
            return False

    def asSimplePolygon(self):
        """
        Returns a SimplePolygon with the vertices of this polygon.
        
        Raises:
            GeometryError: if the polygon isn't simple
        """
        from .SimplePolygon import SimplePolygon
        if isinstance(self, SimplePolygon):
            return self
        return SimplePolygon(self._vertexLoop)

    def asTriangle(self):
        """
        Returns a triangle with the vertices of this polygon.
        
        Raises:
            GeometryError: if the polygon doesn't have exactly 3 vertices
        """
        if len(self._vertexLoop) != 4:
            raise GeometryError(
                "attempted creation of triangle from polygon with vertex loop of size %s" % len(self._vertexLoop),
                self._vertexLoop
            )
        return Triangle(*self._vertexLoop[:3])

    def lift(self, elevation):
        return Polygon3d(self._vertexLoop, elevation)

    def reverse(self):
        return self.__class__(self._vertexLoop[::-1])

    def center(self):
        """
        Returns the average of the vertices. It isn't necessarily located
        inside the polygon.
        """
        numVerts = self.vertexCount()
        x = y = 0.
        for v in self.vertices():
            # division per vertex keeps the sums small
            x += v.x/numVerts
            y += v.y/numVerts
        return vectorXY(x, y)

    def outlineLength(self):
        """
        Returns the length of the polygon's outline, i.e. the sum of the edge
        lengths (not the number of vertices)
        """
        return sum((v2 - v1).length for v1, v2 in pairs(self._vertexLoop))

    def isEquivalentTo(self, other):
        """
        Checks if <other> has the same vertices in the same order,
        possibly starting with a different vertex
        """
        if len(self._vertexLoop) != len(other._vertexLoop):
            return False

        ownVerts = self.vertices()
        otherVerts = other.vertices()
        numVerts = len(ownVerts)

        for offset in range(numVerts):
            if all(otherVerts[i] == ownVerts[(i + offset) % numVerts] for i in range(numVerts)):
                return True
        return False

    def getBoundingBox(self):
        return BoundingBox.fromPoints(self.vertices())

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._vertexLoop == other._vertexLoop

    def __hash__(self):
        return hash(self._vertexLoop)

    def __repr__(self):
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join("(%s, %s)" % (v.x, v.y) for v in self._vertexLoop)
        )

    def plot(self, color='k'):
        import matplotlib.pyplot as plt
        plt.plot(
            [v.x for v in self._vertexLoop],
            [v.y for v in self._vertexLoop],
            color
        )
