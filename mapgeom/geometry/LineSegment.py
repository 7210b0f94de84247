from .vector import vector, trueLineSegmentIntersection, distanceFromLineSegment
from .BoundingBox import BoundingBox


class LineSegment():
    """
    A directed line segment from <p1> to <p2>
    
    The direction is kept, but intersections are computed for the segment as
    an undirected geometric object.
    """
    __slots__ = ("p1", "p2")

    def __init__(self, p1, p2):
        self.p1 = vector(p1)
        self.p2 = vector(p2)

    def direction(self):
        return self.p2 - self.p1

    def length(self):
        return (self.p2 - self.p1).length

    def center(self):
        return ((self.p1 + self.p2)/2.).freeze()

    def reverse(self):
        return LineSegment(self.p2, self.p1)

    def canonical(self):
        """
        Returns the segment with the endpoints sorted lexicographically
        by (x, then y)
        """
        p1, p2 = self.p1, self.p2
        if (p1.x, p1.y) <= (p2.x, p2.y):
            return self
        return LineSegment(p2, p1)

    def intersects(self, p1, p2=None):
        """
        Checks for a true intersection with the segment (<p1>,<p2>).
        A LineSegment can be given instead of the two points.
        """
        return self.intersection(p1, p2) is not None

    def intersection(self, p1, p2=None):
        """
        Returns the point of a true intersection with the segment (<p1>,<p2>) or None.
        A LineSegment can be given instead of the two points.
        """
        if p2 is None:
            p1, p2 = p1.p1, p1.p2
        return trueLineSegmentIntersection(self.p1, self.p2, vector(p1), vector(p2))

    def distanceTo(self, point):
        return distanceFromLineSegment(vector(point), self.p1, self.p2)

    def getBoundingBox(self):
        return BoundingBox.fromPoints((self.p1, self.p2))

    def __eq__(self, other):
        if not isinstance(other, LineSegment):
            return NotImplemented
        return self.p1 == other.p1 and self.p2 == other.p2

    def __hash__(self):
        return hash((self.p1, self.p2))

    def __iter__(self):
        # allows <p1, p2 = segment>
        return iter((self.p1, self.p2))

    def __repr__(self):
        return '[(%s, %s) -> (%s, %s)]' % (self.p1.x, self.p1.y, self.p2.x, self.p2.y)

    def plot(self, color='k'):
        import matplotlib.pyplot as plt
        v1, v2 = self.p1, self.p2
        plt.plot([v1.x,v2.x],[v1.y,v2.y],color)
        plt.plot(v1.x,v1.y,'bo',markersize=3)
        plt.plot(v2.x,v2.y,'ro',markersize=3)
