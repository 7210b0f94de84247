from .vector import vector, vectorXY, cross


class Triangle():
    __slots__ = ("v1", "v2", "v3")

    def __init__(self, v1, v2, v3):
        self.v1 = vector(v1)
        self.v2 = vector(v2)
        self.v3 = vector(v3)

    def vertices(self):
        return (self.v1, self.v2, self.v3)

    def center(self):
        return vectorXY(
            (self.v1.x + self.v2.x + self.v3.x)/3.,
            (self.v1.y + self.v2.y + self.v3.y)/3.
        )

    def signedArea(self):
        # positive for the counter-clockwise order of the vertices
        return 0.5*cross(self.v2 - self.v1, self.v3 - self.v1)

    def area(self):
        return abs(self.signedArea())

    def isClockwise(self):
        return self.signedArea() < 0.

    def asPolygon(self):
        from .Polygon import Polygon
        return Polygon((self.v1, self.v2, self.v3, self.v1))

    def __eq__(self, other):
        if not isinstance(other, Triangle):
            return NotImplemented
        return self.vertices() == other.vertices()

    def __hash__(self):
        return hash(self.vertices())

    def __repr__(self):
        return "Triangle(%s)" % ", ".join("(%s, %s)" % (v.x, v.y) for v in self.vertices())
