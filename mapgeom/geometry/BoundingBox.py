# Axis aligned bounding box in the ground plane.
class BoundingBox():
    __slots__ = ("min_x", "min_y", "max_x", "max_y")

    def __init__(self, min_x, min_y, max_x, max_y):
        self.min_x: float = min_x
        self.min_y: float = min_y
        self.max_x: float = max_x
        self.max_y: float = max_y

    @staticmethod
    def inverted():
        # an empty box, any union with it gives the other box
        return BoundingBox(float('inf'), float('inf'), -float('inf'), -float('inf'))

    @staticmethod
    def fromPoints(points):
        box = BoundingBox.inverted()
        for p in points:
            box.min_x = min(box.min_x, p[0])
            box.min_y = min(box.min_y, p[1])
            box.max_x = max(box.max_x, p[0])
            box.max_y = max(box.max_y, p[1])
        return box

    def isEmpty(self):
        return self.min_x > self.max_x or self.min_y > self.max_y

    def union(self, other):
        return BoundingBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y)
        )

    def expand(self, val):
        return BoundingBox(self.min_x - val, self.min_y - val, self.max_x + val, self.max_y + val)

    def intersects(self, other):
        # touching boxes intersect
        return other.max_x >= self.min_x and other.min_x <= self.max_x and\
            other.max_y >= self.min_y and other.min_y <= self.max_y

    def contains(self, p):
        return self.min_x <= p[0] <= self.max_x and self.min_y <= p[1] <= self.max_y

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return (self.min_x, self.min_y, self.max_x, self.max_y) ==\
            (other.min_x, other.min_y, other.max_x, other.max_y)

    __hash__ = None

    def __repr__(self):
        return 'BoundingBox(%s, %s, %s, %s)' % (self.min_x, self.min_y, self.max_x, self.max_y)
