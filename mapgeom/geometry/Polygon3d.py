from mathutils import Vector


class Polygon3d():
    """
    A vertex loop lifted to the constant <elevation>. The first and the last
    vertex are equal.
    """
    __slots__ = ("_vertexLoop", "elevation")

    def __init__(self, vertexLoop, elevation):
        self.elevation = elevation
        self._vertexLoop = tuple(Vector((v[0], v[1], elevation)).freeze() for v in vertexLoop)

    def vertexCount(self):
        return len(self._vertexLoop) - 1

    def vertices(self):
        return self._vertexLoop[:-1]

    def vertexLoop(self):
        return self._vertexLoop
