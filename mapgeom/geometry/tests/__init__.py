"""
Helpers for the tests of the planar geometry. The file is also needed for the
relative imports in the tests.
"""

from ..Polygon import Polygon


square = ((0., 0.), (2., 0.), (2., 2.), (0., 2.))

bowtie = ((0., 0.), (2., 2.), (2., 0.), (0., 2.))

# two loops touching each other at the vertex (2, 2)
figureEight = ((0., 0.), (2., 2.), (4., 0.), (4., 4.), (2., 2.), (0., 4.))

lShape = ((0., 0.), (4., 0.), (4., 2.), (2., 2.), (2., 4.), (0., 4.))

# the top edge has a triangular notch with the vertices (4, 4), (3, 2), (2, 4)
notch = ((0., 0.), (10., 0.), (10., 4.), (4., 4.), (3., 2.), (2., 4.), (0., 4.))


def loop(verts):
    # closes the vertex loop by repeating the first vertex
    return tuple(verts) + (verts[0],)


def makePolygon(verts, cls=Polygon):
    return cls(loop(verts))
