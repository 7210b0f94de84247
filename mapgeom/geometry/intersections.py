# Pairwise intersection queries between segments and vertex loops.
#
# All queries consider only true intersections, see
# <vector.trueLineSegmentIntersection(..)>. A vertex loop is a sequence of
# vertices with the first vertex equal to the last one.

from .vector import vector, pairs, trueLineSegmentIntersection
from .LineSegment import LineSegment


def segmentIntersection(segment1, segment2):
    return trueLineSegmentIntersection(segment1.p1, segment1.p2, segment2.p1, segment2.p2)


def segmentsIntersect(segment1, segment2):
    return segmentIntersection(segment1, segment2) is not None


def loopIntersections(vertexLoop, p1, p2):
    """
    A Python generator of the true intersections of the segment (<p1>,<p2>)
    with the edges of <vertexLoop> in the edge order.
    
    Yields:
        A tuple (edge index, intersection point)
    """
    p1, p2 = vector(p1), vector(p2)
    for index, (v1, v2) in enumerate(pairs(vector(v) for v in vertexLoop)):
        intersection = trueLineSegmentIntersection(p1, p2, v1, v2)
        if intersection is not None:
            yield index, intersection


def loopIntersectsSegment(vertexLoop, p1, p2):
    return next(loopIntersections(vertexLoop, p1, p2), None) is not None


def loopIntersectionSegments(vertexLoop, p1, p2):
    return [
        LineSegment(vertexLoop[index], vertexLoop[index+1])\
            for index, _ in loopIntersections(vertexLoop, p1, p2)
    ]


def loopIntersectionPositions(vertexLoop, p1, p2):
    return [intersection for _, intersection in loopIntersections(vertexLoop, p1, p2)]


def loopsIntersect(vertexLoop1, vertexLoop2):
    # pairwise check of the edges, vertex loops of map features are small
    return any(
        loopIntersectsSegment(vertexLoop2, v1, v2) for v1, v2 in pairs(vertexLoop1)
    )


def loopIntersectionPositionsWithLoop(vertexLoop1, vertexLoop2):
    """
    Returns the true intersections between the edges of two vertex loops,
    ordered by the edges of <vertexLoop1>, then by the edges of <vertexLoop2>
    """
    return [
        intersection\
            for v1, v2 in pairs(vertexLoop1)\
                for intersection in loopIntersectionPositions(vertexLoop2, v1, v2)
    ]
