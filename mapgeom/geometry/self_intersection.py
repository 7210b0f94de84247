# Check of a vertex loop for self-intersections with a sweep line algorithm,
# based on the algorithm of Shamos and Hoey:
#
# Shamos, M. I., Hoey, D. (1976). Geometric intersection problems.
# 17th Annual Symposium on Foundations of Computer Science, pp. 208-215.
#
# The events (start and end points of the edges) are processed in the order
# of their position. The sweep line structure holds the edges crossing the
# sweep line. Only edges becoming neighbors in this structure are checked
# for an intersection, which results in O(n log n) instead of O(n²) for a
# pairwise check of all edges.
#
# Two edges that share only an endpoint never make the loop self-intersecting.
# This is on purpose, such loops are frequent in the OSM data.

import logging

from ..lib.SkipList import SkipList
from .vector import vector
from .LineSegment import LineSegment

logger = logging.getLogger("mapgeom.geometry.self_intersection")


class SweepEvent():
    __slots__ = ("segment", "start")

    def __init__(self, segment, start):
        # <segment> is canonical, see <canonicalSegment(..)>
        self.segment = segment
        # True for the start point of <segment>, False for its end point
        self.start = start

    def position(self):
        return self.segment.p1 if self.start else self.segment.p2

    def __repr__(self):
        return "%s %s" % ("start" if self.start else "end", self.segment)


def canonicalSegment(v1, v2):
    """
    Returns a segment where the first vertex is to the left of (or below)
    the second vertex
    """
    if (v1.x < v2.x) or (v1.x == v2.x and v1.y < v2.y):
        return LineSegment(v1, v2)
    return LineSegment(v2, v1)


def eventOrder(event):
    """
    Sort key of the events: x-coordinate of the event position, then its
    y-coordinate. Events at the same position keep their insertion order
    since Python's sort is stable.
    """
    position = event.position()
    return (position.x, position.y)


def activeSegmentOrder(segment):
    """
    Sort key of the segments in the sweep line structure: y-coordinate of the
    first endpoint, then its x-coordinate, then y-coordinate and x-coordinate
    of the second endpoint. Only identical segments have equal keys.
    """
    p1, p2 = segment.p1, segment.p2
    return (p1.y, p1.x, p2.y, p2.x)


def findSelfIntersection(vertexLoop):
    """
    Finds a pair of edges of <vertexLoop> that truly intersect each other.
    
    Args:
        vertexLoop: A sequence of vertices where the first and the last vertex are equal
    
    Returns:
        A tuple of two instances of <LineSegment> (the edges in the canonical
        form of <canonicalSegment(..)>) or None if the loop doesn't intersect itself
    """
    vertexLoop = [vector(v) for v in vertexLoop]
    # we have n-1 edges as the first and the last vertex are the same
    numSegments = len(vertexLoop) - 1

    events = []
    for i in range(numSegments):
        segment = canonicalSegment(vertexLoop[i], vertexLoop[i+1])
        events.append(SweepEvent(segment, True))
        events.append(SweepEvent(segment, False))
    events.sort(key=eventOrder)

    sweepLine = SkipList()

    for event in events:
        segment = event.segment
        key = activeSegmentOrder(segment)
        lower, higher = sweepLine.neighbors(key)

        if event.start:
            sweepLine.insert(key, segment)
            for neighbor in (lower, higher):
                if neighbor is not None and neighbor.data.intersects(segment):
                    logger.debug("Edges %s and %s intersect", neighbor.data, segment)
                    return neighbor.data, segment
        else:
            sweepLine.delete(key)
            if lower is None or higher is None:
                continue
            # the former neighbors of <segment> become neighbors
            if lower.data.intersects(higher.data):
                logger.debug("Edges %s and %s intersect", lower.data, higher.data)
                return lower.data, higher.data

    return None


def isSelfIntersecting(vertexLoop):
    return findSelfIntersection(vertexLoop) is not None
