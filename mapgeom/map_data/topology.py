"""
This file is part of blender-osm (OpenStreetMap importer for Blender).
Copyright (C) 2014-2018 Vladimir Elistratov
prokitektura+support@gmail.com

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""

import logging

from ..geometry.intersections import segmentIntersection
from .way_segment import MapWaySegment
from .area import MapArea
from .overlaps import MapOverlapType, MapIntersectionWW, MapOverlapWA, MapOverlapAA

logger = logging.getLogger("mapgeom.map_data.topology")


def _sharedSegments(ring, lineSegment):
    # the edges of <ring> that coincide with <lineSegment> in either direction
    reversedSegment = lineSegment.reverse()
    return [
        edge for edge in ring.segments() if edge == lineSegment or edge == reversedSegment
    ]


def _overlapWW(segment1, segment2):
    pos = segmentIntersection(segment1.getLineSegment(), segment2.getLineSegment())
    # way segments sharing a node are connected, they don't intersect
    if pos is None:
        return None
    return MapIntersectionWW(segment1, segment2, pos)


def _overlapWA(waySegment, area):
    lineSegment = waySegment.getLineSegment()
    intersectionPositions = []
    sharedSegments = []
    for ring in area.getRings():
        intersectionPositions.extend(ring.intersectionPositions(lineSegment))
        sharedSegments.extend(_sharedSegments(ring, lineSegment))

    if intersectionPositions:
        overlapType = MapOverlapType.intersect
    elif sharedSegments:
        overlapType = MapOverlapType.shareSegment
    elif area.contains(lineSegment):
        overlapType = MapOverlapType.contain
    else:
        return None
    return MapOverlapWA(waySegment, area, overlapType, intersectionPositions, sharedSegments)


def _overlapAA(area1, area2):
    if any(ring.intersects(area2.outer) for ring in area1.getRings()) or\
            any(ring.intersects(area1.outer) for ring in area2.holes):
        overlapType = MapOverlapType.intersect
    elif any(_sharedSegments(area2.outer, edge) for edge in area1.outer.segments()):
        overlapType = MapOverlapType.shareSegment
    elif area1.outer.contains(area2.outer) or area2.outer.contains(area1.outer):
        overlapType = MapOverlapType.contain
    else:
        return None
    return MapOverlapAA(area1, area2, overlapType)


def overlapBetween(e1, e2):
    """
    Checks if the map elements <e1> and <e2> overlap each other in the ground plane.
    The pair is selected by the caller, the function doesn't search for candidates.
    
    Returns:
        An instance of <MapIntersectionWW>, <MapOverlapWA> or <MapOverlapAA>,
        None if there is no overlap. A way segment is always the first participant
        of <MapOverlapWA>.
    """
    if not e1.getBoundingBox().intersects(e2.getBoundingBox()):
        return None
    if isinstance(e1, MapWaySegment):
        if isinstance(e2, MapWaySegment):
            return _overlapWW(e1, e2)
        if isinstance(e2, MapArea):
            return _overlapWA(e1, e2)
    elif isinstance(e1, MapArea):
        if isinstance(e2, MapWaySegment):
            return _overlapWA(e2, e1)
        if isinstance(e2, MapArea):
            return _overlapAA(e1, e2)
    raise TypeError("Unexpected map elements: %s, %s" % (type(e1).__name__, type(e2).__name__))


def registerOverlap(overlap):
    """
    Adds <overlap> to the overlaps of both participants
    """
    overlap.e1.addOverlap(overlap)
    overlap.e2.addOverlap(overlap)
    logger.debug("Registered %s", overlap)


def addOverlapBetween(e1, e2):
    """
    Registers the overlap between <e1> and <e2> if there is one.
    
    Returns:
        The registered overlap or None
    """
    overlap = overlapBetween(e1, e2)
    if overlap is not None:
        registerOverlap(overlap)
    return overlap
