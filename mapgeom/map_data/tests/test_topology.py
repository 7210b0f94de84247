import pytest
from mathutils import Vector

from . import makeWaySegment, makeArea, rectangle
from ...geometry.errors import GeometryError
from ...geometry.LineSegment import LineSegment
from ...geometry.SimplePolygon import SimplePolygon
from ..overlaps import MapOverlapType, MapIntersectionWW, MapOverlapWA, MapOverlapAA
from ..topology import overlapBetween, addOverlapBetween


#
# way segment and way segment
#

def test_crossing_way_segments():
    segment1 = makeWaySegment((0., 0.), (2., 2.))
    segment2 = makeWaySegment((0., 2.), (2., 0.))
    overlap = overlapBetween(segment1, segment2)
    assert isinstance(overlap, MapIntersectionWW)
    assert overlap.type == MapOverlapType.intersect
    assert overlap.pos == Vector((1., 1.))
    assert (overlap.e1, overlap.e2) == (segment1, segment2)


def test_connected_way_segments_dont_intersect():
    segment1 = makeWaySegment((0., 0.), (1., 1.))
    segment2 = makeWaySegment((1., 1.), (2., 0.))
    assert overlapBetween(segment1, segment2) is None


def test_parallel_way_segments_dont_intersect():
    assert overlapBetween(
        makeWaySegment((0., 0.), (2., 0.)),
        makeWaySegment((1., 0.), (3., 0.))
    ) is None


def test_distant_way_segments():
    assert overlapBetween(
        makeWaySegment((0., 0.), (1., 1.)),
        makeWaySegment((5., 5.), (6., 4.))
    ) is None


def test_add_overlap_between():
    segment1 = makeWaySegment((0., 0.), (2., 2.))
    segment2 = makeWaySegment((0., 2.), (2., 0.))
    overlap = addOverlapBetween(segment1, segment2)
    assert segment1.getOverlaps() == [overlap]
    assert segment2.getOverlaps() == [overlap]
    segment3 = makeWaySegment((5., 5.), (6., 6.))
    assert addOverlapBetween(segment1, segment3) is None
    assert segment1.getOverlaps() == [overlap]


#
# way segment and area
#

def test_way_segment_crossing_area():
    way = makeWaySegment((2., 2.), (6., 2.))
    area = makeArea(rectangle(0., 0., 4., 4.))
    overlap = overlapBetween(way, area)
    assert isinstance(overlap, MapOverlapWA)
    assert overlap.type == MapOverlapType.intersect
    assert overlap.intersectionPositions == (Vector((4., 2.)),)
    assert overlap.sharedSegments == ()
    # the way segment is always the first participant
    overlap = overlapBetween(area, way)
    assert overlap.e1 is way and overlap.e2 is area


def test_way_segment_along_area_outline():
    area = makeArea(rectangle(0., 0., 4., 4.))
    for p1, p2 in (((0., 0.), (4., 0.)), ((4., 0.), (0., 0.))):
        overlap = overlapBetween(makeWaySegment(p1, p2), area)
        assert overlap.type == MapOverlapType.shareSegment
        assert overlap.intersectionPositions == ()
        assert overlap.sharedSegments == (LineSegment((0., 0.), (4., 0.)),)


def test_way_segment_inside_area():
    overlap = overlapBetween(makeWaySegment((1., 1.), (3., 3.)), makeArea(rectangle(0., 0., 4., 4.)))
    assert overlap.type == MapOverlapType.contain


def test_way_segment_outside_area():
    assert overlapBetween(
        makeWaySegment((5., 1.), (5., 3.)),
        makeArea(rectangle(0., 0., 4., 4.))
    ) is None


def test_way_segment_through_notch_of_area():
    # the way touches the outline at (2, 4) and (4, 4) and runs outside in between
    area = makeArea(((0., 0.), (10., 0.), (10., 4.), (4., 4.), (3., 2.), (2., 4.), (0., 4.)))
    way = makeWaySegment((1., 4.), (9., 4.))
    assert not area.contains(way.getLineSegment())
    assert overlapBetween(way, area) is None
    overlap = overlapBetween(makeWaySegment((1., 2.), (9., 2.)), area)
    assert overlap.type == MapOverlapType.contain


def test_way_segment_in_hole():
    area = makeArea(rectangle(0., 0., 10., 10.), (rectangle(3., 3., 7., 7.),))
    assert overlapBetween(makeWaySegment((4., 5.), (6., 5.)), area) is None
    overlap = overlapBetween(makeWaySegment((1., 5.), (5., 5.)), area)
    assert overlap.type == MapOverlapType.intersect
    assert overlap.intersectionPositions == (Vector((3., 5.)),)


#
# area and area
#

def test_area_inside_area():
    area1 = makeArea(rectangle(0., 0., 10., 10.), id=1)
    area2 = makeArea(rectangle(2., 2., 4., 4.), id=2)
    for e1, e2 in ((area1, area2), (area2, area1)):
        overlap = overlapBetween(e1, e2)
        assert isinstance(overlap, MapOverlapAA)
        assert overlap.type == MapOverlapType.contain


def test_crossing_areas():
    overlap = overlapBetween(
        makeArea(rectangle(0., 0., 4., 4.), id=1),
        makeArea(rectangle(2., 2., 6., 6.), id=2)
    )
    assert overlap.type == MapOverlapType.intersect


def test_areas_sharing_an_edge():
    overlap = overlapBetween(
        makeArea(rectangle(0., 0., 2., 2.), id=1),
        makeArea(rectangle(2., 0., 4., 2.), id=2)
    )
    assert overlap.type == MapOverlapType.shareSegment


def test_disjoint_areas():
    assert overlapBetween(
        makeArea(rectangle(0., 0., 2., 2.), id=1),
        makeArea(rectangle(5., 5., 6., 6.), id=2)
    ) is None


def test_area_outline_must_be_simple():
    with pytest.raises(GeometryError):
        makeArea(((0., 0.), (2., 2.), (2., 0.), (0., 2.)))
    area = makeArea(rectangle(0., 0., 1., 1.), (rectangle(0.2, 0.2, 0.4, 0.4),))
    assert all(isinstance(ring, SimplePolygon) for ring in area.getRings())
    assert len(area.getHoles()) == 1
