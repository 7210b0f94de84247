import pytest

from . import makeWaySegment, makeArea, rectangle
from ..element import EMPTY_OVERLAPS
from ..overlaps import MapOverlapType, MapOverlap, MapIntersectionWW, MapOverlapWA
from ..topology import registerOverlap


def test_no_overlaps_share_the_empty_collection():
    segment1 = makeWaySegment((0., 0.), (1., 1.))
    segment2 = makeWaySegment((0., 1.), (1., 0.))
    assert segment1.getOverlaps() is EMPTY_OVERLAPS
    assert segment2.getOverlaps() is segment1.getOverlaps()
    assert list(segment1.getIntersectionsWW()) == []


def test_overlaps_keep_insertion_order():
    way = makeWaySegment((0., 0.), (2., 2.))
    others = [makeWaySegment((0., 2.*i), (2., 2. - 2.*i)) for i in range(3)]
    overlaps = [MapIntersectionWW(way, other, (1., 1.)) for other in others]
    for overlap in overlaps:
        way.addOverlap(overlap)
    assert way.getOverlaps() == overlaps
    assert way.getOverlaps() is not EMPTY_OVERLAPS
    # the shared empty collection isn't modified
    assert EMPTY_OVERLAPS == ()


def test_register_adds_to_both_participants():
    segment1 = makeWaySegment((0., 0.), (1., 1.))
    segment2 = makeWaySegment((0., 1.), (1., 0.))
    overlap = MapIntersectionWW(segment1, segment2, (0.5, 0.5))
    registerOverlap(overlap)
    assert segment1.getOverlaps() == [overlap]
    assert segment2.getOverlaps() == [overlap]


def test_foreign_overlap_is_rejected():
    segment1 = makeWaySegment((0., 0.), (1., 1.))
    segment2 = makeWaySegment((0., 1.), (1., 0.))
    segment3 = makeWaySegment((5., 5.), (6., 6.))
    with pytest.raises(AssertionError):
        segment3.addOverlap(MapIntersectionWW(segment1, segment2, (0.5, 0.5)))


def test_overlap_with_itself_is_rejected():
    segment = makeWaySegment((0., 0.), (1., 1.))
    with pytest.raises(AssertionError):
        MapOverlap(segment, segment, MapOverlapType.intersect)


def test_get_other():
    way = makeWaySegment((0., 0.), (4., 4.))
    area = makeArea(rectangle(0., 0., 4., 4.))
    overlap = MapOverlapWA(way, area, MapOverlapType.contain)
    assert overlap.getOther(way) is area
    assert overlap.getOther(area) is way
    with pytest.raises(AssertionError):
        overlap.getOther(makeWaySegment((0., 0.), (1., 1.)))


def test_intersections_of_kind():
    way = makeWaySegment((0., 0.), (4., 4.))
    other = makeWaySegment((0., 4.), (4., 0.))
    area = makeArea(rectangle(1., 1., 3., 3.))
    intersection = MapIntersectionWW(way, other, (2., 2.))
    overlapWA = MapOverlapWA(way, area, MapOverlapType.intersect, ((1., 1.), (3., 3.)))
    registerOverlap(intersection)
    registerOverlap(overlapWA)
    intersections = way.getIntersectionsOfKind(MapIntersectionWW)
    # a lazy Python generator
    assert iter(intersections) is intersections
    assert list(intersections) == [intersection]
    assert list(way.getIntersectionsWW()) == [intersection]
    assert list(way.getIntersectionsOfKind(MapOverlapWA)) == [overlapWA]
    assert list(way.getIntersectionsOfKind(MapOverlap)) == [intersection, overlapWA]
    assert area.getOverlaps() == [overlapWA]


def test_layer():
    assert makeWaySegment((0., 0.), (1., 1.)).getLayer() == 0
    assert makeWaySegment((0., 0.), (1., 1.), {"layer": "-1"}).getLayer() == -1
    assert makeWaySegment((0., 0.), (1., 1.), {"layer": "2"}).getLayer() == 2
    assert makeWaySegment((0., 0.), (1., 1.), {"layer": "high"}).getLayer() == 0
