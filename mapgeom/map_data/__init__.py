from .element import MapElement, EMPTY_OVERLAPS
from .node import MapNode
from .way_segment import MapWaySegment
from .area import MapArea
from .overlaps import MapOverlapType, MapOverlap, MapIntersectionWW, MapOverlapWA, MapOverlapAA
from .topology import overlapBetween, registerOverlap, addOverlapBetween
