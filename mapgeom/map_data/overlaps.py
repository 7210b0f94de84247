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


class MapOverlapType:
    # the outlines of the map elements intersect each other
    intersect = 1
    # one of the map elements is located inside the other one
    contain = 2
    # the map elements share a segment of their outlines
    shareSegment = 3


class MapOverlap:
    """
    An overlap between two map elements in the ground plane. The overlap is
    added to the overlaps of both map elements.
    
    Some attributes:
        e1 (map_data.element.MapElement): the first participant
        e2 (map_data.element.MapElement): the second participant
        type (int): one of the constants of <MapOverlapType>
    """
    
    __slots__ = ("e1", "e2", "type")
    
    def __init__(self, e1, e2, type):
        assert e1 is not e2, "a map element can't overlap itself"
        self.e1 = e1
        self.e2 = e2
        self.type = type
    
    def getOther(self, element):
        """
        Returns the participant of the overlap other than <element>
        """
        if element is self.e1:
            return self.e2
        assert element is self.e2, "%s doesn't take part in the overlap %s" % (element, self)
        return self.e1
    
    def __repr__(self):
        return "%s(%s, %s)" % (self.__class__.__name__, self.e1, self.e2)


class MapIntersectionWW(MapOverlap):
    """
    An intersection between two way segments
    
    Some attributes:
        pos (mathutils.Vector): the intersection point
    """
    
    __slots__ = ("pos",)
    
    def __init__(self, segment1, segment2, pos):
        super().__init__(segment1, segment2, MapOverlapType.intersect)
        self.pos = pos


class MapOverlapWA(MapOverlap):
    """
    An overlap between a way segment (<e1>) and an area (<e2>)
    
    Some attributes:
        intersectionPositions (tuple): points where the way segment crosses
            the outline of the area
        sharedSegments (tuple): edges of the area outline covered by the way segment
    """
    
    __slots__ = ("intersectionPositions", "sharedSegments")
    
    def __init__(self, waySegment, area, type, intersectionPositions=(), sharedSegments=()):
        super().__init__(waySegment, area, type)
        self.intersectionPositions = tuple(intersectionPositions)
        self.sharedSegments = tuple(sharedSegments)


class MapOverlapAA(MapOverlap):
    """
    An overlap between two areas
    """
    
    __slots__ = ()
    
    def __init__(self, area1, area2, type):
        super().__init__(area1, area2, type)
