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

from ..geometry.LineSegment import LineSegment
from ..geometry.BoundingBox import BoundingBox
from .element import MapElement
from .overlaps import MapIntersectionWW


class MapWaySegment(MapElement):
    """
    A line between two consecutive nodes of an OSM way
    
    Some attributes:
        tags (dict): OSM tags of the way
        startNode (map_data.node.MapNode): the first node
        endNode (map_data.node.MapNode): the second node
    """
    
    __slots__ = ("startNode", "endNode")
    
    def __init__(self, tags, startNode, endNode):
        super().__init__(tags)
        self.startNode = startNode
        self.endNode = endNode
    
    def getLineSegment(self):
        return LineSegment(self.startNode.pos, self.endNode.pos)
    
    def getIntersectionsWW(self):
        return self.getIntersectionsOfKind(MapIntersectionWW)
    
    def getBoundingBox(self):
        return BoundingBox.fromPoints((self.startNode.pos, self.endNode.pos))
    
    def __repr__(self):
        return "%s->%s" % (self.startNode, self.endNode)
