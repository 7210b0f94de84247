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

from ..geometry.Polygon import Polygon
from ..geometry.LineSegment import LineSegment
from .element import MapElement


def _simplePolygon(polygon):
    # <polygon> is either a Polygon or a vertex loop
    if not isinstance(polygon, Polygon):
        polygon = Polygon(polygon)
    return polygon.asSimplePolygon()


class MapArea(MapElement):
    """
    An area of the map data (a closed OSM way or a multipolygon)
    
    Some attributes:
        id: OSM id of the way or the relation
        outer (geometry.SimplePolygon.SimplePolygon): the outer outline
        holes (tuple): the inner outlines as instances of <geometry.SimplePolygon.SimplePolygon>
    
    The constructor raises <geometry.errors.GeometryError> if an outline isn't simple.
    The caller usually skips the area in that case.
    """
    
    __slots__ = ("id", "outer", "holes")
    
    def __init__(self, id, tags, outline, holes=()):
        super().__init__(tags)
        self.id = id
        self.outer = _simplePolygon(outline)
        self.holes = tuple(_simplePolygon(hole) for hole in holes)
    
    def getOuterPolygon(self):
        return self.outer
    
    def getHoles(self):
        return self.holes
    
    def getRings(self):
        return (self.outer,) + self.holes
    
    def _inHole(self, p):
        # a point on the outline of a hole belongs to the area
        return any(hole.contains(p) and not hole.isOnOutline(p) for hole in self.holes)
    
    def contains(self, other):
        """
        Checks if the point or the LineSegment <other> is located inside the area
        """
        if isinstance(other, LineSegment):
            return self.outer.contains(other) and not any(
                hole.intersects(other) for hole in self.holes
            ) and not self._inHole(other.center())
        return self.outer.contains(other) and not self._inHole(other)
    
    def intersects(self, other):
        """
        Checks if the LineSegment or the Polygon <other> truly intersects an outline of the area
        """
        return any(ring.intersects(other) for ring in self.getRings())
    
    def getBoundingBox(self):
        return self.outer.getBoundingBox()
    
    def __repr__(self):
        return "a%s" % self.id
