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

# The shared empty collection of overlaps. It's replaced by a Python list
# when the first overlap is added to a map element, since most map elements
# never get an overlap.
EMPTY_OVERLAPS = ()


class MapElement:
    """
    Base class for the map elements that can overlap each other in the
    ground plane (way segments and areas)
    
    Some attributes:
        tags (dict): OSM tags
        overlaps: Instances of <map_data.overlaps.MapOverlap> where the element
            is one of both participants, in the order of their addition
    
    The overlaps aren't guarded by a lock. If the overlaps are computed in several
    threads, all overlaps of an element must be added by the same thread.
    """
    
    __slots__ = ("tags", "overlaps")
    
    def __init__(self, tags):
        self.tags = tags if tags is not None else {}
        self.overlaps = EMPTY_OVERLAPS
    
    def getLayer(self):
        """
        Returns the value of the OSM tag <layer>, 0 if it isn't set or isn't an integer
        """
        layer = self.tags.get("layer")
        if layer is None:
            return 0
        try:
            return int(layer)
        except ValueError:
            return 0
    
    def addOverlap(self, overlap):
        assert overlap.e1 is self or overlap.e2 is self,\
            "the overlap %s doesn't involve the element %s" % (overlap, self)
        if self.overlaps is EMPTY_OVERLAPS:
            self.overlaps = []
        self.overlaps.append(overlap)
    
    def getOverlaps(self):
        return self.overlaps
    
    def getIntersectionsOfKind(self, kind):
        """
        Returns a Python generator over the overlaps that are instances of
        the class <kind>, e.g. <map_data.overlaps.MapIntersectionWW>
        """
        return (overlap for overlap in self.overlaps if isinstance(overlap, kind))
    
    def getBoundingBox(self):
        raise NotImplementedError
