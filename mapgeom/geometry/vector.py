# Point helpers and segment primitives of the planar geometry.
#
# Points are 2D mathutils.Vector instances, frozen to be immutable and
# hashable. The ground plane uses the axes <x> and <y>, the axis <z> is
# reserved for the elevation.
#

from itertools import tee

import numpy as np
from mathutils import Vector

from .. import defs


# helper functions -----------------------------------------------
def pairs(iterable):
    # s -> (s0,s1), (s1,s2), (s2, s3), ...
    p1, p2 = tee(iterable)
    next(p2, None)
    return zip(p1,p2)
# ----------------------------------------------------------------


def vectorXY(x, y):
    return Vector((x, y)).freeze()


def vector(p):
    """
    Returns a frozen 2D vector for <p>, which is either a mathutils.Vector
    or a sequence of at least two coordinates
    """
    if isinstance(p, Vector) and p.is_frozen and len(p) == 2:
        return p
    return Vector((p[0], p[1])).freeze()


def cross(v1, v2):
    # 2D cross product
    return v1[0]*v2[1] - v1[1]*v2[0]


def distance(v1, v2):
    return (v2 - v1).length


def vectorsClose(v1, v2, tolerance=None):
    if tolerance is None:
        tolerance = defs.zero
    return abs(v1[0] - v2[0]) <= tolerance and abs(v1[1] - v2[1]) <= tolerance


def orientation(p1, p2, p):
    """
    Orientation test of the point <p> relative to the directed line
    from <p1> to <p2>. mathutils.Vector stores single precision floats and
    <p2 - p1> is rounded to them, so the test is exact only for coordinates
    that survive that rounding.
    
    Returns:
        1 if <p> is to the left (counter-clockwise turn), -1 if it is to the right,
        0 if the three points are collinear
    """
    c = cross(p2 - p1, p - p1)
    return (c > 0.) - (c < 0.)


def isRightOf(p, p1, p2):
    return orientation(p1, p2, p) < 0


def _lineParameters(p1, p2, p3, p4):
    # Returns the parameters <t1> and <t2> of the intersection of the infinite
    # lines through the segments (<p1>,<p2>) and (<p3>,<p4>), so that the
    # intersection is p1 + (p2-p1)*t1 == p3 + (p4-p3)*t2.
    # Parallel lines give None.
    d1, d2 = p2 - p1, p4 - p3
    denom = cross(d1, d2)
    if denom == 0.:
        return None
    d3 = p3 - p1
    return cross(d3, d2)/denom, cross(d3, d1)/denom


def lineSegmentIntersection(p1, p2, p3, p4):
    """
    Returns the point where the segments (<p1>,<p2>) and (<p3>,<p4>) meet,
    including a contact at an endpoint, or None. Parallel segments give None.
    """
    params = _lineParameters(p1, p2, p3, p4)
    if params is None:
        return None
    t1, t2 = params
    if 0. <= t1 <= 1. and 0. <= t2 <= 1.:
        return (p1 + (p2 - p1)*t1).freeze()
    return None


def trueLineSegmentIntersection(p1, p2, p3, p4):
    """
    Returns the point of a true intersection of the segments (<p1>,<p2>)
    and (<p3>,<p4>) or None.
    
    A true intersection lies strictly inside both segments. Segments sharing
    an endpoint and parallel (including collinear) segments never intersect
    truly.
    """
    if p1 == p3 or p1 == p4 or p2 == p3 or p2 == p4:
        return None
    params = _lineParameters(p1, p2, p3, p4)
    if params is None:
        return None
    t1, t2 = params
    if 0. < t1 < 1. and 0. < t2 < 1.:
        return (p1 + (p2 - p1)*t1).freeze()
    return None


def distanceFromLineSegment(p, p1, p2):
    d = p2 - p1
    lengthSquared = d.length_squared
    if lengthSquared == 0.:
        # degenerated segment
        return (p - p1).length
    t = max(0., min(1., (p - p1).dot(d)/lengthSquared))
    return (p - (p1 + d*t)).length


def distancesFromLineSegments(p, starts, ends):
    """
    Vectorized version of <distanceFromLineSegment(..)>
    
    Args:
        p: The point
        starts (numpy.ndarray): Start points of the segments, shape (n, 2)
        ends (numpy.ndarray): End points of the segments, shape (n, 2)
    
    Returns:
        numpy.ndarray with the distances from <p> to each segment
    """
    p = np.array((p[0], p[1]))
    d = ends - starts
    lengthSquared = np.einsum("ij,ij->i", d, d)
    dot = np.einsum("ij,ij->i", p - starts, d)
    # the parameter of the projection is zero for degenerated segments
    t = np.divide(dot, lengthSquared, out=np.zeros_like(dot), where=lengthSquared>0.)
    t = np.clip(t, 0., 1.)
    projections = starts + d*t[:,None]
    return np.hypot(projections[:,0] - p[0], projections[:,1] - p[1])
