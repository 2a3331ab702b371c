"""Geodesic utilities.

Great-circle primitives on a spherical earth: the haversine distance,
the initial bearing (forward azimuth) between two points, the forward
problem of walking a distance along a bearing, and moving a
longitude/latitude/altitude anchor by a local east/north/up offset in
metres.  All angles going in or out are in degrees; distances are in
metres.
"""

import math
from typing import Sequence, Tuple

EARTH_RADIUS_M = 6371008.8
"""Mean earth radius in metres."""


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float,
                       radius: float = EARTH_RADIUS_M) -> float:
    """Compute the great‑circle distance between two points on Earth.

    Parameters
    ----------
    lat1, lon1 : float
        Latitude and longitude of point 1 in degrees.
    lat2, lon2 : float
        Latitude and longitude of point 2 in degrees.
    radius : float, optional
        Sphere radius in metres.

    Returns
    -------
    float
        Distance in metres.
    """
    # Convert degrees to radians
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2)**2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return radius * c


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Initial bearing from point 1 towards point 2.

    Returns
    -------
    float
        Bearing in degrees clockwise from north, in ``(-180, 180]``.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlambda = math.radians(lon2 - lon1)
    y = math.sin(dlambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(dlambda)
    return math.degrees(math.atan2(y, x))


def destination_point(lat: float, lon: float, distance: float, bearing: float,
                      radius: float = EARTH_RADIUS_M) -> Tuple[float, float]:
    """Walk ``distance`` metres from ``(lat, lon)`` along ``bearing``.

    Parameters
    ----------
    lat, lon : float
        Start point in degrees.
    distance : float
        Great-circle distance in metres.
    bearing : float
        Initial bearing in degrees clockwise from north.
    radius : float, optional
        Sphere radius in metres.

    Returns
    -------
    (float, float)
        Latitude and longitude of the destination in degrees.
    """
    phi1 = math.radians(lat)
    lambda1 = math.radians(lon)
    theta = math.radians(bearing)
    delta = distance / radius

    phi2 = math.asin(math.sin(phi1) * math.cos(delta) +
                     math.cos(phi1) * math.sin(delta) * math.cos(theta))
    lambda2 = lambda1 + math.atan2(math.sin(theta) * math.sin(delta) * math.cos(phi1),
                                   math.cos(delta) - math.sin(phi1) * math.sin(phi2))
    return math.degrees(phi2), math.degrees(lambda2)


def add_meters_to_lnglat(lnglat: Sequence[float], xyz: Sequence[float],
                         radius: float = EARTH_RADIUS_M) -> Tuple[float, float, float]:
    """Offset a geodetic anchor by a local metric vector.

    The horizontal part ``(x, y)`` is read as east/north metres and is
    walked along the great circle with bearing ``atan2(x, y)``; ``z`` is
    added to the altitude.

    Parameters
    ----------
    lnglat : sequence of float
        ``(longitude, latitude, altitude)``; altitude may be omitted.
    xyz : sequence of float
        ``(x, y, z)`` offset in metres; ``z`` may be omitted.

    Returns
    -------
    (float, float, float)
        ``(longitude, latitude, altitude)`` of the offset point.
    """
    lon, lat = lnglat[0], lnglat[1]
    alt = lnglat[2] if len(lnglat) > 2 else 0.0
    x, y = xyz[0], xyz[1]
    z = xyz[2] if len(xyz) > 2 else 0.0

    distance = math.hypot(x, y)
    if distance == 0.0:
        return lon, lat, alt + z
    bearing = math.degrees(math.atan2(x, y))
    new_lat, new_lon = destination_point(lat, lon, distance, bearing, radius)
    return new_lon, new_lat, alt + z
