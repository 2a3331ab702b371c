"""World-frame displacement between two geodetic poses.

Both endpoints are first made absolute by walking their local metric
offset away from their geodetic anchor.  The displacement is then the
great-circle distance between the absolute points, split along the
initial bearing into an east and a north component, plus the altitude
difference.  The resulting vector lives in a local tangent plane at
`from_pose` with X pointing east, Y north and Z up.
"""

import math

import numpy as np

from ..utils.geodesy import EARTH_RADIUS_M, add_meters_to_lnglat, haversine_distance, initial_bearing
from .pose import PoseLike, as_pose


def displacement(from_pose: PoseLike, to_pose: PoseLike, earth_radius: float = EARTH_RADIUS_M) -> np.ndarray:
    """Get the metre vector from `from_pose` to `to_pose`.

    Parameters
    ----------
    from_pose, to_pose : Pose or dict
        Objects with ``longitude, latitude, altitude, x, y, z``; missing
        fields default to 0.
    earth_radius : float, optional
        Sphere radius in metres.

    Returns
    -------
    numpy.ndarray
        Vector ``(east, north, up)`` in metres, shape (3,).
    """
    start = as_pose(from_pose)
    end = as_pose(to_pose)

    from_lon, from_lat, from_alt = add_meters_to_lnglat(
        (start.longitude, start.latitude, start.altitude), (start.x, start.y, start.z), earth_radius
    )
    to_lon, to_lat, to_alt = add_meters_to_lnglat(
        (end.longitude, end.latitude, end.altitude), (end.x, end.y, end.z), earth_radius
    )

    distance = haversine_distance(from_lat, from_lon, to_lat, to_lon, earth_radius)
    # Bearing is degrees from north, positive is clockwise
    bearing = math.radians(initial_bearing(from_lat, from_lon, to_lat, to_lon))

    return np.array([
        distance * math.sin(bearing),
        distance * math.cos(bearing),
        to_alt - from_alt,
    ])
