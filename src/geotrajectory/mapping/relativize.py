"""Expressing vertices relative to a base pose.

Given vertices in a base pose's local frame, this module applies the
pose's transformation matrix so that the vertices come out in the frame
the pose itself is expressed in.
"""

import numpy as np

from .pose import PoseLike
from .transforms import apply_transform, transformation_matrix


def relativize(vertices, base_pose: PoseLike) -> np.ndarray:
    """Transform vertices to `base_pose` relative coordinates.

    Parameters
    ----------
    vertices : array-like
        List of ``[x, y, z]`` or ``[x, y]`` vertices.
    base_pose : Pose or dict
        ``{x, y, z, roll, pitch, yaw}``; geodetic fields are ignored.

    Returns
    -------
    numpy.ndarray
        Vertices in relative coordinates, in input order.
    """
    return apply_transform(transformation_matrix(base_pose), vertices)

