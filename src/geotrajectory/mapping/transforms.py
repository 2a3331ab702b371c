"""Rigid transforms between pose coordinate frames.

Transforms are 4x4 homogeneous matrices

    T = [[R, t],
         [0, 1]]

where ``t`` is the pose position and ``R = Rz(yaw) @ Ry(pitch) @ Rx(roll)``.
A point ``p`` expressed in the pose's local frame maps to ``R @ p + t``
in the frame the pose itself is expressed in (rotate first, then
translate).
"""

import numpy as np
from scipy.spatial.transform import Rotation

from ..utils.geodesy import EARTH_RADIUS_M
from .displacement import displacement
from .pose import Pose, PoseLike, as_pose


def rotation_matrix(pose: PoseLike) -> np.ndarray:
    """3x3 rotation of a pose's roll, pitch and yaw."""
    pose = as_pose(pose)
    # Intrinsic Z-Y'-X'' equals Rz(yaw) @ Ry(pitch) @ Rx(roll)
    return Rotation.from_euler("ZYX", [pose.yaw, pose.pitch, pose.roll]).as_matrix()


def transformation_matrix(pose: PoseLike) -> np.ndarray:
    """Matrix mapping points in the pose's local frame to the outer frame.

    Parameters
    ----------
    pose : Pose or dict
        Pose with ``x, y, z, roll, pitch, yaw``.

    Returns
    -------
    numpy.ndarray
        4x4 homogeneous transformation matrix.
    """
    pose = as_pose(pose)
    T = np.eye(4)
    T[:3, :3] = rotation_matrix(pose)
    T[:3, 3] = (pose.x, pose.y, pose.z)
    return T


def invert(T: np.ndarray) -> np.ndarray:
    """Rigid inverse of a homogeneous transform.

    The rotation block is orthonormal, so the inverse is
    ``[[R.T, -R.T @ t], [0, 1]]``.

    Parameters
    ----------
    T : numpy.ndarray
        4x4 rigid transformation matrix.

    Returns
    -------
    numpy.ndarray
        4x4 matrix undoing `T`.
    """
    rotation = T[:3, :3].T
    inverse = np.eye(4)
    inverse[:3, :3] = rotation
    inverse[:3, 3] = -rotation @ T[:3, 3]
    return inverse


def relative_transform(from_pose: PoseLike, to_pose: PoseLike, earth_radius: float = EARTH_RADIUS_M) -> np.ndarray:
    """Matrix converting `from_pose` relative coordinates into `to_pose` ones.

    `from_pose` is placed at the origin with its own orientation and
    `to_pose` at the geodesic displacement ``from -> to`` with its
    orientation.  The result is ``inv(T_to) @ T_from``: a point in
    `from_pose`'s frame goes to the shared tangent frame and then into
    `to_pose`'s frame.  Its translation is therefore the ``to -> from``
    vector expressed in `to_pose`'s axes.

    Parameters
    ----------
    from_pose, to_pose : Pose or dict
        Poses with ``longitude, latitude, altitude, roll, pitch, yaw``
        and optional local ``x, y, z``.
    earth_radius : float, optional
        Sphere radius in metres used for the displacement.

    Returns
    -------
    numpy.ndarray
        4x4 homogeneous transformation matrix.
    """
    source = as_pose(from_pose)
    target = as_pose(to_pose)
    offset = displacement(source, target, earth_radius)

    source_frame = source.orientation_only()
    target_frame = Pose(x=offset[0], y=offset[1], z=offset[2],
                        roll=target.roll, pitch=target.pitch, yaw=target.yaw)

    return invert(transformation_matrix(target_frame)) @ transformation_matrix(source_frame)


def apply_transform(T: np.ndarray, points) -> np.ndarray:
    """Apply a homogeneous transform to one vertex or a batch of vertices.

    Parameters
    ----------
    T : numpy.ndarray
        4x4 transformation matrix.
    points : array-like
        Shape (3,), (N, 3) or (N, 2).  Two dimensional vertices are
        treated as lying at ``z = 0`` and are returned as 2D.

    Returns
    -------
    numpy.ndarray
        Transformed vertices with the same shape as the input, in input
        order.
    """
    coords = np.asarray(points, dtype=float)
    if coords.size == 0:
        return np.empty((0, 3))
    single = coords.ndim == 1
    if single:
        coords = coords[np.newaxis, :]
    if coords.ndim != 2 or coords.shape[1] not in (2, 3):
        raise ValueError("points must be a vertex or an array of 2D/3D vertices")

    dims = coords.shape[1]
    xyz = coords if dims == 3 else np.column_stack([coords, np.zeros(len(coords))])
    transformed = xyz @ T[:3, :3].T + T[:3, 3]
    transformed = transformed[:, :dims]
    return transformed[0] if single else transformed
