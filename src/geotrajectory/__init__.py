"""Geospatial trajectories relative to a reference pose."""

from .mapping import Pose, displacement, invert, relative_transform, relativize, transformation_matrix
from .trajectory import (
    ObjectNotFoundError,
    ObjectRecord,
    TrajectoryBuilder,
    build_object_trajectory,
    build_pose_trajectory,
    find_by_id,
    objects_at_frame,
)

__all__ = [
    "Pose",
    "displacement",
    "invert",
    "relative_transform",
    "relativize",
    "transformation_matrix",
    "ObjectNotFoundError",
    "ObjectRecord",
    "TrajectoryBuilder",
    "build_object_trajectory",
    "build_pose_trajectory",
    "find_by_id",
    "objects_at_frame",
]
