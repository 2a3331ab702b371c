"""Trajectory package.

This package resolves per-frame poses and tracked objects over
positional or keyed frame storage and builds platform and object
trajectories relative to a start pose.
"""

from .frames import (
    FrameLookup,
    FrameNotFoundError,
    MappingFrames,
    ObjectNotFoundError,
    ObjectRecord,
    SequenceFrames,
    as_object_record,
    find_by_id,
    frame_lookup,
    object_motions,
    objects_at_frame,
)
from .builder import TrajectoryBuilder, build_object_trajectory, build_pose_trajectory
from .export import to_dataframe

__all__ = [
    "FrameLookup",
    "FrameNotFoundError",
    "MappingFrames",
    "ObjectNotFoundError",
    "ObjectRecord",
    "SequenceFrames",
    "as_object_record",
    "find_by_id",
    "frame_lookup",
    "object_motions",
    "objects_at_frame",
    "TrajectoryBuilder",
    "build_object_trajectory",
    "build_pose_trajectory",
    "to_dataframe",
]
