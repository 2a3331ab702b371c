"""Trajectories relative to a reference pose.

This module turns per-frame geospatial poses into motion paths that
are expressed in the local frame of one start pose, so that consumers
never have to work in geodetic coordinates.  Two kinds of trajectory
are supported:

* the platform's own path, built from its pose frames, and
* the path of a tracked object whose per-frame offsets are given
  relative to the platform pose of that frame.

Every point of one trajectory is expressed relative to the same
reference pose, the pose of the start frame.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np

from ..mapping.displacement import displacement
from ..mapping.pose import as_pose
from ..mapping.transforms import apply_transform, invert, relative_transform, transformation_matrix
from ..utils.config import load_config
from ..utils.geodesy import EARTH_RADIUS_M
from ..utils.logging import get_logger
from .frames import FrameStorage, ObjectLike, as_object_record, frame_lookup, object_motions


@dataclass
class TrajectoryBuilder:
    """Build platform and object trajectories from frame data."""

    earth_radius: float = EARTH_RADIUS_M
    """Sphere radius in metres used for geodesic displacements."""

    log_level: Optional[str] = None
    """Level applied to the ``geotrajectory.trajectory`` logger when set.
    ``None`` leaves the logger level as it is."""

    def __post_init__(self):
        self.logger = get_logger("geotrajectory.trajectory", self.log_level)

    @classmethod
    def from_config(cls, path: Union[str, Path]) -> "TrajectoryBuilder":
        """Create a builder from the ``trajectory`` section of a YAML file."""
        section = load_config(path).get("trajectory") or {}
        return cls(
            earth_radius=float(section.get("earth_radius", EARTH_RADIUS_M)),
            log_level=section.get("log_level"),
        )

    def build_pose_trajectory(self, poses: FrameStorage, start_frame: int, end_frame: int) -> np.ndarray:
        """Generate the trajectory of a list of poses.

        Parameters
        ----------
        poses : sequence or mapping
            Frames of pose data; each frame is a `Pose`, a pose dict or
            ``{"pose": {...}}`` with ``x, y, z, longitude, latitude,
            altitude, roll, pitch, yaw``.
        start_frame : int
            Start frame of the trajectory.  Its pose is the reference.
        end_frame : int
            End frame (exclusive); clipped to the available frames.

        Returns
        -------
        numpy.ndarray
            Points of shape (N, 3) relative to the start pose.
        """
        lookup = frame_lookup(poses)
        limit = min(end_frame, lookup.frame_count)
        start_pose = as_pose(lookup.require(start_frame))
        positions = [as_pose(lookup.require(i)) for i in range(start_frame, limit)]
        if not positions:
            self.logger.warning("Empty pose trajectory for frames [%d, %d)", start_frame, end_frame)
            return np.empty((0, 3))

        # The start pose's local offset is part of the geodesic
        # displacement already, so only its orientation is undone here.
        to_start = invert(transformation_matrix(start_pose.orientation_only()))
        offsets = np.array([displacement(start_pose, pose, self.earth_radius) for pose in positions])
        vertices = apply_transform(to_start, offsets)
        self.logger.debug("Pose trajectory: %d points for frames [%d, %d)", len(vertices), start_frame, limit)
        return vertices

    def build_object_trajectory(self, target_object: ObjectLike, object_frames: FrameStorage,
                                pose_frames: FrameStorage, start_frame: int, end_frame: int) -> np.ndarray:
        """Get an object trajectory in start-pose relative coordinates.

        Parameters
        ----------
        target_object : ObjectRecord or dict
            ``{id, firstFrame, lastFrame, ...}`` of the tracked object.
        object_frames : sequence or mapping
            Per-frame object lists; each object carries ``id, x, y, z``
            relative to the platform pose of its frame.
        pose_frames : sequence or mapping
            Per-frame platform poses.
        start_frame : int
            Start frame; the platform pose of this frame is the reference.
        end_frame : int
            End frame (exclusive).

        Returns
        -------
        numpy.ndarray
            Points of shape (N, 3), one per frame in which the object
            exists within ``[start_frame, end_frame)``.

        Raises
        ------
        ObjectNotFoundError
            If the object is missing from a frame inside its lifetime.
        """
        target = as_object_record(target_object)
        poses = frame_lookup(pose_frames)
        start_platform_pose = as_pose(poses.require(start_frame))
        limit = end_frame if target.last_frame is None else min(end_frame, target.last_frame)
        motions = object_motions(target, object_frames, start_frame, limit)

        vertices = []
        for frame_number, step in motions:
            curr_platform_pose = as_pose(poses.require(frame_number))

            # objects in the current frame are metre offsets from the
            # current platform pose; move them into the start pose frame
            T = relative_transform(curr_platform_pose, start_platform_pose, self.earth_radius)
            vertices.append(apply_transform(T, step.offset))

        if not vertices:
            self.logger.warning("Object %r has no frames in [%d, %d)", target.id, start_frame, end_frame)
            return np.empty((0, 3))

        self.logger.debug("Object %r trajectory: %d points", target.id, len(vertices))
        return np.array(vertices)

    @staticmethod
    def object_frame_range(target_object: ObjectLike, start_frame: int, end_frame: int) -> range:
        """Absolute frame numbers covered by an object trajectory."""
        target = as_object_record(target_object)
        end = end_frame if target.last_frame is None else min(end_frame, target.last_frame)
        return range(max(target.first_frame, start_frame), end)


def build_pose_trajectory(poses: FrameStorage, start_frame: int, end_frame: int) -> np.ndarray:
    """`TrajectoryBuilder.build_pose_trajectory` with default settings."""
    return TrajectoryBuilder().build_pose_trajectory(poses, start_frame, end_frame)


def build_object_trajectory(target_object: ObjectLike, object_frames: FrameStorage,
                            pose_frames: FrameStorage, start_frame: int, end_frame: int) -> np.ndarray:
    """`TrajectoryBuilder.build_object_trajectory` with default settings."""
    return TrajectoryBuilder().build_object_trajectory(
        target_object, object_frames, pose_frames, start_frame, end_frame
    )
