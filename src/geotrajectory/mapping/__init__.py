"""Poses, rigid transforms and geodetic displacements.

This package provides the 6-DoF `Pose` value type, the homogeneous
transforms built from it, the great-circle displacement between two
geodetic poses and a helper to express vertices relative to a pose.
"""

from .pose import Pose, as_pose
from .displacement import displacement
from .transforms import apply_transform, invert, relative_transform, rotation_matrix, transformation_matrix
from .relativize import relativize

__all__ = [
    "Pose",
    "as_pose",
    "displacement",
    "apply_transform",
    "invert",
    "relative_transform",
    "rotation_matrix",
    "transformation_matrix",
    "relativize",
]
