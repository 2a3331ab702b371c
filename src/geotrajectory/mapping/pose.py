"""Six degree-of-freedom pose value type.

A `Pose` carries a local metric position, an optional geodetic anchor
and an orientation.  The position is only meaningful relative to the
pose's own anchor; two poses are compared in world space through
`geotrajectory.mapping.displacement`.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class Pose:
    """Position, geodetic anchor and orientation of a rigid body."""

    x: float = 0.0
    """Local offset east of the anchor in metres."""

    y: float = 0.0
    """Local offset north of the anchor in metres."""

    z: float = 0.0
    """Local offset above the anchor in metres."""

    longitude: float = 0.0
    """Anchor longitude in degrees."""

    latitude: float = 0.0
    """Anchor latitude in degrees."""

    altitude: float = 0.0
    """Anchor altitude in metres."""

    roll: float = 0.0
    """Rotation about the x axis in radians."""

    pitch: float = 0.0
    """Rotation about the y axis in radians."""

    yaw: float = 0.0
    """Rotation about the z axis in radians."""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Pose":
        """Build a pose from a dict, treating missing or ``None`` fields as 0."""
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            values[f.name] = float(value) if value is not None else 0.0
        return cls(**values)

    def orientation_only(self) -> "Pose":
        """Same orientation, zero position and no geodetic anchor."""
        return Pose(roll=self.roll, pitch=self.pitch, yaw=self.yaw)


PoseLike = Union[Pose, Mapping[str, Any]]


def as_pose(value: PoseLike) -> Pose:
    """Coerce a pose, a pose dict or a pose-frame entry to a `Pose`.

    Pose-frame entries are dicts of the form ``{"pose": {...}}`` as
    produced by the frame loaders.
    """
    if isinstance(value, Pose):
        return value
    if "pose" in value:
        return as_pose(value["pose"])
    return Pose.from_mapping(value)
