"""Demo script for trajectories with synthetic drive data.

This script creates a vehicle driving a gentle curve around a
geodetic anchor, together with one tracked object that appears part way
through the drive, and prints both trajectories relative to the start
pose.

Usage:
    python examples/demo_trajectories.py [--config configs/default.yaml]
"""

import argparse
import math
from pathlib import Path
from typing import Dict, List

from geotrajectory.trajectory import TrajectoryBuilder, to_dataframe


def create_synthetic_drive(
    n_frames: int = 50,
    speed: float = 10.0,
    turn_rate: float = 0.02,
    origin: tuple = (5.12, 52.09)
) -> List[Dict]:
    """Create pose frames for a vehicle driving a constant-radius curve.

    Parameters
    ----------
    n_frames : int
        Number of frames.
    speed : float
        Distance travelled per frame in metres.
    turn_rate : float
        Yaw change per frame in radians.
    origin : tuple
        Geodetic anchor ``(longitude, latitude)`` in degrees.

    Returns
    -------
    list of dict
        Pose frames ``{"pose": {...}}``.
    """
    frames = []
    x = y = 0.0
    yaw = math.pi / 2
    for _ in range(n_frames):
        frames.append({"pose": {
            "longitude": origin[0],
            "latitude": origin[1],
            "altitude": 2.0,
            "x": x,
            "y": y,
            "z": 0.0,
            "roll": 0.0,
            "pitch": 0.0,
            "yaw": yaw,
        }})
        x += speed * math.cos(yaw)
        y += speed * math.sin(yaw)
        yaw += turn_rate
    return frames


def create_synthetic_object(first_frame: int, last_frame: int, n_frames: int) -> Dict[int, List[Dict]]:
    """Object frames for a car parked 20 m ahead of the vehicle at `first_frame`."""
    frames: Dict[int, List[Dict]] = {i: [] for i in range(n_frames)}
    for i in range(first_frame, last_frame):
        ahead = 20.0 - 10.0 * (i - first_frame)
        frames[i].append({"id": "car-1", "x": ahead, "y": -3.0, "z": 0.0,
                          "firstFrame": first_frame, "lastFrame": last_frame})
    return frames


def main():
    parser = argparse.ArgumentParser(description="Print synthetic trajectories")
    parser.add_argument("--config", type=Path, default=Path("configs/default.yaml"))
    args = parser.parse_args()

    builder = TrajectoryBuilder.from_config(args.config)
    poses = create_synthetic_drive()
    objects = create_synthetic_object(10, 14, len(poses))
    target = objects[10][0]

    vehicle = builder.build_pose_trajectory(poses, 0, len(poses))
    print(f"Vehicle trajectory: {len(vehicle)} points, end at {vehicle[-1].round(2)}")

    car = builder.build_object_trajectory(target, objects, poses, 8, 20)
    frames = builder.object_frame_range(target, 8, 20)
    print("Car trajectory:")
    print(to_dataframe(car, frames).round(2).to_string(index=False))


if __name__ == "__main__":
    main()
