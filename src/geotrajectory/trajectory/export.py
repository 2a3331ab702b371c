"""Tabular view of trajectories.

Trajectories are handed to the rendering layer as tables with one row
per frame.  This module converts a point array to a `pandas.DataFrame`.
"""

from typing import Iterable, Optional

import numpy as np
import pandas as pd


def to_dataframe(points, frames: Optional[Iterable[int]] = None) -> pd.DataFrame:
    """Convert trajectory points to a table.

    Parameters
    ----------
    points : array-like
        Trajectory of shape (N, 3).
    frames : iterable of int, optional
        Absolute frame number of each point.  Defaults to ``0..N-1``.

    Returns
    -------
    pandas.DataFrame
        Columns ``frame, x, y, z``.
    """
    coords = np.asarray(points, dtype=float).reshape(-1, 3)
    frame_numbers = np.arange(len(coords)) if frames is None else np.asarray(list(frames), dtype=int)
    if len(frame_numbers) != len(coords):
        raise ValueError("frames must have one entry per trajectory point")
    return pd.DataFrame({
        "frame": frame_numbers,
        "x": coords[:, 0],
        "y": coords[:, 1],
        "z": coords[:, 2],
    })
