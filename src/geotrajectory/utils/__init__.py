"""Utility functions for the trajectory helpers."""

from .logging import get_logger
from .config import load_config
from .geodesy import (
    EARTH_RADIUS_M,
    add_meters_to_lnglat,
    destination_point,
    haversine_distance,
    initial_bearing,
)

__all__ = [
    "get_logger",
    "load_config",
    "EARTH_RADIUS_M",
    "add_meters_to_lnglat",
    "destination_point",
    "haversine_distance",
    "initial_bearing",
]
