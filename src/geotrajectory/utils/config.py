"""Configuration loader.

Reads configuration files in YAML format and returns a dictionary.
Configuration files should reside in the `configs/` directory at the
project root; see `configs/default.yaml` for the recognised keys.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML configuration file into a dictionary.

    Parameters
    ----------
    path : str or Path
        Path to the YAML configuration file.

    Returns
    -------
    dict
        Parsed configuration dictionary.  Returns an empty dict if the
        file does not exist or is empty.

    Raises
    ------
    ValueError
        If the YAML document root is not a mapping.
    """
    cfg_path = Path(path)
    if not cfg_path.is_file():
        return {}
    with open(cfg_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {cfg_path}")
    return data
