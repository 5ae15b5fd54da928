"""
Core configuration.
"""

from .config import (
    SemifinalMode,
    SimulationSettings,
    DEFAULT_SETTINGS,
    load_settings,
    get_data_dir,
    get_source_hosts
)

__all__ = [
    "SemifinalMode",
    "SimulationSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "get_data_dir",
    "get_source_hosts",
]
