"""
Simulation settings and environment configuration.
"""

import os
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import List, Optional


class SemifinalMode(str, Enum):
    """How quarterfinal winners are paired into semifinals."""
    FIXED = "fixed"        # winner 1 vs winner 3, winner 2 vs winner 4
    SHUFFLED = "shuffled"  # winners shuffled before the fixed pairing


@dataclass(frozen=True)
class SimulationSettings:
    """Tunable constants for the tournament simulation."""

    min_score: int = 44
    max_score: int = 122
    base_score: float = 80.0
    ranking_offset: float = 20.0
    max_boost: float = 0.1
    variability: float = 10.0
    forfeit_probability: float = 0.05
    win_step: float = 0.1
    margin_bonus: float = 0.05
    margin_threshold: int = 15
    semifinal_mode: SemifinalMode = SemifinalMode.FIXED
    seed: Optional[int] = None

    def with_overrides(self, **overrides) -> 'SimulationSettings':
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


DEFAULT_SETTINGS = SimulationSettings()


def load_settings() -> SimulationSettings:
    """
    Build settings from environment variables.

    Reads TOURNAMENT_SEED, TOURNAMENT_SEMIFINAL_MODE and
    TOURNAMENT_FORFEIT_PROBABILITY; anything unset keeps its default.
    """
    seed = os.getenv("TOURNAMENT_SEED")
    mode = os.getenv("TOURNAMENT_SEMIFINAL_MODE")
    forfeit = os.getenv("TOURNAMENT_FORFEIT_PROBABILITY")

    return DEFAULT_SETTINGS.with_overrides(
        seed=int(seed) if seed else None,
        semifinal_mode=SemifinalMode(mode.lower()) if mode else None,
        forfeit_probability=float(forfeit) if forfeit else None,
    )


# CORS configuration for the API
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000").split(",")


def get_data_dir() -> Path:
    """Directory the API may read tournament files from (TOURNAMENT_DATA_DIR)."""
    return Path(os.getenv("TOURNAMENT_DATA_DIR", "data")).resolve()


def get_source_hosts() -> List[str]:
    """
    Hosts the API may fetch tournament data from (TOURNAMENT_SOURCE_HOSTS).

    Comma-separated; when unset the http source is refused.
    """
    hosts = os.getenv("TOURNAMENT_SOURCE_HOSTS", "")
    return [h.strip().lower() for h in hosts.split(",") if h.strip()]
