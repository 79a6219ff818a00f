"""Score entries and fitness bands."""

from dataclasses import dataclass
from enum import Enum


class FitnessBand(str, Enum):
    """How well a player suits a slot, derived from the 0-100 score."""

    EXCELLENT = "excellent"  # >= 90
    GOOD = "good"  # >= 75
    FAIR = "fair"  # >= 60
    POOR = "poor"  # < 60


@dataclass(frozen=True)
class ScoreEntry:
    """Fitness of one player for one slot."""

    slot_id: str
    player_id: str
    score: int  # 0 - 100
    fitness_band: FitnessBand
