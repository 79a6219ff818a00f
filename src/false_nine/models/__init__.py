"""Data models for the formation engine."""

from false_nine.models.player import (
    ATTRIBUTE_NAMES,
    Availability,
    PitchPosition,
    Player,
    PlayerAttributes,
)
from false_nine.models.formation import Formation, FormationSlot
from false_nine.models.scoring import FitnessBand, ScoreEntry
from false_nine.models.analysis import (
    AnalysisRecommendation,
    FormationAnalysis,
    FormationMetrics,
    PositionScore,
)
from false_nine.models.conflict import ConflictResolution, SwapRecommendation

__all__ = [
    "ATTRIBUTE_NAMES",
    "Availability",
    "PitchPosition",
    "Player",
    "PlayerAttributes",
    "Formation",
    "FormationSlot",
    "FitnessBand",
    "ScoreEntry",
    "AnalysisRecommendation",
    "FormationAnalysis",
    "FormationMetrics",
    "PositionScore",
    "ConflictResolution",
    "SwapRecommendation",
]
