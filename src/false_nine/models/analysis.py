"""Formation analysis result models."""

from dataclasses import asdict, dataclass, field
from typing import Literal, Optional

from false_nine.models.scoring import FitnessBand

Priority = Literal["high", "medium", "low"]

PRIORITY_ORDER: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


@dataclass
class PositionScore:
    """Score breakdown for one occupied slot."""

    slot_id: str
    role: str
    player_id: str
    player_name: str
    score: int  # 0 - 100
    fitness: FitnessBand
    chemistry_score: int = 0  # 0 - 100
    position_familiarity: int = 0  # 100 preferred role, 75 same line, 50 otherwise


@dataclass
class AnalysisRecommendation:
    """An issue found on a slot and what to do about it."""

    slot_id: str
    issue: str
    suggestion: str
    priority: Priority
    score: Optional[int] = None


@dataclass
class FormationMetrics:
    """Line-by-line strength of a lineup."""

    defensive_strength: float = 0.0
    midfield_control: float = 0.0
    attacking_threat: float = 0.0
    overall_balance: float = 0.0
    chemistry_rating: float = 0.0


@dataclass
class FormationAnalysis:
    """Aggregate quality of a (partial) assignment."""

    total_score: int
    average_score: int
    position_scores: list[PositionScore] = field(default_factory=list)
    recommendations: list[AnalysisRecommendation] = field(default_factory=list)
    formation_metrics: FormationMetrics = field(default_factory=FormationMetrics)

    def to_dict(self) -> dict:
        """Serialize to plain types for JSON output."""
        data = asdict(self)
        for entry in data["position_scores"]:
            entry["fitness"] = FitnessBand(entry["fitness"]).value
        return data
