"""Formation quality analysis."""
import logging
import time
from typing import Optional

from false_nine.config import Settings, get_settings
from false_nine.models.analysis import (
    PRIORITY_ORDER,
    AnalysisRecommendation,
    FormationAnalysis,
    FormationMetrics,
    PositionScore,
)
from false_nine.models.formation import Formation, FormationSlot
from false_nine.models.player import Player
from false_nine.models.scoring import FitnessBand
from false_nine.services.scorers.player_slot_scorer import PlayerSlotScorer
from false_nine.utils.condition_scales import is_available

logger = logging.getLogger(__name__)


class FormationAnalyzer:
    """Scores an assignment slot by slot and flags what needs attention."""

    # Poor fits below these scores get raised priority
    HIGH_PRIORITY_BELOW = 40
    MEDIUM_PRIORITY_BELOW = 50

    def __init__(
        self,
        scorer: Optional[PlayerSlotScorer] = None,
        settings: Optional[Settings] = None,
    ):
        self.scorer = scorer or PlayerSlotScorer()
        self.settings = settings or get_settings()

    def analyze(self, formation: Formation, players: list[Player]) -> FormationAnalysis:
        """Analyze a complete or partial assignment.

        Args:
            formation: Formation whose slots may or may not be occupied
            players: Roster used to resolve slot occupants

        Returns:
            FormationAnalysis with totals over occupied slots, per-slot scores,
            prioritized recommendations and line metrics
        """
        start = time.perf_counter()
        players_by_id = {p.id: p for p in players}

        position_scores: list[PositionScore] = []
        recommendations: list[AnalysisRecommendation] = []
        line_totals = {"GK": 0, "DF": 0, "MF": 0, "FW": 0}

        for slot in formation.slots:
            if not slot.player_id:
                recommendations.append(self._empty_slot(slot))
                continue

            player = players_by_id.get(slot.player_id)
            if player is None:
                recommendations.append(
                    AnalysisRecommendation(
                        slot_id=slot.id,
                        issue=f"Assigned player {slot.player_id} is not in the roster",
                        suggestion="Assign a player from the current squad",
                        priority="high",
                    )
                )
                continue

            position = self._position_score(player, slot)
            position_scores.append(position)
            if slot.role in line_totals:
                line_totals[slot.role] += position.score

            if not is_available(player.availability_status):
                recommendations.append(
                    AnalysisRecommendation(
                        slot_id=slot.id,
                        issue=f"{player.name} is {player.availability_status}",
                        suggestion="Find a replacement player for this position",
                        priority="high",
                    )
                )

            if position.fitness == FitnessBand.POOR:
                recommendations.append(self._poor_fit(player, slot, position.score))

        # Stable: equal priorities keep slot order
        recommendations.sort(key=lambda r: PRIORITY_ORDER[r.priority], reverse=True)

        total_score = sum(p.score for p in position_scores)
        average_score = round(total_score / len(position_scores)) if position_scores else 0

        analysis = FormationAnalysis(
            total_score=total_score,
            average_score=average_score,
            position_scores=position_scores,
            recommendations=recommendations,
            formation_metrics=self._metrics(formation, position_scores, line_totals),
        )

        elapsed_ms = (time.perf_counter() - start) * 1000
        if elapsed_ms > self.settings.slow_analysis_ms:
            logger.warning(f"Slow formation analysis: {elapsed_ms:.2f}ms")

        return analysis

    def _position_score(self, player: Player, slot: FormationSlot) -> PositionScore:
        score = self.scorer.score(player, slot)
        return PositionScore(
            slot_id=slot.id,
            role=slot.role,
            player_id=player.id,
            player_name=player.name,
            score=score,
            fitness=self.scorer.fitness_band(score),
            chemistry_score=self.scorer.chemistry(player, slot),
            position_familiarity=self.scorer.position_familiarity(player, slot),
        )

    def _empty_slot(self, slot: FormationSlot) -> AnalysisRecommendation:
        return AnalysisRecommendation(
            slot_id=slot.id,
            issue=f"No player assigned to {slot.role} position",
            suggestion="Assign a suitable player to this position",
            priority="high",
        )

    def _poor_fit(self, player: Player, slot: FormationSlot, score: int) -> AnalysisRecommendation:
        if score < self.HIGH_PRIORITY_BELOW:
            priority = "high"
        elif score < self.MEDIUM_PRIORITY_BELOW:
            priority = "medium"
        else:
            priority = "low"
        return AnalysisRecommendation(
            slot_id=slot.id,
            issue=f"{player.name} is not well-suited for {slot.role} position",
            suggestion=f"Consider moving to a position that matches their {player.role_id} role",
            priority=priority,
            score=score,
        )

    def _metrics(
        self,
        formation: Formation,
        position_scores: list[PositionScore],
        line_totals: dict[str, int],
    ) -> FormationMetrics:
        """Per-line strength averaged over every slot on that line, filled or not."""

        def line_average(role: str) -> float:
            slot_count = sum(1 for s in formation.slots if s.role == role)
            return round(line_totals[role] / max(1, slot_count), 1)

        filled = max(1, len(position_scores))
        return FormationMetrics(
            defensive_strength=line_average("DF"),
            midfield_control=line_average("MF"),
            attacking_threat=line_average("FW"),
            overall_balance=round(sum(p.score for p in position_scores) / filled, 1),
            chemistry_rating=round(sum(p.chemistry_score for p in position_scores) / filled, 1),
        )
