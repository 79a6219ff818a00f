"""Player-slot fitness scoring."""
from typing import Optional

from false_nine.models.formation import FormationSlot
from false_nine.models.player import Player
from false_nine.models.scoring import FitnessBand, ScoreEntry
from false_nine.services.scorers.attribute_scorer import AttributeScorer
from false_nine.services.scorers.condition_scorer import ConditionScorer
from false_nine.services.scorers.role_compatibility_scorer import RoleCompatibilityScorer
from false_nine.utils.condition_scales import canonical_level


class PlayerSlotScorer:
    """Computes a 0-100 fitness score for a (player, slot) pair.

    score = clamp(condition(role_base * 0.75 + attribute_fit * 0.25))

    Pure: the same player and slot always give the same score.
    """

    ROLE_WEIGHT = 0.75
    ATTRIBUTE_WEIGHT = 0.25

    # Lower bounds, checked top-down; anything below the last is POOR
    FITNESS_THRESHOLDS: tuple[tuple[int, FitnessBand], ...] = (
        (90, FitnessBand.EXCELLENT),
        (75, FitnessBand.GOOD),
        (60, FitnessBand.FAIR),
    )

    CHEMISTRY_BASE = 75
    CHEMISTRY_PREFERRED_BONUS = 20
    CHEMISTRY_FORM_ADJUSTMENTS = {"Excellent": 5, "Poor": -5, "Terrible": -10}

    def __init__(
        self,
        role_scorer: Optional[RoleCompatibilityScorer] = None,
        attribute_scorer: Optional[AttributeScorer] = None,
        condition_scorer: Optional[ConditionScorer] = None,
    ):
        self.role_scorer = role_scorer or RoleCompatibilityScorer()
        self.attribute_scorer = attribute_scorer or AttributeScorer()
        self.condition_scorer = condition_scorer or ConditionScorer()

    def get_components(self, player: Player, slot: FormationSlot) -> dict[str, float]:
        """Individual score components, for display and debugging."""
        return {
            "role_compatibility": self.role_scorer.get_base_score(player.role_id, slot),
            "attribute_fit": round(
                self.attribute_scorer.get_fit(player.attributes, slot.role), 2
            ),
            "morale_form_bonus": self.condition_scorer.get_morale_form_bonus(player),
            "availability": self.condition_scorer.get_availability_multiplier(player),
            "fitness": round(self.condition_scorer.get_fitness_multiplier(player), 3),
            "age_penalty": self.condition_scorer.get_age_penalty(player),
        }

    def score(self, player: Player, slot: FormationSlot) -> int:
        """Fitness of ``player`` for ``slot``, 0-100."""
        base = self.role_scorer.get_base_score(player.role_id, slot)
        attribute_fit = self.attribute_scorer.get_fit(player.attributes, slot.role)
        blended = base * self.ROLE_WEIGHT + attribute_fit * self.ATTRIBUTE_WEIGHT

        adjusted = self.condition_scorer.apply(player, blended)
        return int(round(min(100.0, max(0.0, adjusted))))

    @classmethod
    def fitness_band(cls, score: float) -> FitnessBand:
        for threshold, band in cls.FITNESS_THRESHOLDS:
            if score >= threshold:
                return band
        return FitnessBand.POOR

    def score_entry(self, player: Player, slot: FormationSlot) -> ScoreEntry:
        score = self.score(player, slot)
        return ScoreEntry(
            slot_id=slot.id,
            player_id=player.id,
            score=score,
            fitness_band=self.fitness_band(score),
        )

    def score_matrix(
        self, players: list[Player], slots: list[FormationSlot]
    ) -> list[ScoreEntry]:
        """Every player against every slot, roster-major order."""
        return [self.score_entry(player, slot) for player in players for slot in slots]

    def chemistry(self, player: Player, slot: FormationSlot) -> int:
        """How settled a player is likely to feel in a slot, 0-100."""
        chemistry = self.CHEMISTRY_BASE
        if self.role_scorer.is_preferred(player.role_id, slot):
            chemistry += self.CHEMISTRY_PREFERRED_BONUS
        chemistry += self.CHEMISTRY_FORM_ADJUSTMENTS.get(canonical_level(player.form), 0)
        return max(0, min(100, chemistry))

    def position_familiarity(self, player: Player, slot: FormationSlot) -> int:
        return self.role_scorer.familiarity(player.role_id, slot)
