"""Secondary modifiers from a player's current condition."""
from false_nine.models.player import Player
from false_nine.utils.condition_scales import (
    availability_multiplier,
    form_modifier,
    is_available,
    morale_modifier,
)


class ConditionScorer:
    """Adjusts a positional score for form, morale, availability, fatigue and age.

    Applied in this order:
    1. Form and morale add or remove a few points.
    2. Availability multiplies by a severity factor (Available = 1.0).
    3. Fatigue and injury risk shave off up to 20% and 10%.
    4. Age outside the peak window costs one point per year, capped.

    Unavailable players are penalised, never excluded.
    """

    FATIGUE_MAX_PENALTY = 0.20
    INJURY_RISK_MAX_PENALTY = 0.10

    PEAK_AGE_MIN = 23
    PEAK_AGE_MAX = 30
    AGE_PENALTY_PER_YEAR = 1.0
    AGE_PENALTY_CAP = 5.0

    def get_morale_form_bonus(self, player: Player) -> float:
        """Combined form + morale points. Also used as a solver tie-break."""
        return form_modifier(player.form) + morale_modifier(player.morale)

    def get_availability_multiplier(self, player: Player) -> float:
        return availability_multiplier(player.availability_status)

    def is_available(self, player: Player) -> bool:
        return is_available(player.availability_status)

    def get_fitness_multiplier(self, player: Player) -> float:
        """Fatigue and injury-risk factor, 0.72 - 1.0."""
        multiplier = 1.0
        if player.fatigue is not None:
            multiplier *= 1.0 - self.FATIGUE_MAX_PENALTY * _unit(player.fatigue)
        if player.injury_risk is not None:
            multiplier *= 1.0 - self.INJURY_RISK_MAX_PENALTY * _unit(player.injury_risk)
        return multiplier

    def get_age_penalty(self, player: Player) -> float:
        if player.age is None:
            return 0.0
        if player.age < self.PEAK_AGE_MIN:
            years = self.PEAK_AGE_MIN - player.age
        elif player.age > self.PEAK_AGE_MAX:
            years = player.age - self.PEAK_AGE_MAX
        else:
            return 0.0
        return min(self.AGE_PENALTY_CAP, years * self.AGE_PENALTY_PER_YEAR)

    def apply(self, player: Player, score: float) -> float:
        """Adjusted score, unclamped."""
        adjusted = score + self.get_morale_form_bonus(player)
        adjusted *= self.get_availability_multiplier(player)
        adjusted *= self.get_fitness_multiplier(player)
        return adjusted - self.get_age_penalty(player)


def _unit(value: float) -> float:
    """0-100 percentage as a 0-1 fraction, clamped."""
    return min(1.0, max(0.0, value / 100.0))
