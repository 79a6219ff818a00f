"""Attribute-based fitness for a slot's line."""
from typing import Optional

from false_nine.models.player import PlayerAttributes
from false_nine.utils.role_catalog import normalize_category


class AttributeScorer:
    """Weighted mean of the skills that matter for each line."""

    CATEGORY_WEIGHTS: dict[str, dict[str, float]] = {
        "GK": {"positioning": 0.7, "passing": 0.2, "speed": 0.1},
        "DF": {"tackling": 0.4, "positioning": 0.3, "speed": 0.2},
        "MF": {"passing": 0.4, "stamina": 0.2, "positioning": 0.2, "dribbling": 0.2},
        "FW": {"shooting": 0.4, "speed": 0.3, "dribbling": 0.3},
    }

    def get_fit(self, attributes: Optional[PlayerAttributes], category: str) -> float:
        """Fitness 0-100. Missing attributes count as 0."""
        weights = self.CATEGORY_WEIGHTS.get(normalize_category(category) or "")
        if not weights:
            return 0.0

        attributes = attributes or PlayerAttributes()
        total_weight = sum(weights.values())
        weighted = sum(
            min(100.0, max(0.0, attributes.get(name))) * weight
            for name, weight in weights.items()
        )
        return weighted / total_weight
