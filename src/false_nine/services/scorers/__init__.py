"""Core scoring components for the assignment engine."""
from false_nine.services.scorers.role_compatibility_scorer import RoleCompatibilityScorer
from false_nine.services.scorers.attribute_scorer import AttributeScorer
from false_nine.services.scorers.condition_scorer import ConditionScorer
from false_nine.services.scorers.player_slot_scorer import PlayerSlotScorer

__all__ = [
    "RoleCompatibilityScorer",
    "AttributeScorer",
    "ConditionScorer",
    "PlayerSlotScorer",
]
