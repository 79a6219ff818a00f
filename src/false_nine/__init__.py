"""Formation auto-assignment and analysis engine."""

from false_nine.models import Formation, FormationSlot, Player
from false_nine.services import AutoAssignmentService, ConflictResolver, FormationAnalyzer

__version__ = "0.1.0"

__all__ = [
    "Formation",
    "FormationSlot",
    "Player",
    "AutoAssignmentService",
    "ConflictResolver",
    "FormationAnalyzer",
]
