"""Assignment, conflict resolution and analysis services."""

from false_nine.services.auto_assignment_service import AutoAssignmentService
from false_nine.services.conflict_resolver import ConflictResolver
from false_nine.services.formation_analyzer import FormationAnalyzer

__all__ = [
    "AutoAssignmentService",
    "ConflictResolver",
    "FormationAnalyzer",
]
