"""Base role compatibility between a player's role and a formation slot."""
from typing import Optional

from false_nine.models.formation import FormationSlot
from false_nine.utils.role_catalog import (
    category_distance,
    get_role_category,
    get_role_weight,
    normalize_role,
)


class RoleCompatibilityScorer:
    """Scores how naturally a fine-grained role fills a slot.

    Ordering, highest first:
    - Role listed in the slot's preferred roles (earlier entries score higher)
    - Role from the slot's own line (GK/DF/MF/FW)
    - Role from an adjacent line, then two lines away, then three
    - Unknown role

    Out-of-line penalties grow with line distance. Only the step from the
    previous distance is scaled by the role's catalog weight, so hybrid roles
    (a wing-back covering midfield) lose less than pure ones without ever
    catching up with a role one line closer.
    """

    PREFERRED_ROLE_SCORE = 100.0
    PREFERRED_ROLE_STEP = 2.0
    PREFERRED_ROLE_FLOOR = 92.0
    SAME_CATEGORY_SCORE = 90.0
    UNKNOWN_ROLE_SCORE = 0.0

    # Lines between player category and slot category -> deduction
    DISTANCE_PENALTIES = {1: 35.0, 2: 60.0, 3: 80.0}

    FAMILIARITY_PREFERRED = 100
    FAMILIARITY_SAME_CATEGORY = 75
    FAMILIARITY_OTHER = 50

    def preferred_index(self, role_id: Optional[str], slot: FormationSlot) -> Optional[int]:
        """Position of the role in ``slot.preferred_roles``, None if absent."""
        role = normalize_role(role_id) or (role_id or "").strip().lower()
        if not role:
            return None
        for index, preferred in enumerate(slot.preferred_roles or []):
            if (normalize_role(preferred) or preferred.lower()) == role:
                return index
        return None

    def is_preferred(self, role_id: Optional[str], slot: FormationSlot) -> bool:
        return self.preferred_index(role_id, slot) is not None

    def get_base_score(self, role_id: Optional[str], slot: FormationSlot) -> float:
        """Base compatibility, 0-100."""
        index = self.preferred_index(role_id, slot)
        if index is not None:
            return max(
                self.PREFERRED_ROLE_FLOOR,
                self.PREFERRED_ROLE_SCORE - self.PREFERRED_ROLE_STEP * index,
            )

        distance = category_distance(get_role_category(role_id), slot.role)
        if distance is None:
            return self.UNKNOWN_ROLE_SCORE
        if distance == 0:
            return self.SAME_CATEGORY_SCORE

        previous = self.DISTANCE_PENALTIES.get(distance - 1, 0.0)
        step = self.DISTANCE_PENALTIES[distance] - previous
        penalty = previous + step * get_role_weight(role_id)
        return max(0.0, self.SAME_CATEGORY_SCORE - penalty)

    def familiarity(self, role_id: Optional[str], slot: FormationSlot) -> int:
        """Coarse familiarity rating used in analysis output."""
        if self.is_preferred(role_id, slot):
            return self.FAMILIARITY_PREFERRED
        if category_distance(get_role_category(role_id), slot.role) == 0:
            return self.FAMILIARITY_SAME_CATEGORY
        return self.FAMILIARITY_OTHER
