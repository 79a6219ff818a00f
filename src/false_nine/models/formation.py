"""Formation and slot models."""

from dataclasses import dataclass, field, replace
from typing import Optional

from false_nine.models.player import PitchPosition
from false_nine.utils.role_catalog import normalize_category_strict, normalize_role


@dataclass
class FormationSlot:
    """A single position in a formation."""

    id: str
    role: str  # Coarse category: GK, DF, MF, FW
    default_position: PitchPosition = field(default_factory=lambda: PitchPosition(50.0, 50.0))
    player_id: Optional[str] = None
    preferred_roles: list[str] = field(default_factory=list)  # Fine role ids, best first

    def __post_init__(self):
        if self.preferred_roles is None:
            self.preferred_roles = []

    def with_player(self, player_id: Optional[str]) -> "FormationSlot":
        """Copy of this slot with a different occupant."""
        return replace(self, player_id=player_id, preferred_roles=list(self.preferred_roles))

    @classmethod
    def from_dict(cls, data: dict) -> "FormationSlot":
        """Build from a raw record; raises ValueError on an unknown category."""
        preferred = data.get("preferredRoles", data.get("preferred_roles")) or []
        position = PitchPosition.from_dict(
            data.get("defaultPosition", data.get("default_position"))
        )
        player_id = data.get("playerId", data.get("player_id"))
        return cls(
            id=str(data["id"]),
            role=normalize_category_strict(data["role"]),
            default_position=position or PitchPosition(50.0, 50.0),
            player_id=str(player_id) if player_id else None,
            preferred_roles=[normalize_role(r) or r.lower() for r in preferred if r],
        )


@dataclass
class Formation:
    """A named, ordered list of slots.

    Preconditions (not checked): slot ids are unique and no player id appears
    in more than one slot.
    """

    id: str
    name: str
    slots: list[FormationSlot] = field(default_factory=list)

    def get_slot(self, slot_id: str) -> Optional[FormationSlot]:
        return next((s for s in self.slots if s.id == slot_id), None)

    def slot_of(self, player_id: str) -> Optional[FormationSlot]:
        """Slot currently holding ``player_id``, if any."""
        if not player_id:
            return None
        return next((s for s in self.slots if s.player_id == player_id), None)

    @property
    def assigned_player_ids(self) -> list[str]:
        return [s.player_id for s in self.slots if s.player_id]

    @property
    def empty_slots(self) -> list[FormationSlot]:
        return [s for s in self.slots if not s.player_id]

    def with_slots(self, slots: list[FormationSlot]) -> "Formation":
        return replace(self, slots=slots)

    @classmethod
    def from_dict(cls, data: dict) -> "Formation":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            slots=[FormationSlot.from_dict(s) for s in data.get("slots") or []],
        )
