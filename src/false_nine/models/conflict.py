"""Conflict resolution result models."""

from dataclasses import asdict, dataclass
from typing import Literal, Optional

SwapAction = Literal["swap", "move_to_bench", "reassign"]


@dataclass
class SwapRecommendation:
    """One way to make room for a player dropped onto an occupied slot.

    ``target_slot_id`` is where the displaced occupant ends up: the source
    player's old slot for a swap, an empty slot for a reassign, None for the
    bench.
    """

    action: SwapAction
    description: str
    target_slot_id: Optional[str] = None
    score: int = 0  # Placement score(s) the action produces
    score_delta: int = 0  # Estimated net change in lineup score


@dataclass
class ConflictResolution:
    """Outcome of a conflict check. ``recommendations`` is None on failure."""

    success: bool
    recommendations: Optional[list[SwapRecommendation]] = None

    def to_dict(self) -> dict:
        data: dict = {"success": self.success}
        if self.recommendations is not None:
            data["recommendations"] = [asdict(r) for r in self.recommendations]
        return data
