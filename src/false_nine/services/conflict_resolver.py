"""Conflict resolution when a player is dropped onto an occupied slot."""
import logging
from typing import Optional

from false_nine.config import Settings, get_settings
from false_nine.models.conflict import ConflictResolution, SwapRecommendation
from false_nine.models.formation import Formation, FormationSlot
from false_nine.models.player import Player
from false_nine.services.scorers.player_slot_scorer import PlayerSlotScorer

logger = logging.getLogger(__name__)


class ConflictResolver:
    """Suggests how to make room for a player in an occupied slot.

    Options, ranked by estimated net change in lineup score:
    - move_to_bench: drop the occupant from the lineup (always offered)
    - swap: trade slots with the occupant (both players must score above the swap
      floor in the other's slot, which keeps the option symmetric)
    - reassign: move the occupant to the best empty slot, if it scores above
      the reassign floor

    Recommendations are descriptive only; applying one is up to the caller.
    """

    def __init__(
        self,
        scorer: Optional[PlayerSlotScorer] = None,
        settings: Optional[Settings] = None,
    ):
        self.scorer = scorer or PlayerSlotScorer()
        settings = settings or get_settings()
        self.swap_min_score = settings.swap_min_score
        self.reassign_min_score = settings.reassign_min_score

    def resolve(
        self,
        source_player_id: str,
        target_slot_id: str,
        target_player_id: str,
        formation: Formation,
        players: list[Player],
    ) -> ConflictResolution:
        """Rank the ways to place ``source_player_id`` into ``target_slot_id``.

        Returns ``success=False`` with no recommendations when any id does not
        resolve (including an empty target player id).
        """
        players_by_id = {p.id: p for p in players}
        source = players_by_id.get(source_player_id) if source_player_id else None
        target = players_by_id.get(target_player_id) if target_player_id else None
        target_slot = formation.get_slot(target_slot_id) if target_slot_id else None

        if source is None or target is None or target_slot is None:
            logger.debug(
                f"Conflict check rejected: source={source_player_id!r} "
                f"slot={target_slot_id!r} occupant={target_player_id!r}"
            )
            return ConflictResolution(success=False)

        if source.id == target.id:
            return ConflictResolution(success=True, recommendations=[])

        source_slot = formation.slot_of(source.id)
        if source_slot is not None and source_slot.id == target_slot.id:
            source_slot = None

        source_in_target = self.scorer.score(source, target_slot)
        # Lineup score the move gives up before any compensation
        baseline = self.scorer.score(target, target_slot)
        if source_slot is not None:
            baseline += self.scorer.score(source, source_slot)

        recommendations: list[SwapRecommendation] = []

        if source_slot is not None:
            swap = self._swap_option(source, target, source_slot, source_in_target, baseline)
            if swap:
                recommendations.append(swap)

        recommendations.append(
            SwapRecommendation(
                action="move_to_bench",
                description=(
                    f"Move {target.name} to bench and place {source.name} "
                    f"in {target_slot.role} position (score: {source_in_target})"
                ),
                score=source_in_target,
                score_delta=source_in_target - baseline,
            )
        )

        reassign = self._reassign_option(target, target_slot, formation, source_in_target, baseline)
        if reassign:
            recommendations.append(reassign)

        recommendations.sort(key=lambda r: r.score_delta, reverse=True)
        return ConflictResolution(success=True, recommendations=recommendations)

    def _swap_option(
        self,
        source: Player,
        target: Player,
        source_slot: FormationSlot,
        source_in_target: int,
        baseline: int,
    ) -> Optional[SwapRecommendation]:
        target_in_source = self.scorer.score(target, source_slot)
        if source_in_target <= self.swap_min_score or target_in_source <= self.swap_min_score:
            return None

        combined = source_in_target + target_in_source
        return SwapRecommendation(
            action="swap",
            description=f"Swap {source.name} and {target.name} (score: {combined})",
            target_slot_id=source_slot.id,
            score=combined,
            score_delta=combined - baseline,
        )

    def _reassign_option(
        self,
        target: Player,
        target_slot: FormationSlot,
        formation: Formation,
        source_in_target: int,
        baseline: int,
    ) -> Optional[SwapRecommendation]:
        alternatives = [
            (self.scorer.score(target, slot), slot)
            for slot in formation.empty_slots
            if slot.id != target_slot.id
        ]
        if not alternatives:
            return None

        best_score, best_slot = max(alternatives, key=lambda alt: alt[0])
        if best_score <= self.reassign_min_score:
            return None

        return SwapRecommendation(
            action="reassign",
            description=f"Move {target.name} to {best_slot.role} position (score: {best_score})",
            target_slot_id=best_slot.id,
            score=best_score,
            score_delta=source_in_target + best_score - baseline,
        )
