"""Automatic assignment of a roster to formation slots."""
import logging
import time
from dataclasses import replace
from typing import Optional

from false_nine.config import Settings, get_settings
from false_nine.models.formation import Formation
from false_nine.models.player import Player
from false_nine.models.scoring import ScoreEntry
from false_nine.services.scorers.player_slot_scorer import PlayerSlotScorer

logger = logging.getLogger(__name__)


class AutoAssignmentService:
    """Fills a formation with the best-suited players of one team.

    Greedy strategy: score every (player, slot) pair, then repeatedly take the
    highest-scoring pair whose player and slot are both still free. Not a
    maximum-weight matching, but deterministic and O(n log n) in the number of
    pairs.

    Equal scores are broken by, in order:
    1. Available players before unavailable ones
    2. Higher form + morale bonus
    3. Earlier roster position
    4. Earlier slot position
    """

    def __init__(
        self,
        scorer: Optional[PlayerSlotScorer] = None,
        settings: Optional[Settings] = None,
    ):
        self.scorer = scorer or PlayerSlotScorer()
        self.settings = settings or get_settings()

    def assign(self, players: list[Player], formation: Formation, team: str) -> Formation:
        """Return a new formation with slots filled from ``team``'s players.

        Existing occupants are cleared first. Slots left over once players run
        out keep ``player_id=None``. Inputs are never mutated.
        """
        start = time.perf_counter()

        team_players = [p for p in players if p.team == team]
        assignments = self.get_assignments(team_players, formation)

        new_slots = [slot.with_player(assignments.get(slot.id)) for slot in formation.slots]

        elapsed_ms = (time.perf_counter() - start) * 1000
        if elapsed_ms > self.settings.slow_assignment_ms:
            logger.warning(
                f"Slow formation assignment: {elapsed_ms:.2f}ms for {len(team_players)} players"
            )
        logger.debug(
            f"Assigned {len(assignments)}/{len(formation.slots)} slots "
            f"in formation {formation.id} for team {team}"
        )

        return formation.with_slots(new_slots)

    def get_assignments(self, players: list[Player], formation: Formation) -> dict[str, str]:
        """Greedy slot_id -> player_id mapping for already-filtered players."""
        if not players or not formation.slots:
            return {}

        ranked = sorted(self._candidates(players, formation), key=lambda c: c[0])

        assignments: dict[str, str] = {}
        used_players: set[str] = set()
        capacity = min(len(players), len(formation.slots))

        for _, entry in ranked:
            if entry.slot_id in assignments or entry.player_id in used_players:
                continue
            assignments[entry.slot_id] = entry.player_id
            used_players.add(entry.player_id)
            if len(assignments) == capacity:
                break

        return assignments

    def _candidates(
        self, players: list[Player], formation: Formation
    ) -> list[tuple[tuple, ScoreEntry]]:
        """Score entries paired with their sort key (ascending = best first)."""
        condition = self.scorer.condition_scorer
        candidates = []
        for player_index, player in enumerate(players):
            available_rank = 0 if condition.is_available(player) else 1
            bonus = condition.get_morale_form_bonus(player)
            for slot_index, slot in enumerate(formation.slots):
                entry = self.scorer.score_entry(player, slot)
                key = (-entry.score, available_rank, -bonus, player_index, slot_index)
                candidates.append((key, entry))
        return candidates

    def update_player_positions(
        self, players: list[Player], formation: Formation, team: str
    ) -> list[Player]:
        """Move each assigned player of ``team`` to their slot's default position.

        Returns a new list; players of the other team or without a slot are
        returned as-is.
        """
        slot_positions = {
            slot.player_id: slot.default_position
            for slot in formation.slots
            if slot.player_id
        }

        updated = []
        for player in players:
            if player.team == team and player.id in slot_positions:
                updated.append(replace(player, position=slot_positions[player.id]))
            else:
                updated.append(player)
        return updated
