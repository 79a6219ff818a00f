"""Shared roster and formation fixtures."""
import pytest

from false_nine.models import Formation, Player


def _player(**overrides) -> dict:
    record = {
        "team": "home",
        "availability": {"status": "Available"},
        "morale": "Okay",
        "form": "Average",
    }
    record.update(overrides)
    return record


ROSTER = [
    _player(
        id="gk-1",
        name="Manuel Neuer",
        roleId="gk",
        attributes={
            "speed": 45, "passing": 70, "tackling": 20, "shooting": 15,
            "dribbling": 40, "positioning": 95, "stamina": 80,
        },
        morale="Excellent",
        form="Good",
        position={"x": 5, "y": 50},
    ),
    _player(
        id="cb-1",
        name="Virgil van Dijk",
        roleId="cb",
        attributes={
            "speed": 75, "passing": 82, "tackling": 92, "shooting": 45,
            "dribbling": 70, "positioning": 90, "stamina": 85,
        },
        morale="Excellent",
        form="Excellent",
        position={"x": 20, "y": 40},
    ),
    _player(
        id="cm-1",
        name="Kevin De Bruyne",
        roleId="cm",
        attributes={
            "speed": 70, "passing": 96, "tackling": 65, "shooting": 88,
            "dribbling": 85, "positioning": 88, "stamina": 80,
        },
        morale="Good",
        form="Excellent",
        position={"x": 45, "y": 50},
    ),
    _player(
        id="fw-1",
        name="Erling Haaland",
        roleId="cf",
        attributes={
            "speed": 92, "passing": 65, "tackling": 40, "shooting": 95,
            "dribbling": 78, "positioning": 90, "stamina": 85,
        },
        morale="Excellent",
        form="Excellent",
        position={"x": 85, "y": 50},
    ),
    _player(
        id="injured-1",
        name="Injured Player",
        roleId="cm",
        attributes={
            "speed": 75, "passing": 85, "tackling": 70, "shooting": 80,
            "dribbling": 85, "positioning": 80, "stamina": 80,
        },
        availability={"status": "Major Injury", "returnDate": "2024-02-15"},
        morale="Poor",
        form="Poor",
        position={"x": 50, "y": 90},
    ),
]

FORMATION = {
    "id": "test-formation",
    "name": "Test Formation",
    "slots": [
        {"id": "gk-slot", "role": "GK", "defaultPosition": {"x": 10, "y": 50},
         "playerId": None, "preferredRoles": ["gk", "sk"]},
        {"id": "cb-1-slot", "role": "DF", "defaultPosition": {"x": 25, "y": 35},
         "playerId": None, "preferredRoles": ["cb", "bpd"]},
        {"id": "cb-2-slot", "role": "DF", "defaultPosition": {"x": 25, "y": 65},
         "playerId": None, "preferredRoles": ["cb", "ncb"]},
        {"id": "cm-slot", "role": "MF", "defaultPosition": {"x": 50, "y": 50},
         "playerId": None, "preferredRoles": ["cm", "dlp", "ap"]},
        {"id": "fw-slot", "role": "FW", "defaultPosition": {"x": 80, "y": 50},
         "playerId": None, "preferredRoles": ["cf", "tf"]},
    ],
}


@pytest.fixture
def roster_records() -> list[dict]:
    return [dict(record) for record in ROSTER]


@pytest.fixture
def players(roster_records) -> list[Player]:
    return [Player.from_dict(record) for record in roster_records]


@pytest.fixture
def players_by_id(players) -> dict[str, Player]:
    return {p.id: p for p in players}


@pytest.fixture
def formation() -> Formation:
    """Empty five-slot formation."""
    return Formation.from_dict(FORMATION)


def _occupy(formation: Formation, assignments: dict[str, str | None]) -> Formation:
    """Copy of ``formation`` with the given slot -> player assignments."""
    return formation.with_slots([
        slot.with_player(assignments.get(slot.id, slot.player_id))
        for slot in formation.slots
    ])


@pytest.fixture
def occupy():
    return _occupy


@pytest.fixture
def lineup(formation) -> Formation:
    """Four of five slots filled; cb-2-slot left empty."""
    return _occupy(formation, {
        "gk-slot": "gk-1",
        "cb-1-slot": "cb-1",
        "cm-slot": "cm-1",
        "fw-slot": "fw-1",
    })
