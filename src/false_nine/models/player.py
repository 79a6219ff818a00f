"""Player models."""

from dataclasses import dataclass, field
from typing import Any, Optional

from false_nine.utils.condition_scales import AVAILABLE, NEUTRAL_FORM, NEUTRAL_MORALE

ATTRIBUTE_NAMES = (
    "speed",
    "passing",
    "tackling",
    "shooting",
    "dribbling",
    "positioning",
    "stamina",
)


def _as_number(value: Any, default: float = 0.0) -> float:
    """Coerce a raw record value to float, falling back to ``default``."""
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_optional_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    number = _as_number(value, default=float("nan"))
    return None if number != number else number


def _as_label(value: Any, default: str) -> str:
    """Non-empty string label, or ``default``."""
    if isinstance(value, str) and value.strip():
        return value
    return default


@dataclass(frozen=True)
class PitchPosition:
    """Point on the normalized 0-100 pitch grid."""

    x: float
    y: float

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional["PitchPosition"]:
        if not isinstance(data, dict):
            return None
        return cls(x=_as_number(data.get("x")), y=_as_number(data.get("y")))


@dataclass
class PlayerAttributes:
    """Technical and physical skills, each 0-100."""

    speed: float = 0.0
    passing: float = 0.0
    tackling: float = 0.0
    shooting: float = 0.0
    dribbling: float = 0.0
    positioning: float = 0.0
    stamina: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "PlayerAttributes":
        """Build from a raw mapping; missing or invalid skills become 0."""
        if not isinstance(data, dict):
            return cls()
        return cls(**{name: _as_number(data.get(name)) for name in ATTRIBUTE_NAMES})

    def get(self, name: str) -> float:
        return getattr(self, name, 0.0)


@dataclass
class Availability:
    """Fitness/eligibility status of a player."""

    status: str = AVAILABLE  # Available, Minor Injury, Major Injury, Suspended, ...
    return_date: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "Availability":
        if not isinstance(data, dict):
            return cls()
        status = data.get("status") or AVAILABLE
        return cls(status=str(status), return_date=data.get("returnDate", data.get("return_date")))


@dataclass
class Player:
    """A squad member as seen by the assignment engine.

    Only the fields the engine reads are modelled. The engine treats players as
    read-only and returns new instances when a field has to change.
    """

    id: str
    team: str  # "home" or "away"
    role_id: str  # Fine-grained role: gk, cb, dlp, cf, ...
    name: str = ""
    attributes: PlayerAttributes = field(default_factory=PlayerAttributes)
    availability: Availability = field(default_factory=Availability)
    form: str = NEUTRAL_FORM
    morale: str = NEUTRAL_MORALE
    age: Optional[int] = None
    fatigue: Optional[float] = None  # 0-100
    injury_risk: Optional[float] = None  # 0-100
    position: Optional[PitchPosition] = None

    def __post_init__(self):
        if not self.name:
            self.name = self.id

    @property
    def availability_status(self) -> str:
        """Status label, treating a missing availability record as Available."""
        if self.availability is None:
            return AVAILABLE
        return self.availability.status or AVAILABLE

    @classmethod
    def from_dict(cls, data: dict) -> "Player":
        """Build a player from a raw roster record.

        Accepts camelCase (``roleId``, ``injuryRisk``) or snake_case keys.
        Missing or null optional fields get neutral defaults.
        """
        age = _as_optional_number(data.get("age"))
        position = data.get("position")
        return cls(
            id=str(data["id"]),
            team=str(data.get("team") or ""),
            role_id=str(data.get("roleId") or data.get("role_id") or ""),
            name=str(data.get("name") or ""),
            attributes=PlayerAttributes.from_dict(data.get("attributes")),
            availability=Availability.from_dict(data.get("availability")),
            form=_as_label(data.get("form"), NEUTRAL_FORM),
            morale=_as_label(data.get("morale"), NEUTRAL_MORALE),
            age=int(age) if age is not None else None,
            fatigue=_as_optional_number(data.get("fatigue")),
            injury_risk=_as_optional_number(data.get("injuryRisk", data.get("injury_risk"))),
            position=position if isinstance(position, PitchPosition) else PitchPosition.from_dict(position),
        )
