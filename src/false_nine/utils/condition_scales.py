"""Numeric weights for categorical player condition scales.

Form, morale and availability are recorded as labels on a player. Each scale is
kept as a single ordered table here so scorers never compare labels inline.
"""

from typing import Optional

AVAILABLE = "Available"

# Best to worst. Form and morale share the scale but use different middle labels.
FORM_LEVELS = ("Excellent", "Good", "Average", "Poor", "Very Poor", "Terrible")
MORALE_LEVELS = ("Excellent", "Good", "Okay", "Poor", "Very Poor", "Terrible")

NEUTRAL_FORM = "Average"
NEUTRAL_MORALE = "Okay"

# Additive score points
FORM_MODIFIERS: dict[str, float] = {
    "Excellent": 5.0,
    "Good": 2.0,
    "Average": 0.0,
    "Poor": -4.0,
    "Very Poor": -7.0,
    "Terrible": -10.0,
}

MORALE_MODIFIERS: dict[str, float] = {
    "Excellent": 4.0,
    "Good": 1.0,
    "Okay": 0.0,
    "Poor": -3.0,
    "Very Poor": -5.0,
    "Terrible": -8.0,
}

# Multipliers, ordered by severity
AVAILABILITY_MULTIPLIERS: dict[str, float] = {
    "Available": 1.0,
    "Minor Injury": 0.75,
    "International Duty": 0.6,
    "Major Injury": 0.35,
    "Suspended": 0.2,
}

# Any other non-Available status
UNKNOWN_STATUS_MULTIPLIER = 0.5

# Aliases accepted on import. "Average" and "Okay" are interchangeable.
_LEVEL_ALIASES = {
    "excellent": "Excellent",
    "good": "Good",
    "average": "Average",
    "okay": "Okay",
    "ok": "Okay",
    "poor": "Poor",
    "very poor": "Very Poor",
    "terrible": "Terrible",
}


_STATUS_LOOKUP = {status.lower(): status for status in AVAILABILITY_MULTIPLIERS}


def canonical_level(level: Optional[str]) -> Optional[str]:
    """Canonical form/morale label, None for missing or unrecognised values."""
    if not isinstance(level, str) or not level.strip():
        return None
    return _LEVEL_ALIASES.get(" ".join(level.lower().split()))


def canonical_status(status: Optional[str]) -> Optional[str]:
    """Canonical availability label; unrecognised labels are returned trimmed."""
    if not isinstance(status, str) or not status.strip():
        return None
    cleaned = " ".join(status.split())
    return _STATUS_LOOKUP.get(cleaned.lower(), cleaned)


def form_modifier(form: Optional[str]) -> float:
    """Score points for a form label (0 for unknown/missing)."""
    level = canonical_level(form)
    if level == "Okay":
        level = NEUTRAL_FORM
    return FORM_MODIFIERS.get(level, 0.0) if level else 0.0


def morale_modifier(morale: Optional[str]) -> float:
    """Score points for a morale label (0 for unknown/missing)."""
    level = canonical_level(morale)
    if level == "Average":
        level = NEUTRAL_MORALE
    return MORALE_MODIFIERS.get(level, 0.0) if level else 0.0


def is_available(status: Optional[str]) -> bool:
    """Missing status counts as available."""
    return canonical_status(status) in (None, AVAILABLE)


def availability_multiplier(status: Optional[str]) -> float:
    """Score multiplier for an availability status."""
    if is_available(status):
        return 1.0
    return AVAILABILITY_MULTIPLIERS.get(canonical_status(status), UNKNOWN_STATUS_MULTIPLIER)
