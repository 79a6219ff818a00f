"""Centralized role catalog.

Maps every fine-grained playing role (cb, dlp, cf, ...) to the coarse slot
category it belongs to (GK, DF, MF, FW). All role lookups in the codebase
should go through this module so the compatibility rules stay data-driven.
"""

from typing import Optional

# Pitch lines ordered from own goal outwards. Adjacent lines are one step apart.
CATEGORY_ORDER = ("GK", "DF", "MF", "FW")

CATEGORIES = frozenset(CATEGORY_ORDER)

# Coarse category -> ordered (role_id, weight) entries.
# Weight is how firmly a role belongs to its line: hybrid roles (wing-backs,
# holding midfielders, wide midfielders) sit closer to a neighbouring line and
# lose less when played out of category.
ROLE_CATALOG: dict[str, tuple[tuple[str, float], ...]] = {
    "GK": (
        ("gk", 1.0),
        ("sk", 1.0),
    ),
    "DF": (
        ("cb", 1.0),
        ("ncb", 1.0),
        ("bpd", 0.9),
        ("fb", 0.85),
        ("wb", 0.7),
    ),
    "MF": (
        ("cm", 1.0),
        ("b2b", 1.0),
        ("dlp", 0.9),
        ("dm", 0.8),
        ("ap", 0.8),
        ("wm", 0.75),
    ),
    "FW": (
        ("cf", 1.0),
        ("p", 1.0),
        ("tf", 1.0),
        ("iw", 0.8),
        ("w", 0.75),
    ),
}

# Common long-form and positional aliases seen in imported rosters
ROLE_ALIASES: dict[str, str] = {
    "goalkeeper": "gk",
    "sweeper keeper": "sk",
    "centre back": "cb",
    "center back": "cb",
    "no-nonsense centre back": "ncb",
    "ball playing defender": "bpd",
    "full back": "fb",
    "fullback": "fb",
    "lb": "fb",
    "rb": "fb",
    "wing back": "wb",
    "wingback": "wb",
    "lwb": "wb",
    "rwb": "wb",
    "defensive midfielder": "dm",
    "cdm": "dm",
    "deep lying playmaker": "dlp",
    "central midfielder": "cm",
    "box to box": "b2b",
    "advanced playmaker": "ap",
    "cam": "ap",
    "wide midfielder": "wm",
    "lm": "wm",
    "rm": "wm",
    "winger": "w",
    "lw": "w",
    "rw": "w",
    "inside forward": "iw",
    "poacher": "p",
    "target forward": "tf",
    "striker": "cf",
    "st": "cf",
    "centre forward": "cf",
    "center forward": "cf",
}

# Fine role -> (category, weight), derived once from the catalog
_ROLE_INDEX: dict[str, tuple[str, float]] = {
    role_id: (category, weight)
    for category, entries in ROLE_CATALOG.items()
    for role_id, weight in entries
}


def normalize_role(role: Optional[str]) -> Optional[str]:
    """Normalize a role string to its catalog id.

    Examples:
        >>> normalize_role("CB")
        'cb'
        >>> normalize_role("Striker")
        'cf'
        >>> normalize_role("libero")
        None
    """
    if not role:
        return None

    role_lower = role.strip().lower()
    if role_lower in _ROLE_INDEX:
        return role_lower
    return ROLE_ALIASES.get(role_lower)


def normalize_category(category: Optional[str]) -> Optional[str]:
    """Normalize a slot category (``"df"`` -> ``"DF"``), None if unknown."""
    if not category:
        return None
    category_upper = category.strip().upper()
    return category_upper if category_upper in CATEGORIES else None


def normalize_category_strict(category: str) -> str:
    """Normalize a slot category, raising ValueError if unknown."""
    normalized = normalize_category(category)
    if normalized is None:
        raise ValueError(f"Unknown slot category: {category}")
    return normalized


def get_role_category(role: Optional[str]) -> Optional[str]:
    """Coarse category for a fine role, or None for unknown roles."""
    role_id = normalize_role(role)
    if role_id is None:
        return None
    return _ROLE_INDEX[role_id][0]


def get_role_weight(role: Optional[str]) -> float:
    """Category weight for a fine role (1.0 for unknown roles)."""
    role_id = normalize_role(role)
    if role_id is None:
        return 1.0
    return _ROLE_INDEX[role_id][1]


def get_category_roles(category: str) -> list[str]:
    """Fine role ids belonging to a category, in catalog order."""
    normalized = normalize_category(category)
    if normalized is None:
        return []
    return [role_id for role_id, _ in ROLE_CATALOG[normalized]]


def category_distance(first: Optional[str], second: Optional[str]) -> Optional[int]:
    """Number of pitch lines between two categories (GK-DF-MF-FW).

    Returns None when either category is unknown.
    """
    a = normalize_category(first)
    b = normalize_category(second)
    if a is None or b is None:
        return None
    return abs(CATEGORY_ORDER.index(a) - CATEGORY_ORDER.index(b))
