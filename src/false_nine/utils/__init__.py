"""Utility modules for false_nine."""

from false_nine.utils.role_catalog import (
    CATEGORY_ORDER,
    ROLE_ALIASES,
    ROLE_CATALOG,
    category_distance,
    get_category_roles,
    get_role_category,
    get_role_weight,
    normalize_category,
    normalize_category_strict,
    normalize_role,
)
from false_nine.utils.condition_scales import (
    AVAILABILITY_MULTIPLIERS,
    FORM_MODIFIERS,
    MORALE_MODIFIERS,
    availability_multiplier,
    canonical_level,
    canonical_status,
    form_modifier,
    is_available,
    morale_modifier,
)

__all__ = [
    "CATEGORY_ORDER",
    "ROLE_ALIASES",
    "ROLE_CATALOG",
    "category_distance",
    "get_category_roles",
    "get_role_category",
    "get_role_weight",
    "normalize_category",
    "normalize_category_strict",
    "normalize_role",
    "AVAILABILITY_MULTIPLIERS",
    "FORM_MODIFIERS",
    "MORALE_MODIFIERS",
    "availability_multiplier",
    "canonical_level",
    "canonical_status",
    "form_modifier",
    "is_available",
    "morale_modifier",
]
