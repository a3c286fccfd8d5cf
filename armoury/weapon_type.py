"""
Weapon Type Classifier

Detects a weapon's type from its display name or from its WeapType
keywords. Name detection knows the vanilla weapon vocabulary; keyword
detection only knows the animated weapon types.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from armoury.interfaces import IKeywordResolver, IWeaponRecord
from armoury.keyword_cache import iter_keyword_names

logger = logging.getLogger(__name__)


# Name patterns: (phrases, weapon_type), checked in order.
# "greatsword" sits before "sword" so a greatsword never reports as a sword.
NAME_PATTERNS: List[Tuple[Tuple[str, ...], str]] = [
    (("dagger",), "dagger"),
    (("greatsword",), "greatsword"),
    (("sword",), "sword"),
    (("war axe", "waraxe"), "waraxe"),
    (("mace",), "mace"),
    (("battleaxe", "battle axe"), "battleaxe"),
    (("warhammer", "war hammer"), "warhammer"),
    (("spear",), "spear"),
    (("halberd",), "halberd"),
    (("quarterstaff", "quarter staff"), "quarterstaff"),
    (("claw",), "claw"),
]

# Exact (lowercase) keyword short names
KEYWORD_TYPES: Dict[str, str] = {
    "weaptypeclaw": "claw",
    "weaptypehalberd": "halberd",
    "weaptypekatana": "katana",
    "weaptypepike": "pike",
    "weaptypeqtrstaff": "quarterstaff",
    "weaptyperapier": "rapier",
    "weaptypewhip": "whip",
}


def detect_type_from_name(name: Optional[str]) -> Optional[str]:
    """
    Detect a weapon type from a display name.

    Args:
        name: Display name, e.g. "Ancient Nord Battleaxe"

    Returns:
        Weapon type, or None if the name is empty or matches nothing
    """
    if not name:
        return None

    lowered = name.lower()
    for phrases, weapon_type in NAME_PATTERNS:
        if any(phrase in lowered for phrase in phrases):
            return weapon_type
    return None


def detect_type_from_keywords(
    weapon: IWeaponRecord,
    keyword_resolver: IKeywordResolver,
) -> Optional[str]:
    """
    Detect a weapon type from the weapon's WeapType keywords.

    Returns:
        The first matching weapon type in keyword order, or None
    """
    for keyword_name in iter_keyword_names(weapon, keyword_resolver):
        weapon_type = KEYWORD_TYPES.get(keyword_name)
        if weapon_type is not None:
            logger.debug(f"Keyword {keyword_name!r} marks {weapon.short_name!r} as {weapon_type}")
            return weapon_type
    return None
