"""
Material Classifier

Derives a weapon's material from its short name or its keywords.

Detection runs two ordered rule tables:
- NAME_RULES look at the short name only (lore exceptions, bound weapons)
- KEYWORD_RULES look at each resolved keyword in order

The first rule that produces a material wins; anything undetected is steel.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from armoury.constants import (
    BOUND_MARKER,
    DEFAULT_MATERIAL,
    DRAGON_PRIEST_CLAWS,
    MATERIAL_MARKER,
    MYSTIC_MARKER,
    WACCF_MATERIAL_MARKER,
)
from armoury.interfaces import IKeywordResolver, IWeaponRecord
from armoury.keyword_cache import iter_keyword_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameRule:
    """Short-name rule: if ``matches`` holds, the weapon is ``material``."""
    name: str
    matches: Callable[[str], bool]
    material: str


@dataclass(frozen=True)
class KeywordRule:
    """Keyword rule: ``extract`` returns a material or None to fall through."""
    name: str
    extract: Callable[[str], Optional[str]]
    waccf_only: bool = False

    def is_active(self, include_waccf: bool) -> bool:
        return include_waccf or not self.waccf_only


def _extract_waccf_material(keyword_name: str) -> Optional[str]:
    if WACCF_MATERIAL_MARKER not in keyword_name:
        return None
    return keyword_name.replace(WACCF_MATERIAL_MARKER, "").strip()


def _extract_material(keyword_name: str) -> Optional[str]:
    index = keyword_name.find(MATERIAL_MARKER)
    if index < 0:
        return None
    remainder = keyword_name[index + len(MATERIAL_MARKER):]
    if not remainder:
        return None
    return remainder.strip()


# Checked against the lowercase short name, in order
NAME_RULES: Tuple[NameRule, ...] = (
    NameRule("dragon_priest_claws", lambda n: n in DRAGON_PRIEST_CLAWS, "orcish"),
    NameRule("bound_mystic", lambda n: BOUND_MARKER in n and MYSTIC_MARKER in n, "daedric"),
    NameRule("bound", lambda n: BOUND_MARKER in n, "dwarven"),
)

# Checked against each lowercase keyword name, in order.
# With WACCF off, WACCF keywords still contain "material" and reach the
# generic rule.
KEYWORD_RULES: Tuple[KeywordRule, ...] = (
    KeywordRule("waccf_material", _extract_waccf_material, waccf_only=True),
    KeywordRule("material", _extract_material),
)


def detect_material_from_name(short_name: Optional[str]) -> Optional[str]:
    """
    Detect a material from naming conventions alone.

    Args:
        short_name: The weapon's short name (editor id)

    Returns:
        Material name, or None if no naming rule applies
    """
    if not short_name:
        return None

    name = short_name.lower()
    for rule in NAME_RULES:
        if rule.matches(name):
            logger.debug(f"Material rule '{rule.name}' matched {short_name!r}")
            return rule.material
    return None


def detect_material_from_keywords(
    weapon: IWeaponRecord,
    keyword_resolver: IKeywordResolver,
    include_waccf: bool = False,
) -> Optional[str]:
    """
    Detect a material from the weapon's keywords.

    Keywords are checked in order and every active rule is tried on a
    keyword before moving to the next one.

    Returns:
        Material name, or None if no keyword names a material
    """
    rules = [rule for rule in KEYWORD_RULES if rule.is_active(include_waccf)]

    for keyword_name in iter_keyword_names(weapon, keyword_resolver):
        for rule in rules:
            material = rule.extract(keyword_name)
            if material is not None:
                logger.debug(
                    f"Material rule '{rule.name}' matched keyword {keyword_name!r} -> {material!r}"
                )
                return material
    return None


def detect_material(
    weapon: IWeaponRecord,
    keyword_resolver: IKeywordResolver,
    include_waccf: bool = False,
) -> str:
    """
    Detect a weapon's material.

    Naming rules win over keywords; weapons without keywords, or whose
    keywords name no material, are steel.

    Args:
        weapon: The weapon record
        keyword_resolver: Lookup for the weapon's keyword references
        include_waccf: Whether WACCF material keywords are recognized

    Returns:
        Lowercase material name
    """
    material = detect_material_from_name(weapon.short_name)
    if material is not None:
        return material

    if not weapon.keywords:
        return DEFAULT_MATERIAL

    material = detect_material_from_keywords(weapon, keyword_resolver, include_waccf)
    if material is not None:
        return material

    return DEFAULT_MATERIAL
