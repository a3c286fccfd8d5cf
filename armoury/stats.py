"""
Stat Rebalancer

Computes the final stat block for an animated weapon:

1. Base stats for the weapon type (BASE_WEAPON_STATS)
2. Material overrides, applied in order (MATERIAL_OVERRIDES)
3. Material damage offset from the standard or WACCF table

Every table here is immutable. Each call builds a new WeaponStats.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from armoury.constants import STALHRIM_STAGGER_BONUS
from armoury.models import WeaponStats

logger = logging.getLogger(__name__)


# Speed, Reach, Stagger, BaseDamage, CritDamage
BASE_WEAPON_STATS: Mapping[str, WeaponStats] = MappingProxyType({
    "claw": WeaponStats(1.2, 0.7, 0.0, 5, 1),
    "rapier": WeaponStats(1.15, 1.1, 0.6, 5, 5),
    "katana": WeaponStats(1.125, 1.0, 0.75, 7, 3),
    "whip": WeaponStats(0.9, 2.0, 0.4, 7, 1),
    "pike": WeaponStats(0.7, 1.7, 1.0, 12, 7),
    "quarterstaff": WeaponStats(1.1, 1.2, 1.0, 10, 4),
    "halberd": WeaponStats(0.65, 1.55, 1.1, 15, 8),
})

DAMAGE_OFFSETS: Mapping[str, int] = MappingProxyType({
    "iron": 0,
    "riekling": -1,
    "steel": 1,
    "silver": 1,
    "draugr": 1,
    "imperial": 2,
    "orcish": 2,
    "dragonpriest": 2,
    "dwarven": 3,
    "falmer": 3,
    "forsworn": 3,
    "dawnguard": 3,
    "nordhero": 4,
    "skyforge": 4,
    "elven": 4,
    "nordic": 4,
    "blades": 4,
    "draugrhoned": 4,
    "redguard": 4,
    "glass": 5,
    "falmerhoned": 5,
    "ebony": 6,
    "stalhrim": 6,
    "tempest": 6,
    "daedric": 7,
    "dragonbone": 8,
})

# WACCF has no nordhero or tempest materials
DAMAGE_OFFSETS_WACCF: Mapping[str, int] = MappingProxyType({
    "iron": 0,
    "riekling": -1,
    "steel": 1,
    "silver": 1,
    "draugr": 1,
    "imperial": 1,
    "orcish": 4,
    "dragonpriest": 2,
    "dwarven": 2,
    "falmer": 3,
    "forsworn": 2,
    "dawnguard": 3,
    "skyforge": 4,
    "elven": 3,
    "nordic": 4,
    "blades": 4,
    "draugrhoned": 4,
    "redguard": 4,
    "glass": 5,
    "falmerhoned": 5,
    "ebony": 6,
    "stalhrim": 6,
    "daedric": 8,
    "dragonbone": 7,
})


@dataclass(frozen=True)
class MaterialOverride:
    """Non-damage adjustment for one material.

    ``apply`` receives the stats so far and the WACCF flag and returns
    the adjusted stats.
    """
    material: str
    apply: Callable[[WeaponStats, bool], WeaponStats]


def _stalhrim_stagger(stats: WeaponStats, include_waccf: bool) -> WeaponStats:
    if include_waccf:
        return stats
    return replace(stats, stagger=stats.stagger + STALHRIM_STAGGER_BONUS)


MATERIAL_OVERRIDES: Tuple[MaterialOverride, ...] = (
    MaterialOverride("stalhrim", _stalhrim_stagger),
)


def get_damage_offsets(include_waccf: bool = False) -> Mapping[str, int]:
    """Return the damage-offset table for the given mode."""
    return DAMAGE_OFFSETS_WACCF if include_waccf else DAMAGE_OFFSETS


def get_damage_offset(material: Optional[str], include_waccf: bool = False) -> int:
    """
    Get the base damage offset for a material.

    Args:
        material: Material name (case-insensitive)
        include_waccf: Use the WACCF table instead of the standard one

    Returns:
        The offset, or 0 for empty or unknown materials
    """
    if not material:
        return 0
    return get_damage_offsets(include_waccf).get(material.lower(), 0)


def get_base_weapon_stats(weapon_type: Optional[str]) -> Optional[WeaponStats]:
    """Base stats for an animated weapon type, or None for any other type."""
    if not weapon_type:
        return None
    return BASE_WEAPON_STATS.get(weapon_type.lower())


def compute_stats(
    weapon_type: Optional[str],
    material: Optional[str],
    include_waccf: bool = False,
) -> Optional[WeaponStats]:
    """
    Compute rebalanced stats for a weapon type and material.

    Args:
        weapon_type: One of the animated weapon types (case-insensitive)
        material: Detected material (case-insensitive)
        include_waccf: Select the WACCF damage table and skip the
            stalhrim stagger bonus

    Returns:
        A new WeaponStats, or None if the weapon type is not rebalanced

    Example:
        >>> compute_stats("claw", "stalhrim").stagger
        0.1
        >>> compute_stats("dagger", "steel") is None
        True
    """
    base = get_base_weapon_stats(weapon_type)
    if base is None:
        return None

    material_key = (material or "").lower()
    stats = replace(base)
    for override in MATERIAL_OVERRIDES:
        if override.material == material_key:
            stats = override.apply(stats, include_waccf)

    offset = get_damage_offset(material_key, include_waccf)
    return replace(stats, base_damage=stats.base_damage + offset)
