"""
Animated Armoury rebalancer.

Classifies weapon records by material and weapon type and computes
rebalanced stats for the animated weapon types.

Public API:
- detect_material: Material from short name or keywords
- detect_type_from_name / detect_type_from_keywords: Weapon type
- compute_stats: Stat block for a weapon type and material
- Rebalancer: Batch runner producing a RebalanceReport

Example:
    from armoury import KeywordCache, WeaponRecord, detect_material, compute_stats
    cache = KeywordCache.from_short_names({"kw1": "WeapMaterialDaedric"})
    claw = WeaponRecord(short_name="DaedricClaw", keywords=("kw1",))
    stats = compute_stats("claw", detect_material(claw, cache))
"""
from armoury.keyword_cache import KeywordCache
from armoury.material import detect_material
from armoury.models import KeywordRecord, RebalanceReport, WeaponRecord, WeaponStats
from armoury.rebalancer import Rebalancer, detect_weapon_type, rebalance_weapon
from armoury.stats import compute_stats, get_damage_offset
from armoury.weapon_type import detect_type_from_keywords, detect_type_from_name

__version__ = "1.0.0"

__all__ = [
    "KeywordCache",
    "KeywordRecord",
    "RebalanceReport",
    "Rebalancer",
    "WeaponRecord",
    "WeaponStats",
    "compute_stats",
    "detect_material",
    "detect_type_from_keywords",
    "detect_type_from_name",
    "detect_weapon_type",
    "get_damage_offset",
    "rebalance_weapon",
]
