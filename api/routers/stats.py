"""
api.routers.stats - Stat table endpoints.

Exposes the base stat table and the damage-offset tables.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query

from api.models import MaterialsResponse, StatsResponse, WeaponStatsOut
from armoury.constants import ANIMATED_WEAPON_TYPES, DEFAULT_MATERIAL
from armoury.stats import compute_stats, get_damage_offset, get_damage_offsets

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/stats/{weapon_type}", response_model=StatsResponse)
async def get_weapon_stats(
    weapon_type: str,
    material: str = Query(DEFAULT_MATERIAL, description="Weapon material"),
    include_waccf: bool = Query(False, description="Use the WACCF damage table"),
) -> StatsResponse:
    """
    Get rebalanced stats for a weapon type and material.

    Only the animated weapon types have stats; other types return 404.
    """
    stats = compute_stats(weapon_type, material, include_waccf)
    if stats is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown weapon type '{weapon_type}'. "
            f"Expected one of: {', '.join(ANIMATED_WEAPON_TYPES)}",
        )

    return StatsResponse(
        weapon_type=weapon_type.lower(),
        material=material.lower(),
        include_waccf=include_waccf,
        damage_offset=get_damage_offset(material, include_waccf),
        stats=WeaponStatsOut.from_stats(stats),
    )


@router.get("/materials", response_model=MaterialsResponse)
async def list_materials(
    include_waccf: bool = Query(False, description="Use the WACCF damage table"),
) -> MaterialsResponse:
    """List every known material with its damage offset."""
    return MaterialsResponse(
        include_waccf=include_waccf,
        offsets=dict(get_damage_offsets(include_waccf)),
    )
