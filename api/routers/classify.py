"""
api.routers.classify - Single weapon classification.

Reports a weapon's detected type and material, and its rebalanced stats
when the type is one of the animated weapon types.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from api.dependencies import get_app_context
from api.models import ClassifyRequest, ClassifyResponse, WeaponStatsOut
from armoury.keyword_cache import KeywordCache
from armoury.material import detect_material
from armoury.rebalancer import detect_weapon_type
from armoury.stats import compute_stats

if TYPE_CHECKING:
    from armoury.app_context import AppContext

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/classify", response_model=ClassifyResponse)
async def classify_weapon(
    request: ClassifyRequest,
    ctx: "AppContext" = Depends(get_app_context),
) -> ClassifyResponse:
    """
    Classify one weapon.

    Keyword refs missing from the request's keyword table are treated as
    unresolvable and skipped.
    """
    include_waccf = (
        ctx.config.include_waccf if request.include_waccf is None else request.include_waccf
    )
    weapon = request.weapon.to_record()
    resolver = KeywordCache.from_short_names(request.keywords)

    weapon_type = detect_weapon_type(weapon, resolver)
    material = detect_material(weapon, resolver, include_waccf)
    stats = compute_stats(weapon_type, material, include_waccf)

    reason = None
    if weapon_type is None:
        reason = "no weapon type detected"
    elif stats is None:
        reason = f"weapon type '{weapon_type}' is not rebalanced"

    logger.debug(f"Classified {weapon.label}: type={weapon_type} material={material}")
    return ClassifyResponse(
        weapon_type=weapon_type,
        material=material,
        include_waccf=include_waccf,
        rebalanced=stats is not None,
        stats=WeaponStatsOut.from_stats(stats) if stats else None,
        reason=reason,
    )
