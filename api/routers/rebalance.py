"""
api.routers.rebalance - Batch rebalancing endpoint.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends

from api.dependencies import get_app_context
from api.models import (
    PatchedWeaponOut,
    RebalanceRequest,
    RebalanceResponse,
    SkippedWeaponOut,
    WeaponStatsOut,
)
from armoury.keyword_cache import KeywordCache

if TYPE_CHECKING:
    from armoury.app_context import AppContext

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/rebalance", response_model=RebalanceResponse)
async def rebalance_weapons(
    request: RebalanceRequest,
    ctx: "AppContext" = Depends(get_app_context),
) -> RebalanceResponse:
    """
    Rebalance a batch of weapons.

    Weapons that are not animated types, or that come from plugins outside
    the selection, are returned under "skipped" with the reason.
    """
    rebalancer = ctx.create_rebalancer(
        KeywordCache.from_short_names(request.keywords),
        include_waccf=request.include_waccf,
        included_plugins=request.included_plugins,
    )
    report = rebalancer.run(w.to_record() for w in request.weapons)

    return RebalanceResponse(
        include_waccf=report.include_waccf,
        total=report.total,
        patched=[
            PatchedWeaponOut(
                short_name=p.weapon.short_name,
                display_name=p.weapon.display_name,
                weapon_type=p.weapon_type,
                material=p.material,
                stats=WeaponStatsOut.from_stats(p.stats),
            )
            for p in report.patched
        ],
        skipped=[
            SkippedWeaponOut(
                short_name=s.weapon.short_name,
                display_name=s.weapon.display_name,
                reason=s.reason,
            )
            for s in report.skipped
        ],
    )
