"""
Batch rebalancer.

Runs the classifiers and the stat tables over a collection of weapon
records and reports, per weapon, the detected type and material and
the stats it should be patched to. Weapons that cannot be rebalanced
are reported as skipped and left unmodified.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence

from armoury.constants import ANIMATED_WEAPON_TYPES, DEFAULT_MAX_WORKERS, MAX_WORKERS, MIN_WORKERS
from armoury.interfaces import IKeywordResolver
from armoury.material import detect_material
from armoury.models import RebalanceReport, SkippedWeapon, WeaponPatch, WeaponRecord
from armoury.result import Err, Ok, Result
from armoury.stats import compute_stats
from armoury.weapon_type import detect_type_from_keywords, detect_type_from_name

logger = logging.getLogger(__name__)


def detect_weapon_type(
    weapon: WeaponRecord,
    keyword_resolver: IKeywordResolver,
) -> Optional[str]:
    """
    Resolve a weapon's type, trying the display name first.

    A name that yields no animated type (e.g. an "Akaviri Sword" carrying
    WeapTypeKatana) falls back to keyword detection. If the keywords
    don't help either, the name-based result is kept.
    """
    from_name = detect_type_from_name(weapon.display_name)
    if from_name in ANIMATED_WEAPON_TYPES:
        return from_name

    from_keywords = detect_type_from_keywords(weapon, keyword_resolver)
    if from_keywords is not None:
        return from_keywords

    return from_name


def rebalance_weapon(
    weapon: WeaponRecord,
    keyword_resolver: IKeywordResolver,
    include_waccf: bool = False,
) -> Result[WeaponPatch, str]:
    """
    Compute the patch for a single weapon.

    Returns:
        Ok(WeaponPatch) when the weapon is an animated type, otherwise
        Err with the reason it should be left unmodified.
    """
    weapon_type = detect_weapon_type(weapon, keyword_resolver)
    if weapon_type is None:
        return Err("no weapon type detected")

    material = detect_material(weapon, keyword_resolver, include_waccf)
    stats = compute_stats(weapon_type, material, include_waccf)
    if stats is None:
        return Err(f"weapon type '{weapon_type}' is not rebalanced")

    return Ok(WeaponPatch(weapon=weapon, weapon_type=weapon_type, material=material, stats=stats))


class Rebalancer:
    """
    Rebalances a collection of weapons.

    - Skips weapons whose plugin is not selected (empty selection = all).
    - Runs weapons in parallel using ThreadPoolExecutor; the classifiers
      share no mutable state so no locking is needed.
    - Keeps the input order in the report.
    - Clamps the worker count to 1..32.
    """

    def __init__(
        self,
        keyword_resolver: IKeywordResolver,
        include_waccf: bool = False,
        included_plugins: Optional[Sequence[str]] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self._resolver = keyword_resolver
        self._include_waccf = bool(include_waccf)
        self._included_plugins = {p.lower() for p in (included_plugins or [])}
        self._max_workers = max(MIN_WORKERS, min(MAX_WORKERS, max_workers or DEFAULT_MAX_WORKERS))

    @property
    def include_waccf(self) -> bool:
        return self._include_waccf

    @property
    def max_workers(self) -> int:
        return self._max_workers

    def is_included(self, weapon: WeaponRecord) -> bool:
        """Whether the weapon comes from one of the selected plugins."""
        if not self._included_plugins:
            return True
        return (weapon.plugin or "").lower() in self._included_plugins

    def _process(self, weapon: WeaponRecord) -> Result[WeaponPatch, str]:
        if not self.is_included(weapon):
            return Err(f"plugin '{weapon.plugin}' is not selected")
        return rebalance_weapon(weapon, self._resolver, self._include_waccf)

    def run(self, weapons: Iterable[WeaponRecord]) -> RebalanceReport:
        """
        Rebalance every weapon and collect the outcomes.

        Args:
            weapons: Weapon records to process

        Returns:
            RebalanceReport with patched and skipped weapons in input order
        """
        weapon_list: List[WeaponRecord] = list(weapons)
        report = RebalanceReport(include_waccf=self._include_waccf)
        if not weapon_list:
            logger.info("No weapons to rebalance")
            return report

        workers = min(self._max_workers, len(weapon_list))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(self._process, weapon_list))

        for weapon, outcome in zip(weapon_list, outcomes):
            if outcome.is_ok():
                patch = outcome.unwrap()
                logger.debug(
                    f"Patched {weapon.label}: {patch.weapon_type}/{patch.material} -> {patch.stats}"
                )
                report.patched.append(patch)
            else:
                logger.debug(f"Skipped {weapon.label}: {outcome.error}")
                report.skipped.append(SkippedWeapon(weapon=weapon, reason=outcome.error))

        logger.info(
            "Rebalanced %d of %d weapons (waccf=%s)",
            len(report.patched),
            report.total,
            self._include_waccf,
        )
        return report
