"""
Weapon Models.

Data structures shared by the classifiers, the stat tables and the
batch rebalancer.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class KeywordRecord:
    """A resolved keyword; only its short name (editor id) matters here."""
    short_name: Optional[str] = None


@dataclass(frozen=True)
class WeaponRecord:
    """
    Read-only view of a weapon from the asset database.

    Keywords are opaque references that must be resolved through a
    keyword resolver before their short names can be inspected.
    """
    short_name: Optional[str] = None      # Editor id, e.g. "DaedricClaw"
    display_name: Optional[str] = None    # In-game name, e.g. "Daedric Claw"
    keywords: Optional[Tuple[str, ...]] = None
    plugin: Optional[str] = None          # Source plugin, e.g. "NewArmoury.esp"

    @property
    def label(self) -> str:
        """Human-friendly identifier for logs and reports."""
        return self.display_name or self.short_name or "Unnamed Weapon"


@dataclass(frozen=True)
class WeaponStats:
    """Rebalanced combat statistics for one weapon."""
    speed: float
    reach: float
    stagger: float
    base_damage: int
    critical_damage: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for serialization."""
        return asdict(self)


@dataclass
class WeaponPatch:
    """A weapon together with the stats it should be patched to."""
    weapon: WeaponRecord
    weapon_type: str
    material: str
    stats: WeaponStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            "short_name": self.weapon.short_name,
            "display_name": self.weapon.display_name,
            "weapon_type": self.weapon_type,
            "material": self.material,
            "stats": self.stats.to_dict(),
        }


@dataclass
class SkippedWeapon:
    """A weapon left unmodified, with the reason why."""
    weapon: WeaponRecord
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "short_name": self.weapon.short_name,
            "display_name": self.weapon.display_name,
            "reason": self.reason,
        }


@dataclass
class RebalanceReport:
    """Outcome of a batch run, in input order."""
    include_waccf: bool = False
    patched: List[WeaponPatch] = field(default_factory=list)
    skipped: List[SkippedWeapon] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.patched) + len(self.skipped)

    def to_summary_lines(self) -> List[str]:
        """Generate human-readable report lines."""
        mode = "WACCF" if self.include_waccf else "standard"
        lines = [
            f"Rebalanced {len(self.patched)} of {self.total} weapons ({mode} damage table)"
        ]

        for patch in self.patched:
            s = patch.stats
            lines.append(
                f"  {patch.weapon.label}: {patch.weapon_type}/{patch.material} "
                f"speed={s.speed:g} reach={s.reach:g} stagger={s.stagger:g} "
                f"damage={s.base_damage} crit={s.critical_damage}"
            )

        if self.skipped:
            lines.append(f"Skipped {len(self.skipped)} weapons")
            for skipped in self.skipped:
                lines.append(f"  {skipped.weapon.label}: {skipped.reason}")

        return lines

    def to_dict(self) -> Dict[str, Any]:
        return {
            "include_waccf": self.include_waccf,
            "total": self.total,
            "patched": [p.to_dict() for p in self.patched],
            "skipped": [s.to_dict() for s in self.skipped],
        }
