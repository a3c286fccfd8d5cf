"""
api.models - Pydantic models for API request/response schemas.

These models provide type-safe data validation for all API endpoints.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from armoury.models import WeaponRecord, WeaponStats


# ==============================================================================
# Weapon Models
# ==============================================================================


class WeaponIn(BaseModel):
    """A weapon record as exported from the asset database."""

    short_name: Optional[str] = Field(
        None, description="Editor id of the weapon", examples=["DaedricClaw"]
    )
    display_name: Optional[str] = Field(
        None, description="In-game name", examples=["Daedric Claw"]
    )
    keywords: Optional[list[str]] = Field(
        None,
        description="Ordered keyword references",
        examples=[["NewArmoury.esp:000D62", "Skyrim.esm:01E71F"]],
    )
    plugin: Optional[str] = Field(
        None, description="Plugin the record comes from", examples=["NewArmoury.esp"]
    )

    def to_record(self) -> WeaponRecord:
        return WeaponRecord(
            short_name=self.short_name,
            display_name=self.display_name,
            keywords=tuple(self.keywords) if self.keywords is not None else None,
            plugin=self.plugin,
        )


class WeaponStatsOut(BaseModel):
    """Rebalanced combat statistics."""

    speed: float = Field(..., examples=[1.2])
    reach: float = Field(..., examples=[0.7])
    stagger: float = Field(..., examples=[0.0])
    base_damage: int = Field(..., examples=[12])
    critical_damage: int = Field(..., examples=[1])

    @classmethod
    def from_stats(cls, stats: WeaponStats) -> "WeaponStatsOut":
        return cls(**stats.to_dict())


# ==============================================================================
# Classification Models
# ==============================================================================


class ClassifyRequest(BaseModel):
    """Request model for classifying a single weapon."""

    weapon: WeaponIn
    keywords: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Keyword ref -> keyword short name, for every ref the weapon uses",
        examples=[{"Skyrim.esm:01E71F": "WeapMaterialDaedric", "NewArmoury.esp:000D62": "WeapTypeClaw"}],
    )
    include_waccf: Optional[bool] = Field(
        None, description="Use the WACCF damage table. If not specified, uses config."
    )


class ClassifyResponse(BaseModel):
    """Detected type, material and (for animated types) stats."""

    weapon_type: Optional[str] = Field(None, description="Detected weapon type", examples=["claw"])
    material: str = Field(..., description="Detected material", examples=["daedric"])
    include_waccf: bool = Field(..., description="Damage table used")
    rebalanced: bool = Field(..., description="Whether the weapon gets new stats")
    stats: Optional[WeaponStatsOut] = Field(None, description="Rebalanced stats")
    reason: Optional[str] = Field(None, description="Why the weapon is not rebalanced")


# ==============================================================================
# Rebalance Models
# ==============================================================================


class RebalanceRequest(BaseModel):
    """Request model for rebalancing a batch of weapons."""

    weapons: list[WeaponIn] = Field(..., min_length=1, description="Weapons to rebalance")
    keywords: dict[str, Optional[str]] = Field(
        default_factory=dict, description="Keyword ref -> keyword short name"
    )
    include_waccf: Optional[bool] = Field(
        None, description="Use the WACCF damage table. If not specified, uses config."
    )
    included_plugins: Optional[list[str]] = Field(
        None,
        description="Only patch weapons from these plugins. Empty list = all. "
        "If not specified, uses config.",
    )


class PatchedWeaponOut(BaseModel):
    short_name: Optional[str] = None
    display_name: Optional[str] = None
    weapon_type: str
    material: str
    stats: WeaponStatsOut


class SkippedWeaponOut(BaseModel):
    short_name: Optional[str] = None
    display_name: Optional[str] = None
    reason: str


class RebalanceResponse(BaseModel):
    """Batch outcome, in request order."""

    include_waccf: bool
    total: int = Field(..., description="Number of weapons processed")
    patched: list[PatchedWeaponOut] = Field(default_factory=list)
    skipped: list[SkippedWeaponOut] = Field(default_factory=list)


# ==============================================================================
# Stat Table Models
# ==============================================================================


class StatsResponse(BaseModel):
    """Stats for a weapon type / material pair."""

    weapon_type: str = Field(..., examples=["halberd"])
    material: str = Field(..., examples=["ebony"])
    include_waccf: bool
    damage_offset: int = Field(..., description="Material damage offset applied")
    stats: WeaponStatsOut


class MaterialsResponse(BaseModel):
    """Damage-offset table for one mode."""

    include_waccf: bool
    offsets: dict[str, int] = Field(..., description="Material -> damage offset")


# ==============================================================================
# Health & Status Models
# ==============================================================================


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str = Field(..., description="Service status", examples=["healthy"])
    version: str = Field(..., description="API version", examples=["1.0.0"])
    services: dict[str, str] = Field(
        default_factory=dict, description="Status of individual services"
    )


class ConfigResponse(BaseModel):
    """Response model for configuration info."""

    include_waccf: bool = Field(..., description="WACCF damage table enabled")
    included_plugins: list[str] = Field(..., description="Plugins selected for patching")
    max_workers: int = Field(..., description="Worker threads for batch runs")
