import time
from pathlib import Path
from typing import Optional, Sequence

import pytest

from armoury.config import Config
from armoury.keyword_cache import KeywordCache
from armoury.models import WeaponRecord

# Keyword refs used throughout the suite, keyed the way an export keys them
KEYWORD_SHORT_NAMES = {
    "Skyrim.esm:01E718": "WeapMaterialSteel",
    "Skyrim.esm:01E719": "WeapMaterialOrcish",
    "Skyrim.esm:01E71F": "WeapMaterialDaedric",
    "Skyrim.esm:01E71A": "WeapMaterialEbony",
    "Dragonborn.esm:024101": "DLC2WeaponMaterialStalhrim",
    "Skyrim.esm:01E711": "WeapTypeSword",
    "NewArmoury.esp:000D62": "WeapTypeClaw",
    "NewArmoury.esp:000D63": "WeapTypeHalberd",
    "NewArmoury.esp:000D64": "WeapTypeKatana",
    "NewArmoury.esp:000D65": "WeapTypePike",
    "NewArmoury.esp:000D66": "WeapTypeQtrStaff",
    "NewArmoury.esp:000D67": "WeapTypeRapier",
    "NewArmoury.esp:000D68": "WeapTypeWhip",
    "WACCF.esp:000801": "WACCF_WeaponMaterialOrcish",
    "WACCF.esp:000802": "WACCF_WeaponMaterialDaedric",
    "Skyrim.esm:0A0BD7": "VendorItemWeapon",
    "Mod.esp:000001": "TrailingMaterial",
    "Mod.esp:000002": None,
}


@pytest.fixture
def keyword_cache() -> KeywordCache:
    return KeywordCache.from_short_names(KEYWORD_SHORT_NAMES)


@pytest.fixture
def make_weapon():
    """Factory for WeaponRecord with keyword refs given by short name."""
    by_name = {name: r for r, name in KEYWORD_SHORT_NAMES.items() if name}

    def _make(
        short_name: Optional[str] = None,
        display_name: Optional[str] = None,
        keywords: Optional[Sequence[str]] = None,
        plugin: Optional[str] = "NewArmoury.esp",
    ) -> WeaponRecord:
        refs = None
        if keywords is not None:
            refs = tuple(by_name.get(k, k) for k in keywords)
        return WeaponRecord(
            short_name=short_name,
            display_name=display_name,
            keywords=refs,
            plugin=plugin,
        )

    return _make


@pytest.fixture
def temp_config(tmp_path):
    """
    Provide a fresh Config with validation.

    This fixture GUARANTEES a clean config or fails loudly.
    """
    config_path = tmp_path / f"config_{id(tmp_path)}_{time.time_ns()}.json"
    config = Config(config_file=config_path)

    assert config.include_waccf is False, \
        f"FIXTURE CONTAMINATED! include_waccf={config.include_waccf}, file={config.config_file}"
    assert config.included_plugins == ["NewArmoury.esp"], \
        f"FIXTURE CONTAMINATED! plugins={config.included_plugins}, file={config.config_file}"

    return config


def pytest_collection_modifyitems(config, items):
    """Assign tier markers based on test location."""
    for item in items:
        path = Path(str(item.fspath)).as_posix()

        if "/tests/unit/" in path:
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)
