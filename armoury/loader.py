"""
Asset dump loader.

Reads the JSON export written by the external plugin tooling:

    {
      "keywords": {"Skyrim.esm:01E718": "WeapMaterialSteel", ...},
      "weapons": [
        {
          "short_name": "SteelClaw",
          "display_name": "Steel Claw",
          "keywords": ["Skyrim.esm:01E718", ...],
          "plugin": "NewArmoury.esp"
        },
        ...
      ]
    }

All weapon fields are optional. A missing "keywords" list is kept as
None, which the classifiers treat the same as an empty one.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional

from armoury.keyword_cache import KeywordCache
from armoury.models import WeaponRecord
from armoury.result import Err, Ok, Result

logger = logging.getLogger(__name__)


@dataclass
class AssetDump:
    """Weapons and keywords exported from the asset database."""
    weapons: List[WeaponRecord] = field(default_factory=list)
    keywords: KeywordCache = field(default_factory=KeywordCache)


def _optional_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def parse_weapon(data: Mapping[str, Any]) -> WeaponRecord:
    """
    Build a WeaponRecord from one exported weapon entry.

    Raises:
        ValueError: If a field has the wrong type.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"weapon entry must be an object, got {type(data).__name__}")

    keywords = data.get("keywords")
    if keywords is not None:
        if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
            raise ValueError("'keywords' must be a list of strings")
        keywords = tuple(keywords)

    return WeaponRecord(
        short_name=_optional_str(data, "short_name"),
        display_name=_optional_str(data, "display_name"),
        keywords=keywords,
        plugin=_optional_str(data, "plugin"),
    )


def parse_asset_dump(raw: Any) -> Result[AssetDump, str]:
    """Validate decoded JSON and build an AssetDump."""
    if not isinstance(raw, dict):
        return Err("asset dump must be a JSON object")

    keywords = raw.get("keywords") or {}
    if not isinstance(keywords, dict):
        return Err("'keywords' must map keyword refs to short names")

    weapons_raw = raw.get("weapons") or []
    if not isinstance(weapons_raw, list):
        return Err("'weapons' must be a list")

    weapons: List[WeaponRecord] = []
    for index, entry in enumerate(weapons_raw):
        try:
            weapons.append(parse_weapon(entry))
        except ValueError as e:
            return Err(f"weapon #{index}: {e}")

    return Ok(AssetDump(weapons=weapons, keywords=KeywordCache.from_short_names(keywords)))


def load_asset_dump(path: Path) -> Result[AssetDump, str]:
    """
    Load an asset dump from a JSON file.

    Args:
        path: Path to the exported JSON file

    Returns:
        Ok(AssetDump), or Err with a readable message
    """
    try:
        with Path(path).open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        return Err(f"Asset dump not found: {path}")
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read asset dump {path}: {e}")
        return Err(f"Failed to read asset dump {path}: {e}")

    result = parse_asset_dump(raw)
    if result.is_ok():
        dump = result.unwrap()
        logger.info(f"Loaded {len(dump.weapons)} weapons and {len(dump.keywords)} keywords from {path}")
    return result
