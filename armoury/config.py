"""
Configuration management for the Animated Armoury rebalancer.
Handles patcher settings and their persistence.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from armoury.constants import (
    APP_DIR_NAME,
    DEFAULT_MAX_WORKERS,
    DEFAULT_PLUGIN,
    MAX_WORKERS,
    MIN_WORKERS,
)

logger = logging.getLogger(__name__)


class Config:
    """
    Rebalancer configuration with JSON persistence.

    Key ideas:
    - "include_waccf" selects the WACCF damage table for every run.
    - "included_plugins" limits which plugins' weapons get patched.
    - The backing store is a JSON file on disk (user config file).
    """

    # NOTE: This structure is treated as immutable. Always use
    # _default_config_deepcopy() when you need a fresh copy of defaults.
    DEFAULT_CONFIG: Dict[str, Any] = {
        "include_waccf": False,
        "included_plugins": [DEFAULT_PLUGIN],
        "rebalance": {
            # Worker threads for batch runs (min 1, max 32)
            "max_workers": DEFAULT_MAX_WORKERS,
        },
        "logging": {
            "debug": False,
        },
    }

    def __init__(self, config_file: Optional[Path] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_file: Optional path to config JSON file. When omitted,
                         the default path under ~/.animated_armoury/config.json
                         is used.
        """
        self.config_file: Path = self._resolve_config_path(config_file)
        self.config_file.parent.mkdir(parents=True, exist_ok=True)

        self.data: Dict[str, Any] = self._load()
        logger.info(f"Config loaded from {self.config_file}")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _resolve_config_path(config_file: Optional[Path]) -> Path:
        if config_file is not None:
            return Path(config_file)
        return Path.home() / APP_DIR_NAME / "config.json"

    def _load(self) -> Dict[str, Any]:
        """Load configuration from JSON file, merging with defaults."""
        if not self.config_file.exists():
            logger.info("No config file found, using defaults")
            return self._default_config_deepcopy()

        try:
            with self.config_file.open("r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error(f"Failed to load config: {exc}. Using defaults.")
            return self._default_config_deepcopy()

        if not isinstance(raw, dict):
            logger.error("Config file is not a JSON object. Using defaults.")
            return self._default_config_deepcopy()

        logger.info("Configuration loaded successfully")
        return self._merge_with_defaults(raw)

    @classmethod
    def _default_config_deepcopy(cls) -> Dict[str, Any]:
        """
        Return a deep copy of the DEFAULT_CONFIG to avoid state leakage
        between instances or tests.
        """
        return copy.deepcopy(cls.DEFAULT_CONFIG)

    def _merge_with_defaults(self, user_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge user config with defaults to handle new keys.

        Nested sections are merged so new keys under e.g. "rebalance"
        appear without discarding user-provided values. A known key whose
        value has the wrong type (e.g. "rebalance": 5) keeps its default.
        """
        merged = self._default_config_deepcopy()

        for key, value in user_config.items():
            if key not in merged:
                merged[key] = value
                continue

            default = merged[key]
            if not isinstance(value, type(default)):
                logger.warning(
                    f"Config key '{key}' should be {type(default).__name__}, "
                    f"got {type(value).__name__}. Using default."
                )
            elif isinstance(default, dict):
                default.update(value)
            else:
                merged[key] = value

        return merged

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self) -> None:
        """Persist the current configuration to the config file."""
        try:
            with self.config_file.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2, ensure_ascii=False)
            logger.info("Configuration saved")
        except OSError as exc:
            logger.error(f"Failed to save config: {exc}")

    # ------------------------------------------------------------------
    # Rebalance settings
    # ------------------------------------------------------------------

    @property
    def include_waccf(self) -> bool:
        """Whether the WACCF damage table is used."""
        return bool(self.data.get("include_waccf", False))

    @include_waccf.setter
    def include_waccf(self, value: bool) -> None:
        self.data["include_waccf"] = bool(value)
        self.save()

    @property
    def included_plugins(self) -> List[str]:
        """Plugins whose weapons are patched. Empty means every plugin."""
        plugins = self.data.get("included_plugins")
        if not isinstance(plugins, list):
            return list(self.DEFAULT_CONFIG["included_plugins"])
        return [p for p in plugins if isinstance(p, str)]

    def set_included_plugins(self, plugins: List[str]) -> None:
        """Replace the plugin selection, dropping blanks and duplicates."""
        cleaned: List[str] = []
        seen = set()
        for plugin in plugins:
            name = str(plugin).strip()
            if name and name.lower() not in seen:
                seen.add(name.lower())
                cleaned.append(name)
        self.data["included_plugins"] = cleaned
        self.save()

    @property
    def max_workers(self) -> int:
        """Worker threads for batch runs, clamped to a sane range."""
        raw = self.data.get("rebalance", {}).get("max_workers", DEFAULT_MAX_WORKERS)
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return DEFAULT_MAX_WORKERS
        return max(MIN_WORKERS, min(MAX_WORKERS, value))

    @max_workers.setter
    def max_workers(self, value: int) -> None:
        self.data.setdefault("rebalance", {})["max_workers"] = max(
            MIN_WORKERS, min(MAX_WORKERS, int(value))
        )
        self.save()

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    @property
    def debug_logging(self) -> bool:
        return bool(self.data.get("logging", {}).get("debug", False))

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.data.setdefault("logging", {})["debug"] = bool(value)
        self.save()

    def __repr__(self) -> str:
        return (
            f"Config(file={self.config_file}, include_waccf={self.include_waccf}, "
            f"included_plugins={self.included_plugins})"
        )
