# armoury/app_context.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from armoury.config import Config
from armoury.interfaces import IKeywordResolver
from armoury.rebalancer import Rebalancer

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """
    Aggregates the services used by the CLI and the HTTP API.

    - config: persisted rebalance settings (WACCF mode, plugin selection)
    - create_rebalancer(): batch rebalancer wired with those settings,
      each one overridable per run
    """
    config: Config

    def create_rebalancer(
        self,
        keyword_resolver: IKeywordResolver,
        include_waccf: Optional[bool] = None,
        included_plugins: Optional[Sequence[str]] = None,
        max_workers: Optional[int] = None,
    ) -> Rebalancer:
        """Build a Rebalancer, falling back to config for unset options."""
        if include_waccf is None:
            include_waccf = self.config.include_waccf
        if included_plugins is None:
            included_plugins = self.config.included_plugins

        return Rebalancer(
            keyword_resolver,
            include_waccf=include_waccf,
            included_plugins=included_plugins,
            max_workers=max_workers or self.config.max_workers,
        )

    def close(self) -> None:
        """Persist settings on shutdown."""
        logger.info("Closing AppContext...")
        self.config.save()


def create_app_context(config_file: Optional[Path] = None) -> AppContext:
    config = Config(config_file)
    logger.info(
        "App context ready (waccf=%s, plugins=%s)",
        config.include_waccf,
        config.included_plugins or "all",
    )
    return AppContext(config=config)
