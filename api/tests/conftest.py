"""
api.tests.conftest - Pytest fixtures for API tests.

Provides a test client backed by an AppContext whose config lives in a
temporary directory.
"""

from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from armoury.app_context import AppContext
from armoury.config import Config


@pytest.fixture
def api_config(tmp_path) -> Config:
    """Fresh config with defaults (standard table, NewArmoury.esp only)."""
    return Config(config_file=tmp_path / "config.json")


@pytest.fixture
def app_context(api_config: Config) -> AppContext:
    return AppContext(config=api_config)


@pytest.fixture
def client(app_context: AppContext) -> Generator[TestClient, None, None]:
    """Create a test client with the temporary app context installed."""
    import api.main
    from api import dependencies
    from api.main import app

    original_context = api.main._app_context
    api.main._app_context = app_context

    def override_get_ctx():
        return app_context

    app.dependency_overrides[dependencies.get_app_context] = override_get_ctx

    with TestClient(app) as test_client:
        yield test_client

    api.main._app_context = original_context
    app.dependency_overrides.clear()


@pytest.fixture
def claw_payload() -> dict:
    """A daedric claw from NewArmoury.esp with its keyword table."""
    return {
        "weapon": {
            "short_name": "NAR_DaedricClaw",
            "display_name": "Daedric Claw",
            "keywords": ["kw:material_daedric", "kw:type_claw"],
            "plugin": "NewArmoury.esp",
        },
        "keywords": {
            "kw:material_daedric": "WeapMaterialDaedric",
            "kw:type_claw": "WeapTypeClaw",
        },
    }
