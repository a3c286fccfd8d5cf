"""Tests for the batch rebalance endpoint."""

from fastapi.testclient import TestClient


KEYWORDS = {
    "kw:claw": "WeapTypeClaw",
    "kw:pike": "WeapTypePike",
    "kw:ebony": "WeapMaterialEbony",
    "kw:waccf_orcish": "WACCF_WeaponMaterialOrcish",
}


def _weapon(short_name, display_name, keywords, plugin="NewArmoury.esp"):
    return {
        "short_name": short_name,
        "display_name": display_name,
        "keywords": keywords,
        "plugin": plugin,
    }


class TestRebalanceEndpoint:
    """Tests for POST /api/v1/rebalance."""

    def test_rebalance_batch(self, client: TestClient):
        """Animated weapons are patched, others skipped, order kept."""
        response = client.post(
            "/api/v1/rebalance",
            json={
                "weapons": [
                    _weapon("NAR_EbonyPike", "Ebony Pike", ["kw:pike", "kw:ebony"]),
                    _weapon("NAR_IronSword", "Iron Sword", []),
                    _weapon("NAR_OrcClaw", "Orcish Claw", ["kw:claw", "kw:waccf_orcish"]),
                ],
                "keywords": KEYWORDS,
            },
        )
        assert response.status_code == 200

        data = response.json()
        assert data["total"] == 3
        assert data["include_waccf"] is False
        assert [p["short_name"] for p in data["patched"]] == ["NAR_EbonyPike", "NAR_OrcClaw"]
        assert data["patched"][0]["stats"]["base_damage"] == 12 + 6
        # Without WACCF the WACCF keyword still reads as orcish through "material"
        assert data["patched"][1]["material"] == "orcish"
        assert data["patched"][1]["stats"]["base_damage"] == 5 + 2

        assert len(data["skipped"]) == 1
        assert data["skipped"][0]["short_name"] == "NAR_IronSword"
        assert "sword" in data["skipped"][0]["reason"]

    def test_rebalance_with_waccf(self, client: TestClient):
        """WACCF mode changes the orcish offset."""
        response = client.post(
            "/api/v1/rebalance",
            json={
                "weapons": [_weapon("NAR_OrcClaw", "Orcish Claw", ["kw:claw", "kw:waccf_orcish"])],
                "keywords": KEYWORDS,
                "include_waccf": True,
            },
        )

        data = response.json()
        assert data["include_waccf"] is True
        assert data["patched"][0]["stats"]["base_damage"] == 5 + 4

    def test_rebalance_filters_by_configured_plugin(self, client: TestClient):
        """Weapons from other plugins are skipped by default."""
        response = client.post(
            "/api/v1/rebalance",
            json={
                "weapons": [_weapon("OtherClaw", "Other Claw", ["kw:claw"], plugin="Other.esp")],
                "keywords": KEYWORDS,
            },
        )

        data = response.json()
        assert data["patched"] == []
        assert "Other.esp" in data["skipped"][0]["reason"]

    def test_rebalance_empty_plugin_list_includes_all(self, client: TestClient):
        """An explicit empty selection patches every plugin."""
        response = client.post(
            "/api/v1/rebalance",
            json={
                "weapons": [_weapon("OtherClaw", "Other Claw", ["kw:claw"], plugin="Other.esp")],
                "keywords": KEYWORDS,
                "included_plugins": [],
            },
        )

        assert len(response.json()["patched"]) == 1

    def test_rebalance_requires_weapons(self, client: TestClient):
        """An empty batch is a validation error."""
        response = client.post("/api/v1/rebalance", json={"weapons": []})
        assert response.status_code == 422
