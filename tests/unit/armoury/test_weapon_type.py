"""Tests for the weapon type classifier."""
import pytest

from armoury.keyword_cache import KeywordCache
from armoury.weapon_type import (
    KEYWORD_TYPES,
    NAME_PATTERNS,
    detect_type_from_keywords,
    detect_type_from_name,
)

pytestmark = pytest.mark.unit


class TestDetectTypeFromName:
    """Name-based detection."""

    @pytest.mark.parametrize("name,expected", [
        ("Iron Dagger", "dagger"),
        ("Steel Sword", "sword"),
        ("Orcish War Axe", "waraxe"),
        ("Elven Waraxe", "waraxe"),
        ("Dwarven Mace", "mace"),
        ("Glass Greatsword", "greatsword"),
        ("Ancient Nord Battleaxe", "battleaxe"),
        ("Ebony Battle Axe", "battleaxe"),
        ("Daedric Warhammer", "warhammer"),
        ("Daedric War Hammer", "warhammer"),
        ("Riekling Spear", "spear"),
        ("Steel Halberd", "halberd"),
        ("Elven Quarterstaff", "quarterstaff"),
        ("Elven Quarter Staff", "quarterstaff"),
        ("Dragonbone Claw", "claw"),
    ])
    def test_vanilla_names(self, name, expected):
        assert detect_type_from_name(name) == expected

    def test_greatsword_is_not_sword(self):
        assert detect_type_from_name("Glass Greatsword") == "greatsword"
        assert detect_type_from_name("DAEDRIC GREATSWORD") == "greatsword"

    def test_case_insensitive(self):
        assert detect_type_from_name("ANCIENT NORD BATTLEAXE") == "battleaxe"

    def test_first_pattern_wins(self):
        """A dagger named after a sword is still a dagger."""
        assert detect_type_from_name("Sword-breaker Dagger") == "dagger"

    @pytest.mark.parametrize("name", [None, "", "Staff of Magnus", "Steel Katana"])
    def test_no_match(self, name):
        assert detect_type_from_name(name) is None

    def test_pattern_order(self):
        types = [weapon_type for _, weapon_type in NAME_PATTERNS]
        assert types.index("greatsword") < types.index("sword")
        assert types[0] == "dagger"
        assert types[-1] == "claw"


class TestDetectTypeFromKeywords:
    """Keyword-based detection."""

    @pytest.mark.parametrize("keyword,expected", [
        ("WeapTypeClaw", "claw"),
        ("WeapTypeHalberd", "halberd"),
        ("WeapTypeKatana", "katana"),
        ("WeapTypePike", "pike"),
        ("WeapTypeQtrStaff", "quarterstaff"),
        ("WeapTypeRapier", "rapier"),
        ("WeapTypeWhip", "whip"),
    ])
    def test_animated_type_keywords(self, keyword, expected, make_weapon, keyword_cache):
        weapon = make_weapon(keywords=["WeapMaterialSteel", keyword])
        assert detect_type_from_keywords(weapon, keyword_cache) == expected

    def test_vanilla_type_keyword_not_recognized(self, make_weapon, keyword_cache):
        weapon = make_weapon(keywords=["WeapTypeSword"])
        assert detect_type_from_keywords(weapon, keyword_cache) is None

    def test_first_keyword_wins(self, make_weapon, keyword_cache):
        weapon = make_weapon(keywords=["WeapTypePike", "WeapTypeHalberd"])
        assert detect_type_from_keywords(weapon, keyword_cache) == "pike"

    def test_unresolvable_keywords_skipped(self, make_weapon, keyword_cache):
        weapon = make_weapon(keywords=["Missing.esp:000123", "WeapTypeWhip"])
        assert detect_type_from_keywords(weapon, keyword_cache) == "whip"

    @pytest.mark.parametrize("keywords", [None, []])
    def test_no_keywords(self, keywords, make_weapon, keyword_cache):
        assert detect_type_from_keywords(make_weapon(keywords=keywords), keyword_cache) is None

    def test_exact_match_only(self, make_weapon):
        """Keyword names must match exactly, not by substring."""
        cache = KeywordCache.from_short_names({"kw": "WeapTypeClawLeft"})
        weapon = make_weapon(keywords=["kw"])
        assert detect_type_from_keywords(weapon, cache) is None

    def test_keyword_table_covers_animated_types(self):
        assert set(KEYWORD_TYPES.values()) == {
            "claw", "rapier", "katana", "whip", "pike", "quarterstaff", "halberd",
        }
