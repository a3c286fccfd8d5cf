"""Tests for the keyword cache and keyword name iteration."""
import logging

import pytest

from armoury.interfaces import IKeywordResolver
from armoury.keyword_cache import KeywordCache, iter_keyword_names
from armoury.models import KeywordRecord, WeaponRecord

pytestmark = pytest.mark.unit


class TestKeywordCache:

    def test_resolve(self, keyword_cache):
        record = keyword_cache.resolve("Skyrim.esm:01E718")
        assert record == KeywordRecord(short_name="WeapMaterialSteel")

    def test_resolve_missing(self, keyword_cache):
        assert keyword_cache.resolve("Missing.esp:000001") is None

    def test_len_and_contains(self):
        cache = KeywordCache.from_short_names({"a": "One", "b": None})
        assert len(cache) == 2
        assert "a" in cache
        assert "c" not in cache

    def test_empty(self):
        cache = KeywordCache()
        assert len(cache) == 0
        assert cache.resolve("anything") is None

    def test_satisfies_resolver_protocol(self, keyword_cache):
        assert isinstance(keyword_cache, IKeywordResolver)


class TestIterKeywordNames:

    def test_lowercase_in_order(self, make_weapon, keyword_cache):
        weapon = make_weapon(keywords=["WeapTypeClaw", "WeapMaterialEbony"])
        assert list(iter_keyword_names(weapon, keyword_cache)) == [
            "weaptypeclaw",
            "weapmaterialebony",
        ]

    def test_unresolved_refs_are_skipped(self, make_weapon, keyword_cache, caplog):
        weapon = make_weapon(short_name="NAR_Claw", keywords=["Missing.esp:000001", "WeapTypeClaw"])

        with caplog.at_level(logging.DEBUG, logger="armoury.keyword_cache"):
            names = list(iter_keyword_names(weapon, keyword_cache))

        assert names == ["weaptypeclaw"]
        assert "Missing.esp:000001" in caplog.text

    def test_missing_short_name_yields_empty_string(self, make_weapon, keyword_cache):
        weapon = make_weapon(keywords=["Mod.esp:000002"])
        assert list(iter_keyword_names(weapon, keyword_cache)) == [""]

    @pytest.mark.parametrize("keywords", [None, ()])
    def test_no_keywords(self, keywords, keyword_cache):
        weapon = WeaponRecord(short_name="Claw", keywords=keywords)
        assert list(iter_keyword_names(weapon, keyword_cache)) == []
