"""
In-memory keyword link cache.

Hosts that export keyword records ahead of time (JSON dumps, API
requests) build a KeywordCache and hand it to the classifiers as their
keyword resolver.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional

from armoury.interfaces import IKeywordResolver, IWeaponRecord
from armoury.models import KeywordRecord

logger = logging.getLogger(__name__)


class KeywordCache:
    """Maps keyword references to keyword records."""

    def __init__(self, records: Optional[Mapping[str, KeywordRecord]] = None) -> None:
        self._records: Dict[str, KeywordRecord] = dict(records or {})

    @classmethod
    def from_short_names(cls, short_names: Mapping[str, Optional[str]]) -> "KeywordCache":
        """
        Build a cache from a ref -> short name mapping.

        Example:
            >>> cache = KeywordCache.from_short_names({"0x1E718": "WeapMaterialSteel"})
            >>> cache.resolve("0x1E718").short_name
            'WeapMaterialSteel'
        """
        return cls({ref: KeywordRecord(short_name=name) for ref, name in short_names.items()})

    def resolve(self, ref: str) -> Optional[KeywordRecord]:
        """Return the record for ``ref``, or None if it is not cached."""
        return self._records.get(ref)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, ref: object) -> bool:
        return ref in self._records


def iter_keyword_names(weapon: IWeaponRecord, resolver: IKeywordResolver) -> Iterator[str]:
    """
    Yield the lowercase short names of a weapon's keywords, in order.

    Unresolvable references are skipped. A resolved keyword without a
    short name yields an empty string.
    """
    for ref in weapon.keywords or ():
        record = resolver.resolve(ref)
        if record is None:
            logger.debug(f"Skipping unresolved keyword {ref!r} on {weapon.short_name!r}")
            continue
        yield (record.short_name or "").lower()
