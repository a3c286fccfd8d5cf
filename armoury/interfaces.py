"""
Interfaces for the external asset database.

The rebalancer never loads or writes plugin data itself. Whatever host
drives it (the CLI, the HTTP API, an external patcher) supplies objects
satisfying these protocols.

Usage:
    from armoury.interfaces import IKeywordResolver, IWeaponRecord

    def detect(weapon: IWeaponRecord, resolver: IKeywordResolver) -> str:
        ...
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class IKeywordRecord(Protocol):
    """A resolved keyword record."""

    @property
    def short_name(self) -> Optional[str]:
        """Editor id of the keyword, e.g. "WeapMaterialDaedric"."""
        ...


@runtime_checkable
class IWeaponRecord(Protocol):
    """Read-only weapon record as exposed by the asset database."""

    @property
    def short_name(self) -> Optional[str]:
        ...

    @property
    def display_name(self) -> Optional[str]:
        ...

    @property
    def keywords(self) -> Optional[Sequence[str]]:
        """Ordered keyword references, or None when the record has none."""
        ...


@runtime_checkable
class IKeywordResolver(Protocol):
    """Resolves keyword references into keyword records.

    Implementations must not raise for unknown references; returning None
    is the normal outcome and callers skip such keywords.
    """

    def resolve(self, ref: str) -> Optional[IKeywordRecord]:
        ...
