"""
Result type for host-level operations that can fail with a reason.

The classifiers and stat tables return Optional values. Operations
above them (loading an asset dump, rebalancing one weapon) need to say
*why* nothing was produced, so they return a Result instead:

    from armoury.result import Result, Ok, Err

    def rebalance_weapon(...) -> Result[WeaponPatch, str]:
        stats = compute_stats(weapon_type, material)
        if stats is None:
            return Err(f"weapon type '{weapon_type}' is not rebalanced")
        return Ok(WeaponPatch(...))

    # Caller:
    result = rebalance_weapon(weapon, resolver)
    if result.is_ok():
        write(result.unwrap())
    else:
        logger.info(f"Left unmodified: {result.error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Example:
        >>> Ok(11).unwrap()
        11
    """

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    @property
    def error(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result carrying the reason.

    Example:
        >>> Err("no weapon type detected").error
        'no weapon type detected'
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raises:
            ValueError: Always, since Err has no success value.
        """
        raise ValueError(f"Called unwrap on Err: {self.error}")

    @property
    def value(self) -> None:
        return None

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
