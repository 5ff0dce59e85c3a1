"""
Generator Base Module

Shared plumbing for record generators:
- RandomSource: the random number interface every generator draws from
- Draw helpers for choices, bounded integers and hex identifiers
- EntityGenerator: base class for per-kind record generators
"""

import random
from typing import Any, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything with a ``random()`` method returning a float in [0, 1)"""

    def random(self) -> float:
        ...


def default_random_source() -> RandomSource:
    """Fresh, non-deterministically seeded random source"""
    return random.Random()


def random_int(rng: RandomSource, low: int, span: int) -> int:
    """Draw an integer uniformly from ``[low, low + span)``"""
    return low + int(rng.random() * span)


def random_choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Draw one element uniformly from a non-empty sequence"""
    return items[int(rng.random() * len(items))]


def random_hex_id(rng: RandomSource, upper: int = 10000) -> str:
    """Draw an integer below ``upper`` and render it in lowercase base 16"""
    return format(random_int(rng, 0, upper), "x")


class EntityGenerator:
    """
    Base class for entity generators

    Each subclass produces one kind of record. Generators hold no state
    between calls other than their random source and locale.
    """

    def __init__(self, rng: Optional[RandomSource] = None, locale: str = "en-US"):
        """
        Initialize the generator

        Args:
            rng: Random source to draw from (fresh ``random.Random`` if None)
            locale: Locale label (informational only)
        """
        self.rng = rng or default_random_source()
        self.locale = locale

    def generate(self) -> Any:
        """
        Generate one record

        Returns:
            A fully populated record
        """
        raise NotImplementedError("Subclasses must implement generate()")
