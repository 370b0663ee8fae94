"""Piece generators feeding the board on initial fill and refill.

The board only ever calls ``next()``; any ordering or randomness is owned by
the generator itself.
"""
from __future__ import annotations

import random
from typing import Generic, Iterable, Iterator, Protocol, Sequence, TypeVar, runtime_checkable

from match3.constants import TILE_TYPES
from match3.errors import GeneratorExhausted

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PieceGenerator(Protocol[T_co]):
    def next(self) -> T_co:
        ...


class SequenceGenerator(Generic[T]):
    """Cycle through a fixed sequence forever, e.g. ``SequenceGenerator("ABA")``."""

    def __init__(self, sequence: Sequence[T]):
        if not sequence:
            raise ValueError("SequenceGenerator requires a non-empty sequence")
        self._sequence = sequence
        self._index = 0

    def next(self) -> T:
        value = self._sequence[self._index]
        self._index = (self._index + 1) % len(self._sequence)
        return value


class RandomGenerator(Generic[T]):
    def __init__(self, choices: Iterable[T] = TILE_TYPES, rng: random.Random | None = None):
        self._choices = list(choices)
        if not self._choices:
            raise ValueError("RandomGenerator requires at least one choice")
        self._rng = rng or random.Random()

    def next(self) -> T:
        return self._rng.choice(self._choices)


class IterableGenerator(Generic[T]):
    """Adapt any iterable. Running out of values is an error, not a silent stop."""

    def __init__(self, iterable: Iterable[T]):
        self._iterator: Iterator[T] = iter(iterable)
        self.produced = 0

    def next(self) -> T:
        try:
            value = next(self._iterator)
        except StopIteration:
            raise GeneratorExhausted(
                f"Piece source exhausted after {self.produced} pieces"
            ) from None
        self.produced += 1
        return value
