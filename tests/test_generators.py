import random

import pytest

from match3.engine.generators import IterableGenerator, PieceGenerator, RandomGenerator, SequenceGenerator
from match3.errors import GeneratorExhausted


def test_sequence_generator_cycles():
    gen = SequenceGenerator("ABA")
    assert [gen.next() for _ in range(7)] == list("ABAABAA")


def test_sequence_generator_requires_values():
    with pytest.raises(ValueError):
        SequenceGenerator("")


def test_random_generator_is_reproducible_with_seed():
    first = RandomGenerator("XYZ", rng=random.Random(7))
    second = RandomGenerator("XYZ", rng=random.Random(7))
    values = [first.next() for _ in range(20)]
    assert values == [second.next() for _ in range(20)]
    assert set(values) <= set("XYZ")


def test_iterable_generator_exhaustion_is_an_error():
    gen = IterableGenerator(["a", "b"])
    assert gen.next() == "a"
    assert gen.next() == "b"
    with pytest.raises(GeneratorExhausted):
        gen.next()
    assert gen.produced == 2


def test_generators_satisfy_protocol():
    assert isinstance(SequenceGenerator("A"), PieceGenerator)
    assert isinstance(IterableGenerator([]), PieceGenerator)


def test_random_generator_defaults_to_tile_types():
    from match3.constants import TILE_TYPES
    gen = RandomGenerator(rng=random.Random(0))
    assert all(gen.next() in TILE_TYPES for _ in range(50))
