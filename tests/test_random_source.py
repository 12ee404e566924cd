"""Tests for the one-through-ten generator."""

from __future__ import annotations

import random

from adapters.random_source import OneThroughTen, build_random_source
from core.config import AppSettings


class TestOneThroughTen:
    def test_values_stay_in_range(self) -> None:
        generator = OneThroughTen()
        values = {generator.random() for _ in range(2000)}
        assert values <= set(range(1, 11))

    def test_every_value_is_reachable(self) -> None:
        generator = OneThroughTen(rng=random.Random(1234))
        values = {generator.random() for _ in range(2000)}
        assert values == set(range(1, 11))

    def test_injected_rng_is_used(self) -> None:
        expected = random.Random(7)
        generator = OneThroughTen(rng=random.Random(7))
        assert [generator.random() for _ in range(20)] == [expected.randint(1, 10) for _ in range(20)]


class TestBuildRandomSource:
    def test_seeded_sources_repeat(self) -> None:
        settings = AppSettings(random_seed=42)
        first = build_random_source(settings)
        second = build_random_source(settings)
        assert [first.random() for _ in range(10)] == [second.random() for _ in range(10)]

    def test_unseeded_source_uses_module_random(self) -> None:
        generator = build_random_source(AppSettings(random_seed=None))
        random.seed(99)
        drawn = [generator.random() for _ in range(5)]
        random.seed(99)
        assert drawn == [random.randint(1, 10) for _ in range(5)]
