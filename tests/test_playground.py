"""Tests for the contract-typed consumers and the walkthrough."""

from __future__ import annotations

import contextlib
import io

import pytest

from core.domain.models import Cat, Dog, Person, StarShip
from core.interfaces import FullyNamed
from core.services.consumers import make_animals_speak, print_full_names
from core.services.playground import build_named_things, run_playground


class _FixedGenerator:
    def __init__(self, value: int) -> None:
        self.value = value

    def random(self) -> int:
        return self.value


class TestConsumers:
    def test_prints_mixed_named_things_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        things: list[FullyNamed] = [
            StarShip(prefix=None, name="Firefly"),
            Person(full_name="Rich"),
            StarShip(prefix="USS", name="Enterprise"),
        ]
        printed = print_full_names(things)
        assert printed == ["Firefly", "Rich", "USS Enterprise"]
        assert capsys.readouterr().out == "Firefly\nRich\nUSS Enterprise\n"

    def test_custom_emitter(self) -> None:
        lines: list[str] = []
        print_full_names([Person(full_name="Rich")], emit=lines.append)
        assert lines == ["Rich"]

    def test_empty_sequence_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert print_full_names([]) == []
        assert capsys.readouterr().out == ""

    def test_animals_speak_in_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert make_animals_speak([Dog(number_of_legs=4), Cat(number_of_legs=3)]) == 2
        assert capsys.readouterr().out == "Woof\nMeow\n"


class TestPlayground:
    def test_named_things(self) -> None:
        me, enterprise = build_named_things()
        assert me.full_name == "Rich"
        assert enterprise.prefix == "USS"
        assert enterprise.name == "Lambda"

    def test_output_is_exactly_three_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_playground()
        assert capsys.readouterr().out == "Rich\nUSS Lambda\nMeow\n"

    def test_all_output_shares_one_stream(self, capsys: pytest.CaptureFixture[str]) -> None:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            run_playground()
        assert buffer.getvalue() == "Rich\nUSS Lambda\nMeow\n"
        assert capsys.readouterr().out == ""

    def test_result(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = run_playground(generator=_FixedGenerator(7))
        capsys.readouterr()
        assert result.printed_names == ["Rich", "USS Lambda"]
        assert result.random_number == 7
        assert result.ships_equal is False
        assert result.animal_sound == "Meow"

    def test_random_number_in_range(self, capsys: pytest.CaptureFixture[str]) -> None:
        for _ in range(50):
            assert 1 <= run_playground().random_number <= 10
        capsys.readouterr()
