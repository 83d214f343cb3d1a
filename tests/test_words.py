import random
import re

import pytest

from goofy_animals.tables import EmptyTableError, WordTable
from goofy_animals.words import (
    NameGenerator,
    choose_word,
    generate_name,
    generate_name_parts,
)


class ScriptedRandom:
    """Random source that replays fixed indices."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def test_choose_word_returns_entry_at_drawn_index():
    """Selector should map index i to entry i, including the last one."""
    table = WordTable(['ant', 'bee', 'cat'])
    rng = ScriptedRandom([0, 2, 1])

    assert choose_word(table, rng) == 'ant'
    assert choose_word(table, rng) == 'cat'
    assert choose_word(table, rng) == 'bee'
    assert rng.calls == [3, 3, 3]


def test_choose_word_empty_table_raises():
    """Selecting from an empty table should fail without touching the source."""
    table = WordTable.unchecked([], name='animals')
    rng = ScriptedRandom([])

    for _ in range(3):
        with pytest.raises(EmptyTableError, match='animals'):
            choose_word(table, rng)
    assert rng.calls == []


class BrokenRandom:
    """Random source that ignores the requested range."""

    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def test_choose_word_stays_in_range():
    table = WordTable(['only'])
    rng = random.Random(99)
    assert {choose_word(table, rng) for _ in range(100)} == {'only'}


def test_choose_word_is_uniform():
    """Chi-square goodness of fit over many draws should stay under the 0.1% critical value."""
    table = WordTable([f'w{i}' for i in range(8)])
    rng = random.Random(2024)
    draws = 100_000

    counts = dict.fromkeys(table, 0)
    for _ in range(draws):
        counts[choose_word(table, rng)] += 1

    expected = draws / len(table)
    chi_square = sum((observed - expected) ** 2 / expected for observed in counts.values())
    assert chi_square < 24.32  # df=7, p=0.001


def test_generate_name_parts_draw_order():
    """Adjective, adjective, animal, in that order."""
    generator = NameGenerator(
        adjectives=WordTable(['glorious', 'meager', 'sunny']),
        animals=WordTable(['dove', 'polar-bear']),
    )
    rng = ScriptedRandom([1, 0, 1])

    assert generator.generate_name_parts(rng) == ('meager', 'glorious', 'polar-bear')
    assert rng.calls == [3, 3, 2]


def test_generate_name_allows_repeated_adjective():
    generator = NameGenerator(
        adjectives=WordTable(['glorious', 'meager']),
        animals=WordTable(['polar-bear']),
    )
    assert generator.generate_name(ScriptedRandom([0, 0, 0])) == 'glorious-glorious-polar-bear'


def test_generate_name_format():
    """Names should have three non-empty segments, no whitespace, no edge hyphens."""
    rng = random.Random(7)
    for _ in range(500):
        name = generate_name(rng)
        assert name.count('-') >= 2
        assert not name.startswith('-')
        assert not name.endswith('-')
        assert not re.search(r'\s', name)
        assert all(name.split('-'))


def test_generate_name_is_deterministic_for_seed():
    names_a = [generate_name(random.Random(0x1337)) for _ in range(3)]
    names_b = [generate_name(random.Random(0x1337)) for _ in range(3)]
    assert names_a == names_b

    rng_a = random.Random(0x1337)
    rng_b = random.Random(0x1337)
    assert [generate_name_parts(rng_a) for _ in range(8)] == \
        [generate_name_parts(rng_b) for _ in range(8)]


def test_generate_name_matches_joined_parts():
    parts = generate_name_parts(random.Random(42))
    assert generate_name(random.Random(42)) == '-'.join(parts)


def test_generate_name_is_random():
    rng = random.Random()
    names = {generate_name(rng) for _ in range(20)}
    assert len(names) > 1  # should not always produce the same name


def test_adjective_draws_are_independent():
    """Both matching and differing adjective pairs should show up."""
    generator = NameGenerator(
        adjectives=WordTable(['calm', 'bold']),
        animals=WordTable(['owl']),
    )
    rng = random.Random(5)
    pairs = [generator.generate_name_parts(rng)[:2] for _ in range(200)]

    assert any(first == second for first, second in pairs)
    assert any(first != second for first, second in pairs)


def test_generate_name_propagates_empty_table():
    """No partial name when any table is empty."""
    generator = NameGenerator(
        adjectives=WordTable(['calm']),
        animals=WordTable.unchecked([], name='animals'),
    )
    with pytest.raises(EmptyTableError):
        generator.generate_name(random.Random(1))
    with pytest.raises(EmptyTableError):
        generator.generate_name_parts(random.Random(1))


def test_parts_reference_table_entries():
    adjectives = WordTable(['calm'])
    animals = WordTable(['owl'])
    first, second, animal = NameGenerator(adjectives, animals).generate_name_parts(random.Random())
    assert first is adjectives[0]
    assert animal is animals[0]


def test_name_generator_repr_shows_sizes():
    generator = NameGenerator(WordTable(['calm', 'bold']), WordTable(['owl']))
    assert repr(generator) == 'NameGenerator(total_adjectives=2, total_animals=1)'


def test_choose_word_rejects_out_of_range_index():
    """A source returning a negative or too-large index should not pick a word."""
    table = WordTable(['ant', 'bee', 'cat'])

    with pytest.raises(ValueError, match=r'-1, outside \[0, 3\)'):
        choose_word(table, BrokenRandom(-1))
    with pytest.raises(ValueError, match=r'3, outside \[0, 3\)'):
        choose_word(table, BrokenRandom(3))
