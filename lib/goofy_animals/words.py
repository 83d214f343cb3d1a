"""Random adjective-adjective-animal name generation."""

from typing import Optional, Protocol, Tuple

from goofy_animals.tables import (
    EmptyTableError,
    WordTable,
    default_adjectives,
    default_animals,
)

SEPARATOR = '-'


class RandomSource(Protocol):
    """Anything that draws an unbiased integer in [0, stop).

    random.Random, random.SystemRandom and secrets.SystemRandom all qualify.
    """

    def randrange(self, stop: int) -> int:
        ...


def choose_word(table: WordTable, rng: RandomSource) -> str:
    """Pick one entry from a table with uniform probability.

    randrange rejects out-of-range draws instead of reducing them modulo
    the table size, so every index has probability exactly 1/len(table).

    Args:
        table: Table to select from
        rng: Caller-owned random source

    Returns:
        The selected entry

    Raises:
        EmptyTableError: If the table has no entries
        ValueError: If the random source returns an out-of-range index
    """
    size = len(table)
    if size == 0:
        raise EmptyTableError(table.name)
    index = rng.randrange(size)
    if not 0 <= index < size:
        raise ValueError(f"Random source returned {index}, outside [0, {size})")
    return table[index]


class NameGenerator:
    """Generates names from a pair of adjective and animal tables.

    Example:
        >>> generator = NameGenerator(animals=WordTable(['heron']))
        >>> generator.generate_name(random.Random()).endswith('-heron')
        True
    """

    def __init__(self, adjectives: Optional[WordTable] = None,
                 animals: Optional[WordTable] = None):
        self._adjectives = adjectives if adjectives is not None else default_adjectives()
        self._animals = animals if animals is not None else default_animals()

    @property
    def adjectives(self) -> WordTable:
        return self._adjectives

    @property
    def animals(self) -> WordTable:
        return self._animals

    def generate_name_parts(self, rng: RandomSource) -> Tuple[str, str, str]:
        """Draw (adjective, adjective, animal) in that order.

        The adjectives are drawn independently, so both may be the same word.
        """
        first = choose_word(self._adjectives, rng)
        second = choose_word(self._adjectives, rng)
        animal = choose_word(self._animals, rng)
        return first, second, animal

    def generate_name(self, rng: RandomSource) -> str:
        """Generate a name like 'healthy-frivolous-dove'."""
        return SEPARATOR.join(self.generate_name_parts(rng))

    def __repr__(self) -> str:
        return (
            f'NameGenerator(total_adjectives={len(self._adjectives)}, '
            f'total_animals={len(self._animals)})'
        )


def generate_name_parts(rng: RandomSource) -> Tuple[str, str, str]:
    """Generate name parts from the bundled word lists."""
    return NameGenerator().generate_name_parts(rng)


def generate_name(rng: RandomSource) -> str:
    """Generate a human-readable name from the bundled word lists.

    Args:
        rng: Caller-owned random source

    Returns:
        Name in format '<adjective>-<adjective>-<animal>'

    Example:
        >>> generate_name(random.Random())
        'jolly-crisp-polar-bear'
    """
    return NameGenerator().generate_name(rng)
