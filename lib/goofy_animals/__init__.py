"""Human-friendly adjective-adjective-animal names."""

from goofy_animals.tables import (
    EmptyTableError,
    WordTable,
    word_count_adjectives,
    word_count_animals,
)
from goofy_animals.words import (
    NameGenerator,
    choose_word,
    generate_name,
    generate_name_parts,
)

__all__ = [
    'EmptyTableError',
    'NameGenerator',
    'WordTable',
    'choose_word',
    'generate_name',
    'generate_name_parts',
    'word_count_adjectives',
    'word_count_animals',
]
