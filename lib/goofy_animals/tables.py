"""Word tables backing name generation."""

import functools
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

# Bundled English word lists
DATA_DIR = Path(__file__).parent / 'data'
DEFAULT_ADJECTIVES = DATA_DIR / 'en_adjectives.txt'
DEFAULT_ANIMALS = DATA_DIR / 'en_animals.txt'


class EmptyTableError(ValueError):
    """Raised when a word table has no entries to select from."""

    def __init__(self, name: str = 'words'):
        super().__init__(f"Word table '{name}' is empty")
        self.name = name


class WordTable:
    """An ordered, immutable list of candidate words for one name slot.

    Example:
        >>> table = WordTable(['brave', 'calm'], name='adjectives')
        >>> len(table), table[1]
        (2, 'calm')
    """

    __slots__ = ('_entries', '_name')

    def __init__(self, entries: Iterable[str], name: str = 'words'):
        entries = tuple(entries)
        if not entries:
            raise EmptyTableError(name)
        for index, entry in enumerate(entries):
            if not entry:
                raise ValueError(f"Empty entry at index {index} in word table '{name}'")
            if any(ch.isspace() for ch in entry):
                raise ValueError(
                    f"Entry {entry!r} at index {index} in word table '{name}' contains whitespace"
                )
        self._entries = entries
        self._name = name

    @classmethod
    def unchecked(cls, entries: Iterable[str], name: str = 'words') -> 'WordTable':
        """Build a table without validating its entries.

        Selection from an unchecked empty table raises EmptyTableError.
        """
        table = cls.__new__(cls)
        table._entries = tuple(entries)
        table._name = name
        return table

    @classmethod
    def from_file(cls, path: Path, name: Optional[str] = None) -> 'WordTable':
        """Load a newline-separated UTF-8 word list.

        Args:
            path: Path to the word list file
            name: Table label, defaults to the file stem

        Returns:
            Validated WordTable
        """
        path = Path(path)
        entries = []
        with open(path, encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                # Skip comments and empty lines
                if line and not line.startswith('#'):
                    entries.append(line)

        table = cls(entries, name=name or path.stem)
        logger.debug("Loaded %d entries for '%s' from %s", len(table), table.name, path)
        return table

    @property
    def name(self) -> str:
        return self._name

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f'WordTable(name={self._name!r}, size={len(self._entries)})'


@functools.lru_cache(maxsize=None)
def default_adjectives() -> WordTable:
    """The bundled adjective table, loaded once per process."""
    return WordTable.from_file(DEFAULT_ADJECTIVES, name='adjectives')


@functools.lru_cache(maxsize=None)
def default_animals() -> WordTable:
    """The bundled animal table, loaded once per process."""
    return WordTable.from_file(DEFAULT_ANIMALS, name='animals')


def word_count_adjectives() -> int:
    return len(default_adjectives())


def word_count_animals() -> int:
    return len(default_animals())
