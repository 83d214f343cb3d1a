"""Parse goofy-animals.yml configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from goofy_animals.tables import WordTable
from goofy_animals.words import NameGenerator

CONFIG_FILENAME = 'goofy-animals.yml'
KNOWN_FIELDS = {'adjectives', 'animals', 'seed'}


@dataclass
class NamesConfig:
    """Word list and seed overrides from goofy-animals.yml."""
    adjectives: Optional[Path] = None
    animals: Optional[Path] = None
    seed: Optional[int] = None

    @classmethod
    def load(cls, directory: Path) -> Optional['NamesConfig']:
        """Load goofy-animals.yml from directory. Returns None if not present."""
        config_file = directory / CONFIG_FILENAME
        if not config_file.exists():
            return None

        with open(config_file, encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid {CONFIG_FILENAME}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{CONFIG_FILENAME} must contain a mapping")

        unknown = set(data.keys()) - KNOWN_FIELDS
        if unknown:
            raise ValueError(f"Unknown {CONFIG_FILENAME} field(s): {', '.join(sorted(unknown))}")

        seed = data.get('seed')
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            raise ValueError(f"{CONFIG_FILENAME} seed must be an integer, got {seed!r}")

        for field in ('adjectives', 'animals'):
            value = data.get(field)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{CONFIG_FILENAME} {field} must be a path, got {value!r}")

        return cls(
            adjectives=_resolve(directory, data.get('adjectives')),
            animals=_resolve(directory, data.get('animals')),
            seed=seed,
        )

    def build_generator(self) -> NameGenerator:
        """NameGenerator over the configured lists, bundled lists otherwise."""
        adjectives = WordTable.from_file(self.adjectives, name='adjectives') if self.adjectives else None
        animals = WordTable.from_file(self.animals, name='animals') if self.animals else None
        return NameGenerator(adjectives=adjectives, animals=animals)


def _resolve(directory: Path, value: Optional[str]) -> Optional[Path]:
    if value is None:
        return None
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = directory / path
    return path
