#!/usr/bin/env python3
"""goofy-animals CLI - Human-friendly random names."""

import logging
import random
import sys
from pathlib import Path
from typing import Optional

import click

from goofy_animals.config import NamesConfig
from goofy_animals.words import NameGenerator

logger = logging.getLogger(__name__)


def _parse_seed(ctx, param, value: Optional[str]) -> Optional[int]:
    """Accept decimal or prefixed (0x, 0o, 0b) integer seeds."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return int(value, 0)
    except ValueError:
        raise click.BadParameter(f"{value!r} is not an integer")


def _make_rng(seed: Optional[int]) -> random.Random:
    if seed is None:
        # Seeded from OS entropy
        return random.Random()
    return random.Random(seed)


@click.group(invoke_without_command=True)
@click.version_option(package_name='goofy-animals')
@click.option('--config-dir', type=click.Path(exists=True, file_okay=False),
              default='.', help='Directory containing goofy-animals.yml')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def main(ctx, config_dir, verbose):
    """Generate adjective-adjective-animal names like healthy-frivolous-dove."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        config = NamesConfig.load(Path(config_dir))
        generator = config.build_generator() if config else NameGenerator()
    except (ValueError, OSError) as e:
        click.secho(f"❌ {e}", fg='red')
        sys.exit(1)

    logger.debug('Using %r (config: %s)', generator, config)
    ctx.obj = {'config': config, 'generator': generator}

    if ctx.invoked_subcommand is None:
        ctx.invoke(generate)


@main.command()
@click.option('--count', '-n', type=click.IntRange(min=1), default=1,
              help='Number of names to print')
@click.option('--seed', callback=_parse_seed, default=None,
              help='Seed for a reproducible sequence (e.g. 42 or 0x1337)')
@click.option('--parts', is_flag=True, help='Print the three parts separated by spaces')
@click.pass_obj
def generate(obj, count, seed, parts):
    """Print one or more random names."""
    config: Optional[NamesConfig] = obj['config']
    generator: NameGenerator = obj['generator']

    if seed is None and config is not None:
        seed = config.seed
    logger.debug('Seed: %s', 'OS entropy' if seed is None else seed)
    rng = _make_rng(seed)

    for _ in range(count):
        if parts:
            click.echo(' '.join(generator.generate_name_parts(rng)))
        else:
            click.echo(generator.generate_name(rng))


@main.command()
@click.pass_obj
def counts(obj):
    """Show the size of each word table."""
    generator: NameGenerator = obj['generator']
    click.echo(f"adjectives: {len(generator.adjectives)}")
    click.echo(f"animals: {len(generator.animals)}")


if __name__ == '__main__':
    main()
