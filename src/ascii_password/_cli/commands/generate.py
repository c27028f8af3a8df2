import logging

import click

from ... import exc
from ..._conf import Generator
from ...generator import generate as generate_password
from ...source import FastSource, RandomSource, SecureSource, get_fast_source
from ..exc import CLIError
from ._options import build_policy, get_settings, policy_options, raise_unexpected_exc

__all__ = ["generate"]

logger = logging.getLogger(__name__)


def select_source(generator: Generator, seed: int | None) -> RandomSource:
    if generator == "crypto":
        if seed is not None:
            raise CLIError("A seed can only be used with the 'math' generator")
        return SecureSource()

    if seed is not None:
        logger.debug("using a fast source seeded with %d", seed)
        return FastSource(seed)
    return get_fast_source()


@click.command()
@policy_options
@click.option(
    "-g",
    "--generator",
    type=click.Choice(["crypto", "math"]),
    help=(
        "Random generator: 'crypto' reads from the operating system CSPRNG, 'math' "
        "uses a seeded pseudo-random generator that is unsuitable for credentials."
    ),
)
@click.option(
    "--seed",
    type=int,
    help="Seed for the 'math' generator, for reproducible output.",
)
@click.option(
    "-N",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    min_length: int | None,
    min_upper: int | None,
    min_lower: int | None,
    min_number: int | None,
    min_symbol: int | None,
    symbols: str | None,
    generator: Generator | None,
    seed: int | None,
    count: int,
) -> None:
    """
    Generate passwords that meet the given complexity rules.

    Options left out fall back to the configuration file, then to the
    built-in defaults: 16 characters with at least one upper case letter, one
    lower case letter, one number and one special character, drawn from the
    crypto generator.

    Examples:

    \b
      # A 24 character password without special characters
      $ ascii-password generate -L 24 -s 0
    \b
      # Five reproducible passwords for test fixtures
      $ ascii-password generate -g math --seed 42 -N 5
    """
    settings = get_settings(ctx)

    policy = build_policy(
        settings, min_length, min_upper, min_lower, min_number, min_symbol, symbols
    )
    source = select_source(
        generator or settings.generator, seed if seed is not None else settings.seed
    )

    try:
        passwords = [generate_password(policy, source) for _ in range(count)]
    except (exc.InvalidPolicyError, exc.EntropySourceError) as ex:
        raise CLIError(str(ex)) from ex
    except Exception as ex:
        raise_unexpected_exc(ex)

    for password in passwords:
        click.echo(password)
