import logging
from typing import Any, Callable, NoReturn, TypeVar

import click

from ... import _conf
from ...dto import PasswordPolicy
from ..exc import CLIError

__all__ = ("policy_options", "build_policy", "get_settings", "raise_unexpected_exc")

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def policy_options(fn: F) -> F:
    """Attaches the options shared by every command that builds a policy."""
    for decorator in reversed(
        (
            click.option(
                "-L",
                "--len",
                "min_length",
                type=int,
                help="Minimum password length.",
            ),
            click.option(
                "-u",
                "min_upper",
                type=int,
                help="Minimum number of upper case characters.",
            ),
            click.option(
                "-l",
                "min_lower",
                type=int,
                help="Minimum number of lower case characters.",
            ),
            click.option(
                "-n", "min_number", type=int, help="Minimum number of numbers."
            ),
            click.option(
                "-s",
                "min_symbol",
                type=int,
                help="Minimum number of special characters.",
            ),
            click.option(
                "--symbols",
                type=str,
                help=(
                    "Allowable special characters. An empty value selects the "
                    "default set."
                ),
            ),
        )
    ):
        fn = decorator(fn)
    return fn


def get_settings(ctx: click.Context) -> _conf.Settings:
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")
    return settings


def build_policy(
    settings: _conf.Settings,
    min_length: int | None,
    min_upper: int | None,
    min_lower: int | None,
    min_number: int | None,
    min_symbol: int | None,
    symbols: str | None,
) -> PasswordPolicy:
    """Merges command line values over the configured defaults."""

    def pick(value: int | None, default: int) -> int:
        return default if value is None else value

    if symbols is None:
        symbols = settings.symbols

    return PasswordPolicy(
        min_length=pick(min_length, settings.min_length),
        min_upper=pick(min_upper, settings.min_upper),
        min_lower=pick(min_lower, settings.min_lower),
        min_number=pick(min_number, settings.min_number),
        min_symbol=pick(min_symbol, settings.min_symbol),
        # an empty symbol list on the command line means "use the defaults"
        allowed_symbols=symbols or None,
    )


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.critical(ex, exc_info=ex)
    raise CLIError("Unexpected error: %s" % ex) from ex
