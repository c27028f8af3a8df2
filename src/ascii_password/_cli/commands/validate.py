import click

from ... import exc
from ...validator import validate as validate_policy
from ..exc import CLIError
from ._options import build_policy, get_settings, policy_options, raise_unexpected_exc

__all__ = ["validate"]


@click.command()
@policy_options
@click.pass_context
def validate(
    ctx: click.Context,
    min_length: int | None,
    min_upper: int | None,
    min_lower: int | None,
    min_number: int | None,
    min_symbol: int | None,
    symbols: str | None,
) -> None:
    """Check that the complexity rules can be satisfied."""
    policy = build_policy(
        get_settings(ctx),
        min_length,
        min_upper,
        min_lower,
        min_number,
        min_symbol,
        symbols,
    )

    try:
        validate_policy(policy)
    except exc.InvalidPolicyError as ex:
        raise CLIError(str(ex)) from ex
    except Exception as ex:
        raise_unexpected_exc(ex)

    click.echo("Policy is valid.")
