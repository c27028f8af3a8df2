import pathlib
from dataclasses import dataclass
from typing import NotRequired

import click
from typing_extensions import TypedDict, override

__all__ = (
    "Location",
    "CLIError",
    "ConfigSyntaxError",
    "ConfigValidationError",
)


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    A failure reported to the user without a traceback: a rejected policy, an
    unusable configuration file or a broken entropy source.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(CLIError):
    """Raised when the file passed with ``--config`` is not valid YAML."""

    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Decoding failed for configuration file %r.\n\n%s" % (
            str(self.ctx["loc"]["filename"]),
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(CLIError):
    """Raised when the configured defaults do not fit the settings model."""

    @override
    def format_message(self) -> str:
        return "Invalid configuration input.\n\n%s" % self.message
