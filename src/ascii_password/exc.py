from dataclasses import dataclass
from typing import Literal, NotRequired

from typing_extensions import TypedDict, override

__all__ = (
    "Reason",
    "PasswordError",
    "InvalidPolicyError",
    "EntropySourceError",
)

Reason = Literal[
    "min_length_negative",
    "min_lower_negative",
    "min_number_negative",
    "min_symbol_negative",
    "min_upper_negative",
    "no_class_required",
    "symbols_required_but_empty",
]


@dataclass(slots=True)
class PasswordError(Exception):
    """
    Base exception for all ascii-password errors.
    """

    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True, kw_only=True)
class InvalidPolicyError(PasswordError):
    """
    Raised when a password policy contradicts itself or carries out-of-range
    values.

    Callers that need to tell the failures apart should match on :attr:`reason`
    rather than on the message text.
    """

    class Context(TypedDict):
        """
        Attributes:
            reason: Which constraint was violated.
            field_name: The policy field that holds the offending value, if the
                failure relates to a single field.
        """

        reason: Reason
        field_name: NotRequired[str]

    ctx: Context

    @property
    def reason(self) -> Reason:
        return self.ctx["reason"]


@dataclass(slots=True)
class EntropySourceError(PasswordError):
    """
    Raised when the operating system could not supply cryptographically secure
    random bytes. The call that triggered it produces no password.
    """
