import logging

from .dto import PasswordPolicy
from .exc import InvalidPolicyError, Reason

__all__ = ("validate",)

logger = logging.getLogger(__name__)

# checked in this order, first failure wins
_NON_NEGATIVE_FIELDS: tuple[tuple[str, str, Reason], ...] = (
    ("min_length", "MinLength", "min_length_negative"),
    ("min_lower", "MinLowerCase", "min_lower_negative"),
    ("min_number", "MinNumber", "min_number_negative"),
    ("min_symbol", "MinSymbol", "min_symbol_negative"),
    ("min_upper", "MinUpperCase", "min_upper_negative"),
)


def _fail(message: str, ctx: InvalidPolicyError.Context) -> InvalidPolicyError:
    logger.debug("policy rejected (%s): %s", ctx["reason"], message)
    return InvalidPolicyError(message, ctx=ctx)


def validate(policy: PasswordPolicy) -> None:
    """
    Checks the policy for internal consistency.

    Raises:
        InvalidPolicyError: If a count is negative, if no character class is
            required, or if symbols are required but ``allowed_symbols`` was
            explicitly set to an empty value.
    """
    for field_name, label, reason in _NON_NEGATIVE_FIELDS:
        if getattr(policy, field_name) < 0:
            raise _fail(
                "%s must be greater than or equal to zero (0)" % label,
                InvalidPolicyError.Context(reason=reason, field_name=field_name),
            )

    if policy.required == 0:
        raise _fail(
            "At least one character class must be required. Lower, Number, Symbol, "
            "and Upper were all zero (0)",
            InvalidPolicyError.Context(reason="no_class_required"),
        )

    if policy.min_symbol > 0 and policy.allowed_symbols == "":
        raise _fail(
            "Special symbols are required but none were provided. Leave "
            "allowed_symbols unset to use the default symbols, or provide at least "
            "one (1) character",
            InvalidPolicyError.Context(
                reason="symbols_required_but_empty", field_name="allowed_symbols"
            ),
        )
