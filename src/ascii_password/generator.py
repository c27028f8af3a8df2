import logging

from .charset import LOWERCASE_LETTERS, NUMBERS, UPPERCASE_LETTERS
from .dto import PasswordPolicy
from .source import RandomSource, SecureSource, get_fast_source
from .validator import validate

__all__ = ("generate", "generate_secure")

logger = logging.getLogger(__name__)


def _draw(count: int, pool: str, source: RandomSource) -> list[str]:
    if len(pool) == 1:
        return [pool] * count
    return [pool[source.randbelow(len(pool))] for _ in range(count)]


def generate(policy: PasswordPolicy, source: RandomSource | None = None) -> str:
    """
    Returns a password that satisfies ``policy``.

    The minimum number of characters is drawn from every required class in the
    order upper, lower, number, symbol. If the result is still shorter than
    ``policy.min_length`` it is padded from the concatenation of the required
    classes only, so a class with a zero minimum never appears. The whole
    sequence is then shuffled so required characters have no fixed position.

    Args:
        policy: The composition rules.
        source: Where randomness comes from. Defaults to the process-wide fast
            source, which is not suitable for credentials; use
            :func:`generate_secure` for those.

    Raises:
        InvalidPolicyError: If the policy fails validation.
        EntropySourceError: If a secure source cannot produce randomness.
    """
    validate(policy)

    if source is None:
        source = get_fast_source()

    chars: list[str] = []
    pool = ""

    for minimum, charset in (
        (policy.min_upper, UPPERCASE_LETTERS),
        (policy.min_lower, LOWERCASE_LETTERS),
        (policy.min_number, NUMBERS),
        (policy.min_symbol, policy.effective_symbols),
    ):
        if minimum > 0:
            pool += charset
            chars.extend(_draw(minimum, charset, source))

    if (remain := policy.min_length - len(chars)) > 0:
        chars.extend(_draw(remain, pool, source))

    source.shuffle(chars)

    logger.debug(
        "generated %d character password with %s", len(chars), type(source).__name__
    )
    return "".join(chars)


def generate_secure(policy: PasswordPolicy) -> str:
    """Same as :func:`generate`, drawing from the operating system CSPRNG."""
    return generate(policy, SecureSource())
