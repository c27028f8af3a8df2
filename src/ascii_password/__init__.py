__all__ = (
    "dto",
    "exc",
    "UPPERCASE_LETTERS",
    "LOWERCASE_LETTERS",
    "NUMBERS",
    "SYMBOLS",
    "PasswordPolicy",
    "PasswordError",
    "InvalidPolicyError",
    "EntropySourceError",
    "RandomSource",
    "FastSource",
    "SecureSource",
    "get_fast_source",
    "seed_fast_source",
    "validate",
    "generate",
    "generate_secure",
)
__version__ = "0.1.0"

from . import dto, exc
from .charset import LOWERCASE_LETTERS, NUMBERS, SYMBOLS, UPPERCASE_LETTERS
from .dto import PasswordPolicy
from .exc import EntropySourceError, InvalidPolicyError, PasswordError
from .generator import generate, generate_secure
from .source import (
    FastSource,
    RandomSource,
    SecureSource,
    get_fast_source,
    seed_fast_source,
)
from .validator import validate
