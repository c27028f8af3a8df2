from dataclasses import dataclass
from typing import Callable

import pytest

from ascii_password import (
    LOWERCASE_LETTERS,
    NUMBERS,
    UPPERCASE_LETTERS,
    PasswordPolicy,
    source,
)


@dataclass
class Stats:
    length: int = 0
    upper: int = 0
    lower: int = 0
    number: int = 0
    symbol: int = 0
    other: int = 0


def get_stats(password: str, policy: PasswordPolicy) -> Stats:
    """Counts the characters of ``password`` per class of ``policy``."""
    stats = Stats(length=len(password))
    symbols = set(policy.effective_symbols)

    for ch in password:
        # custom symbol sets may overlap the other classes
        if ch in symbols:
            stats.symbol += 1
        elif ch in NUMBERS:
            stats.number += 1
        elif ch in UPPERCASE_LETTERS:
            stats.upper += 1
        elif ch in LOWERCASE_LETTERS:
            stats.lower += 1
        else:
            stats.other += 1

    return stats


@pytest.fixture
def password_stats() -> Callable[[str, PasswordPolicy], Stats]:
    return get_stats


@pytest.fixture(autouse=True)
def reset_fast_source(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(source, "_fast_source", None)
