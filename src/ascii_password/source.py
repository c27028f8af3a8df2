"""
Randomness sources used by the generator.

Two implementations share the :class:`RandomSource` interface:

* :class:`FastSource` is a seeded Mersenne Twister. It is reproducible and fast,
  and must never be used for real credentials.
* :class:`SecureSource` reads from the operating system CSPRNG.

The process-wide fast source returned by :func:`get_fast_source` is created on
first use, not at import time. It is safe to share between threads: every draw
and every whole shuffle holds the instance lock.
"""

import logging
import random
import secrets
import threading
import time
from abc import ABC, abstractmethod

from typing_extensions import override

from .exc import EntropySourceError

__all__ = (
    "RandomSource",
    "FastSource",
    "SecureSource",
    "get_fast_source",
    "seed_fast_source",
)

logger = logging.getLogger(__name__)


class RandomSource(ABC):
    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Returns a uniformly distributed integer in ``[0, n)``."""

    def shuffle(self, chars: list[str]) -> None:
        """Permutes ``chars`` in place (Fisher-Yates)."""
        for i in range(len(chars) - 1, 0, -1):
            j = self.randbelow(i + 1)
            chars[i], chars[j] = chars[j], chars[i]


def _check_bound(n: int) -> None:
    if n < 1:
        raise ValueError("Upper bound must be greater than or equal to one (1)")


class FastSource(RandomSource):
    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._rng = random.Random(seed)
        # reentrant: shuffle holds it across its randbelow calls
        self._lock = threading.RLock()

    @override
    def randbelow(self, n: int) -> int:
        _check_bound(n)
        with self._lock:
            return self._rng.randrange(n)

    @override
    def shuffle(self, chars: list[str]) -> None:
        with self._lock:
            super().shuffle(chars)


class SecureSource(RandomSource):
    @override
    def randbelow(self, n: int) -> int:
        _check_bound(n)
        try:
            return secrets.randbelow(n)
        except (OSError, NotImplementedError) as ex:
            raise EntropySourceError(
                "The secure random source failed to produce a value"
            ) from ex


_fast_source: FastSource | None = None
_fast_source_lock = threading.Lock()


def get_fast_source() -> FastSource:
    """Returns the process-wide fast source, creating it on first use."""
    global _fast_source

    with _fast_source_lock:
        if _fast_source is None:
            _fast_source = FastSource()
            logger.debug("initialized process-wide fast source")
        return _fast_source


def seed_fast_source(seed: int) -> FastSource:
    """Replaces the process-wide fast source with one seeded by ``seed``."""
    global _fast_source

    with _fast_source_lock:
        _fast_source = FastSource(seed)
        logger.debug("reseeded process-wide fast source")
        return _fast_source
