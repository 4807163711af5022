"""Pseudo-random decimal digit sources."""

from __future__ import annotations

import logging
import random
import threading
import time

from bignum.config import get_settings

logger = logging.getLogger(__name__)


class DigitSource:
    """
    Draws independent decimal digits from its own generator.

    Not suitable for cryptographic use.

    Example:
        >>> DigitSource(seed=7).digits(3) == DigitSource(seed=7).digits(3)
        True
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self._random = random.Random(seed)

    def digit(self) -> int:
        """Draw one digit in [0, 9]."""
        return self._random.randrange(10)

    def digits(self, count: int) -> list[int]:
        """Draw ``count`` digits."""
        return [self.digit() for _ in range(count)]

    def __repr__(self) -> str:
        return f"DigitSource(seed={self.seed})"


_default_source: DigitSource | None = None
_default_lock = threading.Lock()


def default_source() -> DigitSource:
    """
    Process-wide digit source, created once on first use.

    Seeded from ``BIGNUM_RANDOM_SEED`` when set, else from the clock.
    """
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = DigitSource(get_settings().random_seed)
                logger.debug("Created default digit source %r", _default_source)
    return _default_source
