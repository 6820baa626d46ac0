"""
The random number source consumed by generation.

Any object with a ``randrange(start, stop)`` method works; a seeded
``random.Random`` gives reproducible maps. When no source is given the
module-level ``random`` functions are used.
"""

import random
from typing import Optional, Protocol

from .errors import ConfigurationError


class RandomSource(Protocol):
    def randrange(self, start: int, stop: int) -> int: ...


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    """Returns rng, or the global random module when rng is None."""
    if rng is None:
        return random
    return rng


def rand_range(rng: RandomSource, minimum: int, span: int) -> int:
    """
    Draw a uniform integer from [minimum, minimum + span).

    Raises:
        ConfigurationError: If span is not positive (the range would be empty).
    """
    if span <= 0:
        raise ConfigurationError(f"empty range: [{minimum}, {minimum + span})")
    return rng.randrange(minimum, minimum + span)
