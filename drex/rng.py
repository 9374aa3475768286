"""Random number sources shared by the roll evaluator and the range roller."""

import random
from typing import Protocol

from aws_lambda_powertools import Logger

from .config import SERVICE_NAME, get_config

logger = Logger(service=SERVICE_NAME, child=True)


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from a closed interval.

    The ``random`` module itself, ``random.Random`` and ``random.SystemRandom``
    all satisfy this protocol.
    """

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        ...


_default_source: RandomSource | None = None


def get_random_source(seed: int | None = None) -> RandomSource:
    """Get a random source.

    With an explicit seed a new dedicated generator is returned. Otherwise the
    shared default is returned: a generator seeded from DREX_SEED when that is
    configured, else the process-wide ``random`` module.

    Args:
        seed: Optional seed for a dedicated generator

    Returns:
        RandomSource instance
    """
    global _default_source

    if seed is not None:
        return random.Random(seed)

    if _default_source is None:
        config = get_config()
        if config.is_seeded:
            logger.debug("Using seeded default random source", extra={"seed": config.seed})
            _default_source = random.Random(config.seed)
        else:
            _default_source = random
    return _default_source


def reset_random_source() -> None:
    """Forget the shared default source."""
    global _default_source
    _default_source = None
