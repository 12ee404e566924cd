"""Random number sources.

`OneThroughTen` adopts `GeneratesRandomNumbers` explicitly and draws uniformly
from the closed range 1..10.
"""

from __future__ import annotations

import logging
import random

from core.config import AppSettings
from core.interfaces.random_source import GeneratesRandomNumbers

logger = logging.getLogger(__name__)


class OneThroughTen(GeneratesRandomNumbers):
    """Uniform integers in [1, 10].

    Without an explicit `rng` the process-wide `random` module is used, so no
    reproducibility is promised.
    """

    low = 1
    high = 10

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    def random(self) -> int:
        source = self._rng or random
        value = source.randint(self.low, self.high)
        logger.debug("drew %d from [%d, %d]", value, self.low, self.high)
        return value


def build_random_source(settings: AppSettings | None = None) -> OneThroughTen:
    """Create a `OneThroughTen` honouring `random_seed` from settings."""

    settings = settings or AppSettings()
    if settings.random_seed is None:
        return OneThroughTen()
    logger.debug("seeding random source with %d", settings.random_seed)
    return OneThroughTen(rng=random.Random(settings.random_seed))
