from __future__ import annotations

import random
from typing import Callable

from ..core.constants import SIMULATED_FAILURE_RATE


class FailureInjector:
    """Decides whether the current call should fail on purpose.

    ``draw`` returns a float in [0, 1); a fresh draw is taken per call. Tests
    pass ``lambda: 0.0`` or ``lambda: 0.99`` to force either branch.
    """

    def __init__(self, rate: float = SIMULATED_FAILURE_RATE, *, draw: Callable[[], float] = random.random):
        if not 0.0 <= rate <= 1.0:
            raise ValueError(f"Failure rate must be within [0, 1], got {rate}")
        self.rate = rate
        self._draw = draw

    def should_fail(self) -> bool:
        return self._draw() < self.rate
