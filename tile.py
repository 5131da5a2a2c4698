"""Demo tile state: a step counter plus a short-lived "charged" highlight."""

import logging
from typing import Optional

from config import CHARGE_SECONDS

logger = logging.getLogger(__name__)


class ChargeTimer:
    """One-shot reset deadline. Re-arming replaces (cancels) the pending one."""

    def __init__(self, duration: float = CHARGE_SECONDS):
        self.duration = duration
        self.deadline: Optional[float] = None

    def arm(self, now: float) -> float:
        self.deadline = now + self.duration
        return self.deadline

    def cancel(self) -> None:
        self.deadline = None

    def pending(self, now: float) -> bool:
        return self.deadline is not None and now < self.deadline

    def remaining(self, now: float) -> float:
        if not self.pending(now):
            return 0.0
        return self.deadline - now


class TileState:
    def __init__(self, duration: float = CHARGE_SECONDS):
        self.steps = 0
        self.timer = ChargeTimer(duration)

    def step(self, now: float) -> int:
        self.steps += 1
        self.timer.arm(now)
        logger.info("Demo tile stepped (%d total)", self.steps)
        return self.steps

    def is_charged(self, now: float) -> bool:
        return self.timer.pending(now)

    def remaining(self, now: float) -> float:
        return self.timer.remaining(now)

    def cancel(self) -> None:
        self.timer.cancel()
