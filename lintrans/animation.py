"""
Timed transition from the identity to a target matrix.

AnimationDriver is a two-state machine (IDLE / ANIMATING). The app calls
tick() once per frame with the current time in milliseconds and reads
`interpolation` back; nothing here sleeps or schedules itself.
"""

import logging

from lintrans.config import ANIMATION_DURATION_MS
from lintrans.matrices import identity_matrix, lerp_matrix

logger = logging.getLogger(__name__)

IDLE = "idle"
ANIMATING = "animating"


def ease_in_out_quad(progress: float) -> float:
    """Quadratic ease-in-out on [0, 1]; ease(0.5) == 0.5."""
    if progress < 0.5:
        return 2 * progress * progress
    return 1 - ((-2 * progress + 2) ** 2) / 2


class AnimationDriver:
    """
    Drives `interpolation` from 0 to 1 over a fixed duration.

    A request while ANIMATING retargets: start time and target are both
    overwritten and the window restarts from zero. Requests never queue.
    """

    def __init__(self, duration_ms=ANIMATION_DURATION_MS):
        self.duration_ms = duration_ms
        self.state = IDLE
        self.target = identity_matrix()
        self.resting = identity_matrix()
        self.interpolation = 1.0
        self._start_ms = None

    @property
    def is_animating(self):
        return self.state == ANIMATING

    def request(self, target, now_ms):
        """Begin (or restart) a transition to `target`."""
        if self.state == ANIMATING:
            logger.debug("Retargeting animation to %s", tuple(target))
        else:
            logger.debug("Starting animation to %s", tuple(target))

        self.target = target
        self._start_ms = now_ms
        self.state = ANIMATING
        self.interpolation = 0.0

    def tick(self, now_ms):
        """Advance to `now_ms`. Returns the published interpolation value."""
        if self.state != ANIMATING:
            return self.interpolation

        elapsed = now_ms - self._start_ms
        progress = min(elapsed / self.duration_ms, 1.0)
        self.interpolation = ease_in_out_quad(progress)

        if progress >= 1:
            self.state = IDLE
            self.resting = self.target
            self.interpolation = 1.0
            self._start_ms = None
            logger.debug("Animation committed %s", tuple(self.target))

        return self.interpolation

    def display_matrix(self):
        """Matrix to draw this frame: identity blended toward the target."""
        return lerp_matrix(identity_matrix(), self.target, self.interpolation)
