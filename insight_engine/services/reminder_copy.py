"""Reminder notification copy

Copy variation is the only randomized output in the engine. The random
source is injected so callers (and tests) control it, and nothing else in
the engine reads it.
"""

import random
from typing import List, Optional, Tuple

REMINDER_TITLE = "Time for a quick reset"

REMINDER_BODIES: List[str] = [
    "2 minutes for your neck and shoulders?",
    "Quick desk break? Your body will thank you.",
    "Time to move and reset.",
    "A quick stretch goes a long way.",
    "Your desk break is ready.",
    "Take a moment to reset your posture.",
    "2 minutes. No equipment. Let's go.",
]


class ReminderCopyPicker:
    """Picks reminder title and body"""

    def __init__(self, rng: Optional[random.Random] = None, bodies: Optional[List[str]] = None):
        self.rng = rng or random.Random()
        self.bodies = list(bodies) if bodies else list(REMINDER_BODIES)

    def title(self) -> str:
        return REMINDER_TITLE

    def body(self) -> str:
        return self.rng.choice(self.bodies)

    def pick(self) -> Tuple[str, str]:
        return self.title(), self.body()
