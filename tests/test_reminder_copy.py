import random

from insight_engine.services import ReminderCopyPicker
from insight_engine.services.reminder_copy import REMINDER_BODIES, REMINDER_TITLE


def test_seeded_picker_is_repeatable():
    first = ReminderCopyPicker(rng=random.Random(42))
    second = ReminderCopyPicker(rng=random.Random(42))

    assert [first.body() for _ in range(10)] == [second.body() for _ in range(10)]


def test_bodies_come_from_the_pool():
    picker = ReminderCopyPicker(rng=random.Random(7))
    for _ in range(20):
        title, body = picker.pick()
        assert title == REMINDER_TITLE
        assert body in REMINDER_BODIES


def test_custom_bodies():
    picker = ReminderCopyPicker(rng=random.Random(0), bodies=["Stand up"])
    assert picker.body() == "Stand up"
