"""
Conditions: pure predicates over the world context.

A condition decides whether an action is currently allowed. Composite
conditions own their children; the trees are acyclic and evaluating one
never mutates the context.
"""

from datetime import datetime
from typing import Callable, Iterable, Protocol, TypeVar

from croniter import croniter

from practice_kernel.errors import MisconfigurationError

ContextT = TypeVar("ContextT", contravariant=True)


class Condition(Protocol[ContextT]):
    """A condition that can evaluate to true or false given a context."""

    def evaluate(self, context: ContextT) -> bool: ...


class TrueCondition:
    """A condition that always holds."""

    def evaluate(self, context) -> bool:
        return True


class FalseCondition:
    """A condition that never holds."""

    def evaluate(self, context) -> bool:
        return False


class MockCondition:
    """A condition that always evaluates to a fixed value."""

    def __init__(self, value: bool):
        self.value = value

    def evaluate(self, context) -> bool:
        return self.value


class NotCondition:
    """Negates the evaluation of another condition."""

    def __init__(self, condition: Condition):
        self.condition = condition

    def evaluate(self, context) -> bool:
        return not self.condition.evaluate(context)


class AndCondition:
    """
    True if all sub-conditions are true.

    Stops at the first false sub-condition. An empty AndCondition is true.
    """

    def __init__(self, conditions: Iterable[Condition]):
        self.conditions = tuple(conditions)

    def evaluate(self, context) -> bool:
        for condition in self.conditions:
            if not condition.evaluate(context):
                return False
        return True


class OrCondition:
    """
    True if any sub-condition is true.

    Stops at the first true sub-condition. An empty OrCondition is false.
    """

    def __init__(self, conditions: Iterable[Condition]):
        self.conditions = tuple(conditions)

    def evaluate(self, context) -> bool:
        for condition in self.conditions:
            if condition.evaluate(context):
                return True
        return False


class ScheduledCondition:
    """
    True while the context's clock falls inside a cron schedule.

    ``clock`` extracts the simulation time from the context, so the kernel
    never reads the wall clock itself. For hour-range schedules like
    "* 22-23,0-6 * * *" the condition holds for every minute of those hours.
    """

    def __init__(self, schedule: str, clock: Callable[[object], datetime]):
        if not croniter.is_valid(schedule):
            raise MisconfigurationError(
                f"Invalid cron schedule: {schedule!r}",
                {"schedule": schedule},
            )
        self.schedule = schedule
        self.clock = clock

    def evaluate(self, context) -> bool:
        return croniter.match(self.schedule, self.clock(context))
