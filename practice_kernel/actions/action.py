"""
Actions: what an entity can do inside a social practice.

An action bundles three independent parts:
- a Condition deciding whether it is available
- a UtilityRule scoring how desirable it is
- an Effect changing the context when it is executed

Actions only delegate. Executing an unavailable action is not checked
here; the caller ranks and filters before executing.
"""

from typing import Protocol, TypeVar

from practice_kernel.evaluation.conditions import Condition, MockCondition
from practice_kernel.evaluation.effects import DoNothing, Effect
from practice_kernel.evaluation.utility import FixedUtility, UtilityRule
from practice_kernel.logging import get_logger

logger = get_logger(__name__)

ContextT = TypeVar("ContextT")


class Action(Protocol[ContextT]):
    """An action that can be executed in a social simulation."""

    def get_name(self) -> str: ...

    def is_available(self, context: ContextT) -> bool: ...

    def get_utility(self, context: ContextT) -> int: ...

    def execute(self, context: ContextT) -> None: ...


class SimpleAction:
    """An action made of one condition, one utility rule and one effect."""

    def __init__(
        self,
        name: str,
        condition: Condition,
        utility_rule: UtilityRule,
        effect: Effect,
    ):
        self._name = name
        self._condition = condition
        self._utility_rule = utility_rule
        self._effect = effect

    def get_name(self) -> str:
        return self._name

    def is_available(self, context) -> bool:
        """Can the action be executed with the current context?"""
        return self._condition.evaluate(context)

    def get_utility(self, context) -> int:
        """What is the utility of the action with the current context?"""
        return self._utility_rule.calculate_utility(context)

    def execute(self, context) -> None:
        """Apply the effect onto the context."""
        self._effect.apply(context)
        logger.debug("action_executed", action=self._name)

    def __repr__(self) -> str:
        return f"SimpleAction({self._name!r})"


class MockAction(SimpleAction):
    """A named action that is always available, worth 0 and does nothing."""

    def __init__(self, name: str):
        super().__init__(name, MockCondition(True), FixedUtility(0), DoNothing())
