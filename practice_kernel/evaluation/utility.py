"""
Utility rules: integer scores telling how desirable something is.

Utility is a whole-number scale bounded by ``UtilityBounds`` (signed 32-bit
by default). Values that leave the scale raise ``UtilityOverflowError``
instead of wrapping around.
"""

from typing import Iterable, Optional, Protocol, TypeVar

from practice_kernel.errors import UtilityOverflowError
from practice_kernel.evaluation.conditions import Condition
from practice_kernel.logging import get_logger
from practice_kernel.models.config import KernelConfig, UtilityBounds

logger = get_logger(__name__)

ContextT = TypeVar("ContextT", contravariant=True)


class UtilityRule(Protocol[ContextT]):
    """Calculates the utility of something (e.g. an action) for a context."""

    def calculate_utility(self, context: ContextT) -> int: ...


def _default_bounds() -> UtilityBounds:
    return KernelConfig().utility_bounds


def _checked(rule: str, value: int, bounds: UtilityBounds) -> int:
    """Return ``value`` if it lies within ``bounds``, raise otherwise."""
    if not bounds.contains(value):
        logger.warning(
            "utility_overflow",
            rule=rule,
            value=value,
            minimum=bounds.minimum,
            maximum=bounds.maximum,
        )
        raise UtilityOverflowError(rule, value, bounds.minimum, bounds.maximum)
    return value


class FixedUtility:
    """A utility rule that always returns the same utility."""

    def __init__(self, utility: int, bounds: Optional[UtilityBounds] = None):
        self.utility = _checked("FixedUtility", utility, bounds or _default_bounds())

    def calculate_utility(self, context) -> int:
        return self.utility


class ConditionalUtility:
    """Returns ``utility`` if the condition holds, else 0."""

    def __init__(
        self,
        condition: Condition,
        utility: int,
        bounds: Optional[UtilityBounds] = None,
    ):
        self.condition = condition
        self.utility = _checked(
            "ConditionalUtility", utility, bounds or _default_bounds()
        )

    def calculate_utility(self, context) -> int:
        if self.condition.evaluate(context):
            return self.utility
        return 0


class TotalUtility:
    """
    Sums the utilities of all sub-rules.

    Every partial sum is checked against the bounds, so an overflow is
    reported at the rule that produced it. An empty total is 0.
    """

    def __init__(
        self,
        rules: Iterable[UtilityRule],
        bounds: Optional[UtilityBounds] = None,
    ):
        self.rules = tuple(rules)
        self.bounds = bounds or _default_bounds()

    def calculate_utility(self, context) -> int:
        total = 0
        for rule in self.rules:
            total = _checked(
                "TotalUtility", total + rule.calculate_utility(context), self.bounds
            )
        return total


class MaxUtility:
    """
    Returns the highest utility of all sub-rules.

    An empty MaxUtility returns 0, so "no rules" and "utility 0" look the
    same to the caller; check ``rules`` if the difference matters.
    """

    def __init__(
        self,
        rules: Iterable[UtilityRule],
        bounds: Optional[UtilityBounds] = None,
    ):
        self.rules = tuple(rules)
        self.bounds = bounds or _default_bounds()

    def calculate_utility(self, context) -> int:
        best = max(
            (rule.calculate_utility(context) for rule in self.rules), default=0
        )
        return _checked("MaxUtility", best, self.bounds)
