"""Effects: mutations applied to the world context when an action runs."""

from typing import Iterable, Protocol, TypeVar

ContextT = TypeVar("ContextT", contravariant=True)


class Effect(Protocol[ContextT]):
    """An effect that can modify the context."""

    def apply(self, context: ContextT) -> None: ...


class DoNothing:
    """An effect that does nothing."""

    def apply(self, context) -> None:
        pass


class MockEffect:
    """
    Adds a fixed amount to ``context.value``.

    Test double for counter-like contexts.
    """

    def __init__(self, amount: int):
        self.amount = amount

    def apply(self, context) -> None:
        context.value += self.amount


class VectorEffect:
    """
    Applies several effects in order.

    Each effect sees the mutations of the ones before it.
    """

    def __init__(self, effects: Iterable[Effect]):
        self.effects = tuple(effects)

    def apply(self, context) -> None:
        for effect in self.effects:
            effect.apply(context)
