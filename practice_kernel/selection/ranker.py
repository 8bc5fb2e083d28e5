"""
Action Ranker: the query side of a simulation tick.

For an acting entity: resolve its actions through the practice, keep the
available ones, score them, and optionally execute the best. Deciding who
acts and when stays with the simulation loop.
"""

from typing import Any, List, Optional

from pydantic import BaseModel

from practice_kernel.logging import get_logger
from practice_kernel.practice.instance import Practice

logger = get_logger(__name__)


class ActionCandidate(BaseModel):
    """An available action with its utility at ranking time."""

    action: Any
    name: str
    utility: int
    position: int                           # Index in the authored action list


def rank_actions(practice: Practice, entity: int, context) -> List[ActionCandidate]:
    """
    Rank the available actions of an entity, best first.

    Ties keep the authored order. Raises EntityNotFoundError if the entity
    has no role in the practice.
    """
    candidates = [
        ActionCandidate(
            action=action,
            name=action.get_name(),
            utility=action.get_utility(context),
            position=position,
        )
        for position, action in enumerate(practice.get_actions(entity))
        if action.is_available(context)
    ]
    candidates.sort(key=lambda c: (-c.utility, c.position))
    return candidates


def choose_action(practice: Practice, entity: int, context) -> Optional[ActionCandidate]:
    """Pick the best available action, or None if nothing is available."""
    ranked = rank_actions(practice, entity, context)
    return ranked[0] if ranked else None


def perform_best_action(
    practice: Practice, entity: int, context
) -> Optional[ActionCandidate]:
    """Execute the best available action against the context."""
    chosen = choose_action(practice, entity, context)
    if chosen is None:
        logger.debug("no_action_available", practice_id=practice.get_id(), entity=entity)
        return None
    chosen.action.execute(context)
    logger.debug(
        "action_performed",
        practice_id=practice.get_id(),
        entity=entity,
        action=chosen.name,
        utility=chosen.utility,
    )
    return chosen
