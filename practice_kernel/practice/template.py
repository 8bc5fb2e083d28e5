"""
Practice Template: a reusable social scenario definition.

Defines which roles participate in a social practice and which actions
are available for each role. Role names and role actions are independent
mappings: a passive role can have a name but no actions.
"""

from typing import Dict, List, Sequence

from practice_kernel.actions.action import Action
from practice_kernel.errors import RoleNotFoundError
from practice_kernel.logging import get_logger
from practice_kernel.models.role import Role

logger = get_logger(__name__)


class PracticeTemplate:
    """
    A template for a social practice, e.g. "conversation".

    Immutable after construction. Action lists keep their authored order,
    which callers rely on when ranking ties.
    """

    def __init__(
        self,
        id: int,
        name: str,
        role_names: Dict[Role, str],
        actions: Dict[Role, Sequence[Action]],
    ):
        self._id = id
        self._name = name
        self._role_names: Dict[Role, str] = dict(role_names)
        self._actions: Dict[Role, tuple] = {
            role: tuple(role_actions) for role, role_actions in actions.items()
        }

    def get_actions(self, role: Role) -> List[Action]:
        """Gets all actions of a role, or an empty list if it has none."""
        return list(self._actions.get(role, ()))

    def get_id(self) -> int:
        return self._id

    def get_name(self) -> str:
        return self._name

    def get_roles(self) -> List[Role]:
        """Gets all roles that have a name in this template."""
        return list(self._role_names)

    def get_role_name(self, role: Role) -> str:
        """
        Gets the display name of a role.

        Raises RoleNotFoundError if the role was never given a name.
        """
        name = self._role_names.get(role)
        if name is None:
            logger.warning(
                "role_name_missing", template=self._name, role=str(role)
            )
            raise RoleNotFoundError(role, f"Template {self._name}")
        return name

    def __repr__(self) -> str:
        return f"PracticeTemplate(id={self._id}, name={self._name!r})"
