"""
Practice: a live instance of a PracticeTemplate.

Binds each role of the template to the entity currently playing it. The
simulation loop asks a practice for an entity's role and actions.

Behavioral Contract:
- Bindings are fixed at construction; there is no rebinding
- The template is referenced, never copied
- Lookups for unbound entities raise EntityNotFoundError
- Duplicate entity bindings follow KernelConfig.binding_policy
"""

from typing import Dict, List, Optional

from practice_kernel.actions.action import Action
from practice_kernel.errors import (
    EntityNotFoundError,
    MisconfigurationError,
    RoleNotFoundError,
)
from practice_kernel.logging import get_logger
from practice_kernel.models.config import BindingPolicy, KernelConfig
from practice_kernel.models.role import Role
from practice_kernel.practice.template import PracticeTemplate

logger = get_logger(__name__)


def _find_duplicate_bindings(bindings: Dict[Role, int]) -> Dict[int, List[Role]]:
    """Group roles by entity and keep the entities bound more than once."""
    roles_by_entity: Dict[int, List[Role]] = {}
    for role, entity in bindings.items():
        roles_by_entity.setdefault(entity, []).append(role)
    return {
        entity: roles
        for entity, roles in roles_by_entity.items()
        if len(roles) > 1
    }


class Practice:
    """A social practice: which entity participates as which role."""

    def __init__(
        self,
        id: int,
        template: PracticeTemplate,
        bindings: Dict[Role, int],
        config: Optional[KernelConfig] = None,
    ):
        self.config = config or KernelConfig()
        self._id = id
        self._template = template
        self._bindings: Dict[Role, int] = dict(bindings)

        duplicates = _find_duplicate_bindings(self._bindings)
        if duplicates:
            details = {
                str(entity): [str(role) for role in roles]
                for entity, roles in duplicates.items()
            }
            if self.config.binding_policy == BindingPolicy.REJECT:
                raise MisconfigurationError(
                    f"Practice {id} binds entities to several roles: {details}",
                    {"practice_id": id, "duplicates": details},
                )
            logger.warning(
                "duplicate_entity_binding",
                practice_id=id,
                duplicates=details,
                policy=self.config.binding_policy.value,
            )

        logger.debug(
            "practice_created",
            practice_id=id,
            template=template.get_name(),
            roles=len(self._bindings),
        )

    def get_actions(self, entity: int) -> List[Action]:
        """Gets all actions of an entity in this practice."""
        return self._template.get_actions(self.get_role(entity))

    def get_id(self) -> int:
        return self._id

    def get_role(self, entity: int) -> Role:
        """
        Gets the role of an entity that participates in this practice.

        With duplicate bindings allowed, the first role in binding order wins.
        """
        for role, bound_entity in self._bindings.items():
            if bound_entity == entity:
                return role
        logger.info("entity_not_bound", practice_id=self._id, entity=entity)
        raise EntityNotFoundError(entity, self._id)

    def get_entity(self, role: Role) -> int:
        """Gets the entity playing a role."""
        entity = self._bindings.get(role)
        if entity is None:
            raise RoleNotFoundError(role, f"Practice {self._id}")
        return entity

    def get_bindings(self) -> Dict[Role, int]:
        return dict(self._bindings)

    def get_template(self) -> PracticeTemplate:
        return self._template

    def __repr__(self) -> str:
        return (
            f"Practice(id={self._id}, template={self._template.get_name()!r})"
        )
