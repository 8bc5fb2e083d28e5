"""Role: a participant slot in a social practice."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RoleKind(str, Enum):
    CHARACTER = "character"


class Role(BaseModel):
    """
    A role in a social practice, defined by a kind and an id.

    Roles are frozen values: equal when kind and id match, and hashable so
    they can key the role-name, action and binding mappings.
    """

    model_config = ConfigDict(frozen=True)

    kind: RoleKind = RoleKind.CHARACTER
    id: int = Field(ge=0)

    @classmethod
    def character(cls, id: int) -> "Role":
        return cls(kind=RoleKind.CHARACTER, id=id)

    def __str__(self) -> str:
        return f"{self.kind.value.capitalize()}({self.id})"
