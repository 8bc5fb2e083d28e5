"""Practice kernel data models."""

from practice_kernel.models.config import (
    BindingPolicy,
    KernelConfig,
    LogLevel,
    UtilityBounds,
)
from practice_kernel.models.role import Role, RoleKind

__all__ = [
    "BindingPolicy",
    "KernelConfig",
    "LogLevel",
    "Role",
    "RoleKind",
    "UtilityBounds",
]
