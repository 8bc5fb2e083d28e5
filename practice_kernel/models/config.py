"""Kernel configuration: utility scale, binding policy and logging."""

from enum import Enum

from pydantic import BaseModel, model_validator


class BindingPolicy(str, Enum):
    """How a Practice treats one entity bound to several roles."""
    REJECT = "reject"            # Construction fails with MisconfigurationError
    FIRST_MATCH = "first_match"  # First role in binding order wins


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class UtilityBounds(BaseModel):
    """The signed whole-number scale utilities must stay within."""

    minimum: int = -(2 ** 31)
    maximum: int = 2 ** 31 - 1

    @model_validator(mode="after")
    def _check_order(self) -> "UtilityBounds":
        if self.minimum > self.maximum:
            raise ValueError("minimum must not exceed maximum")
        return self

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


class KernelConfig(BaseModel):
    """Configuration for the practice kernel."""

    utility_bounds: UtilityBounds = UtilityBounds()
    binding_policy: BindingPolicy = BindingPolicy.REJECT
    log_level: LogLevel = LogLevel.INFO
    json_logs: bool = True
