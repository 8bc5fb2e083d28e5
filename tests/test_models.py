"""Tests for core data models."""

import pytest
from pydantic import ValidationError

from practice_kernel.models import (
    BindingPolicy,
    KernelConfig,
    LogLevel,
    Role,
    RoleKind,
    UtilityBounds,
)


class TestRole:
    def test_character_constructor(self):
        role = Role.character(3)
        assert role.kind == RoleKind.CHARACTER
        assert role.id == 3

    def test_structural_equality(self):
        assert Role.character(0) == Role.character(0)
        assert Role.character(0) != Role.character(1)

    def test_usable_as_mapping_key(self):
        names = {Role.character(0): "Speaker", Role.character(1): "Listener"}
        assert names[Role.character(0)] == "Speaker"
        assert len({Role.character(1), Role.character(1)}) == 1

    def test_immutable(self):
        role = Role.character(0)
        with pytest.raises(ValidationError):
            role.id = 5

    def test_copy_is_equal(self):
        role = Role.character(7)
        assert role.model_copy() == role

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError):
            Role.character(-1)

    def test_str(self):
        assert str(Role.character(4)) == "Character(4)"


class TestKernelConfig:
    def test_defaults(self):
        config = KernelConfig()
        assert config.binding_policy == BindingPolicy.REJECT
        assert config.utility_bounds.minimum == -(2 ** 31)
        assert config.utility_bounds.maximum == 2 ** 31 - 1
        assert config.log_level == "info"

    def test_log_level_from_string(self):
        assert KernelConfig(log_level="debug").log_level == LogLevel.DEBUG

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            KernelConfig(log_level="verbose")

    def test_policy_from_string(self):
        config = KernelConfig(binding_policy="first_match")
        assert config.binding_policy == BindingPolicy.FIRST_MATCH

    def test_bounds_contains(self):
        bounds = UtilityBounds(minimum=-5, maximum=5)
        assert bounds.contains(-5)
        assert bounds.contains(5)
        assert not bounds.contains(6)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValidationError):
            UtilityBounds(minimum=10, maximum=0)
