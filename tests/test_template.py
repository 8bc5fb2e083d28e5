"""Tests for practice templates."""

import pytest

from practice_kernel.actions.action import MockAction
from practice_kernel.errors import NotFoundError, RoleNotFoundError
from practice_kernel.models.role import Role
from practice_kernel.practice.template import PracticeTemplate

SPEAKER = Role.character(0)
LISTENER = Role.character(1)


def _make_conversation_template() -> PracticeTemplate:
    """Speaker has two actions, Listener is passive."""
    return PracticeTemplate(
        id=42,
        name="template0",
        role_names={SPEAKER: "Speaker", LISTENER: "Listener"},
        actions={SPEAKER: [MockAction("action0"), MockAction("action1")]},
    )


class TestPracticeTemplate:
    def setup_method(self):
        self.template = _make_conversation_template()

    def test_accessors(self):
        assert self.template.get_id() == 42
        assert self.template.get_name() == "template0"

    def test_get_actions_keeps_order(self):
        actions = self.template.get_actions(SPEAKER)
        assert [a.get_name() for a in actions] == ["action0", "action1"]

    def test_get_actions_for_passive_role(self):
        assert self.template.get_actions(LISTENER) == []

    def test_get_actions_for_unknown_role(self):
        assert self.template.get_actions(Role.character(99)) == []

    def test_get_roles(self):
        roles = self.template.get_roles()
        assert len(roles) == 2
        assert SPEAKER in roles
        assert LISTENER in roles

    def test_get_role_name(self):
        assert self.template.get_role_name(SPEAKER) == "Speaker"
        assert self.template.get_role_name(LISTENER) == "Listener"

    def test_get_role_name_unknown_role(self):
        with pytest.raises(RoleNotFoundError) as exc_info:
            self.template.get_role_name(Role.character(99))
        error = exc_info.value
        assert isinstance(error, NotFoundError)
        assert error.code == "NOT_FOUND"
        assert error.key == Role.character(99)
        assert "template0" in error.message

    def test_role_with_actions_but_no_name(self):
        ghost = Role.character(5)
        template = PracticeTemplate(
            id=1,
            name="t",
            role_names={},
            actions={ghost: [MockAction("haunt")]},
        )
        assert [a.get_name() for a in template.get_actions(ghost)] == ["haunt"]
        assert template.get_roles() == []
        with pytest.raises(RoleNotFoundError):
            template.get_role_name(ghost)

    def test_returned_list_does_not_change_template(self):
        actions = self.template.get_actions(SPEAKER)
        actions.clear()
        assert len(self.template.get_actions(SPEAKER)) == 2

    def test_authoring_mappings_are_copied(self):
        role_names = {SPEAKER: "Speaker"}
        speaker_actions = [MockAction("action0")]
        template = PracticeTemplate(
            id=2, name="t", role_names=role_names, actions={SPEAKER: speaker_actions}
        )
        role_names[LISTENER] = "Listener"
        speaker_actions.append(MockAction("action1"))
        assert template.get_roles() == [SPEAKER]
        assert len(template.get_actions(SPEAKER)) == 1
