# tests/test_permissions.py

"""
Tests for permission checks and UI visibility.
"""

import logging

import pytest

from core.errors import reported_gaps
from core.logging_config import LOGGER_NAME
from core.permission_helpers import (
    ACTION_CHECKS,
    can_perform_action,
    can_view_ui_component,
    can_create,
    can_edit,
    can_delete,
    can_view,
    can_export,
    can_import,
    get_action_permissions,
    get_visible_tabs,
    get_visible_sections,
    get_visible_buttons,
    filter_tabs_by_permission,
)
from core.policy_config import PolicyConfig
from core.tab_resolver import get_default_tab
from models.actor import Actor
from models.enums import Role, ActionType, UIComponentType
from models.permission import PermissionEntry


def make_actor(role, user_id="user-1", branch_id="branch-1"):
    return Actor(user_id=user_id, role=role, branch_id=branch_id)


class Tab:
    def __init__(self, value, label=None):
        self.value = value
        self.label = label or value


# ============================================================
# Scenario: "users" resource
# ============================================================
def test_users_scenario_accountant(policy, accountant_actor):
    assert can_edit(accountant_actor, "users", config=policy) is False
    assert can_delete(accountant_actor, "users", config=policy) is False
    assert get_visible_tabs(accountant_actor, "users", config=policy) == []
    assert get_default_tab(accountant_actor, "users", "roles", config=policy) is None


def test_users_scenario_admin(policy, admin_actor):
    assert can_edit(admin_actor, "users", config=policy) is True
    # empty role set denies even the most privileged role
    assert can_delete(admin_actor, "users", config=policy) is False
    assert get_visible_tabs(admin_actor, "users", config=policy) == ["overview", "roles", "audit"]
    assert get_default_tab(admin_actor, "users", "roles", config=policy) == "roles"
    assert get_default_tab(admin_actor, "users", config=policy) == "overview"


def test_users_scenario_on_compiled_table(admin_actor, accountant_actor):
    """The shipped table encodes the same users rules."""
    assert can_edit(admin_actor, "users") is True
    assert can_delete(admin_actor, "users") is False
    assert get_visible_tabs(admin_actor, "users") == ["overview", "roles", "audit"]
    assert can_edit(accountant_actor, "users") is False
    assert get_default_tab(accountant_actor, "users", "roles") is None


# ============================================================
# Fail-closed totality
# ============================================================
@pytest.mark.parametrize("resource", ["unknown", "", "USERS", "users "])
def test_unconfigured_resource_denies_everything(policy, all_actors, resource):
    for actor in all_actors:
        for action in ActionType:
            assert can_perform_action(actor, resource, action, config=policy) is False
        for component_type in UIComponentType:
            assert can_view_ui_component(actor, resource, component_type, "overview", config=policy) is False
        assert get_visible_tabs(actor, resource, config=policy) == []
        assert get_visible_sections(actor, resource, config=policy) == []
        assert get_visible_buttons(actor, resource, config=policy) == []
        assert get_default_tab(actor, resource, "overview", config=policy) is None


def test_unconfigured_action_denies_admin(policy, admin_actor):
    # users has no export/import entries at all
    assert can_export(admin_actor, "users", config=policy) is False
    assert can_import(admin_actor, "users", config=policy) is False


def test_unconfigured_component_type_is_empty(policy, admin_actor):
    assert get_visible_sections(admin_actor, "users", config=policy) == []
    assert get_visible_buttons(admin_actor, "users", config=policy) == []


def test_unknown_dimension_values_deny(policy, admin_actor):
    assert can_perform_action(admin_actor, "users", "approve", config=policy) is False
    assert can_view_ui_component(admin_actor, "users", "card", "overview", config=policy) is False
    assert can_view_ui_component(admin_actor, "users", UIComponentType.tab, "missing", config=policy) is False


def test_string_dimension_values_match_enum(policy, admin_actor):
    assert can_perform_action(admin_actor, "users", "edit", config=policy) is True
    assert can_view_ui_component(admin_actor, "users", "tab", "roles", config=policy) is True


def test_unhashable_inputs_never_raise(policy, admin_actor):
    assert can_perform_action(admin_actor, ["users"], ActionType.edit, config=policy) is False
    assert can_perform_action(admin_actor, "users", ["edit"], config=policy) is False
    assert can_view_ui_component(admin_actor, "users", UIComponentType.tab, ["roles"], config=policy) is False


def test_empty_policy_denies(admin_actor):
    empty = PolicyConfig([])
    assert can_view(admin_actor, "students", config=empty) is False
    assert get_visible_tabs(admin_actor, "students", config=empty) == []


# ============================================================
# Null actor totality
# ============================================================
@pytest.mark.parametrize("actor", [None, Actor.anonymous(), Actor(user_id="u", branch_id="b")])
def test_actor_without_role_denies_everything(policy, actor):
    for resource in policy.resources():
        for action in ActionType:
            assert can_perform_action(actor, resource, action, config=policy) is False
        assert get_visible_tabs(actor, resource, config=policy) == []
        assert get_visible_sections(actor, resource, config=policy) == []
        assert get_visible_buttons(actor, resource, config=policy) == []
        assert filter_tabs_by_permission(actor, resource, [Tab("a"), Tab("overview")], config=policy) == []
        assert get_default_tab(actor, resource, "overview", config=policy) is None


def test_actor_without_role_does_not_log_gaps(policy, anonymous_actor):
    can_view(anonymous_actor, "nowhere", config=policy)
    assert reported_gaps() == set()


# ============================================================
# Role exactness
# ============================================================
def test_single_role_grant_denies_all_other_roles(policy):
    for role in Role:
        actor = make_actor(role)
        expected = role == Role.accountant
        assert can_view(actor, "ledger", config=policy) is expected
        assert can_view_ui_component(actor, "ledger", UIComponentType.section, "totals", config=policy) is expected


def test_no_cascading_between_actions(policy, accountant_actor):
    # view on ledger does not imply edit, create or delete
    assert can_view(accountant_actor, "ledger", config=policy) is True
    assert can_edit(accountant_actor, "ledger", config=policy) is False
    assert can_create(accountant_actor, "ledger", config=policy) is False
    assert can_delete(accountant_actor, "ledger", config=policy) is False


def test_admin_has_no_implicit_bypass(policy, admin_actor):
    # ledger view is granted to accountant only
    assert can_view(admin_actor, "ledger", config=policy) is False
    assert "totals" not in get_visible_sections(admin_actor, "ledger", config=policy)


def test_empty_button_entry_denies_everyone(policy, all_actors):
    for actor in all_actors:
        assert can_view_ui_component(actor, "ledger", UIComponentType.button, "ledger-delete", config=policy) is False


# ============================================================
# Order preservation
# ============================================================
def test_visible_tabs_follow_declared_order(policy, admin_actor, accountant_actor, academic_actor):
    assert get_visible_tabs(admin_actor, "ledger", config=policy) == ["b", "a", "c"]
    assert get_visible_tabs(accountant_actor, "ledger", config=policy) == ["b", "a"]
    assert get_visible_tabs(academic_actor, "ledger", config=policy) == ["a"]


def test_visible_tabs_are_subset_in_declared_order_for_every_role(policy):
    declared = list(policy.component_ids("ledger", UIComponentType.tab))
    for role in Role:
        visible = get_visible_tabs(make_actor(role), "ledger", config=policy)
        assert visible == [tab for tab in declared if tab in visible]


def test_filter_tabs_keeps_caller_order(policy, admin_actor, accountant_actor):
    tabs = [Tab("c"), Tab("a"), Tab("zzz"), Tab("b")]

    assert [t.value for t in filter_tabs_by_permission(admin_actor, "ledger", tabs, config=policy)] == ["c", "a", "b"]
    assert [t.value for t in filter_tabs_by_permission(accountant_actor, "ledger", tabs, config=policy)] == ["a", "b"]


def test_filter_tabs_returns_original_items(policy, admin_actor):
    tabs = [Tab("a", "Alpha"), Tab("b", "Beta")]
    result = filter_tabs_by_permission(admin_actor, "ledger", tabs, config=policy)
    assert result[0] is tabs[0]
    assert result[1] is tabs[1]


def test_filter_tabs_accepts_mappings(policy, academic_actor):
    tabs = [{"value": "b", "label": "B"}, {"value": "a", "label": "A"}, {"label": "no value"}]
    assert filter_tabs_by_permission(academic_actor, "ledger", tabs, config=policy) == [{"value": "a", "label": "A"}]


def test_visible_sections_and_buttons(policy, accountant_actor, admin_actor):
    assert get_visible_sections(accountant_actor, "ledger", config=policy) == ["totals", "history"]
    assert get_visible_sections(admin_actor, "ledger", config=policy) == ["history"]
    assert get_visible_buttons(admin_actor, "ledger", config=policy) == ["ledger-approve"]
    assert get_visible_buttons(accountant_actor, "ledger", config=policy) == []


# ============================================================
# Wrappers and idempotence
# ============================================================
def test_every_action_type_has_a_wrapper():
    assert set(ACTION_CHECKS) == set(ActionType)


def test_wrappers_match_can_perform_action(policy, all_actors):
    for actor in all_actors:
        for resource in ("users", "ledger", "nope"):
            for action, check in ACTION_CHECKS.items():
                assert check(actor, resource, config=policy) == can_perform_action(actor, resource, action, config=policy)


def test_action_permissions_map(policy, admin_actor):
    assert get_action_permissions(admin_actor, "users", config=policy) == {
        "create": True,
        "edit": True,
        "delete": False,
        "view": True,
        "export": False,
        "import": False,
    }


def test_repeated_queries_are_identical(policy, accountant_actor):
    first = (
        can_export(accountant_actor, "ledger", config=policy),
        get_visible_tabs(accountant_actor, "ledger", config=policy),
        get_default_tab(accountant_actor, "ledger", config=policy),
    )
    for _ in range(5):
        assert (
            can_export(accountant_actor, "ledger", config=policy),
            get_visible_tabs(accountant_actor, "ledger", config=policy),
            get_default_tab(accountant_actor, "ledger", config=policy),
        ) == first


# ============================================================
# Configuration gap diagnostics
# ============================================================
def test_gap_is_logged_once_without_changing_result(policy, admin_actor, caplog):
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        assert can_export(admin_actor, "users", config=policy) is False
        assert can_export(admin_actor, "users", config=policy) is False

    warnings = [r for r in caplog.records if "config gap" in r.getMessage()]
    assert len(warnings) == 1
    assert "users" in warnings[0].getMessage()
    assert ("users", "export") in reported_gaps()


def test_explicit_empty_entry_is_not_a_gap(policy, admin_actor):
    assert can_delete(admin_actor, "users", config=policy) is False
    assert reported_gaps() == set()


def test_gap_warnings_can_be_disabled(policy, admin_actor, monkeypatch):
    from core.config import settings

    monkeypatch.setattr(settings, "POLICY_GAP_WARNINGS", False)
    assert can_import(admin_actor, "users", config=policy) is False
    assert reported_gaps() == set()


def test_component_gap_is_described(policy, admin_actor):
    can_view_ui_component(admin_actor, "users", UIComponentType.button, "users-purge", config=policy)
    assert ("users", "button:users-purge") in reported_gaps()


# ============================================================
# Shipped table spot checks
# ============================================================
def test_marks_reports_tab_hidden_from_academic(academic_actor, admin_actor):
    assert get_visible_tabs(academic_actor, "marks") == ["exam-marks", "test-marks", "student-views"]
    assert "reports" in get_visible_tabs(admin_actor, "marks")


def test_transport_buttons_hidden_from_accountant(accountant_actor):
    assert "transport" in get_visible_tabs(accountant_actor, "students")
    assert get_visible_buttons(accountant_actor, "students") == []


def test_students_default_tab_per_role(accountant_actor, academic_actor):
    # section-mapping is declared first but hidden from ACCOUNTANT
    assert get_default_tab(accountant_actor, "students") == "enrollments"
    assert get_default_tab(academic_actor, "students") == "section-mapping"


def test_reports_module_is_read_only(admin_actor):
    assert can_view(admin_actor, "reports") is True
    assert can_create(admin_actor, "reports") is False
    assert can_edit(admin_actor, "reports") is False


def test_unconfigured_resource_is_recorded_once_at_debug(policy, admin_actor, caplog):
    with caplog.at_level(logging.WARNING, logger=LOGGER_NAME):
        get_action_permissions(admin_actor, "spaceships", config=policy)

    assert reported_gaps() == {("spaceships", "*")}
    assert not [r for r in caplog.records if "config gap" in r.getMessage()]


def test_gap_log_drops_oldest_past_its_bound(policy, admin_actor, monkeypatch):
    from core.config import settings

    monkeypatch.setattr(settings, "POLICY_GAP_LOG_MAX_ENTRIES", 3)
    for i in range(10):
        can_view_ui_component(admin_actor, "users", UIComponentType.button, f"btn-{i}", config=policy)

    assert reported_gaps() == {
        ("users", "button:btn-7"),
        ("users", "button:btn-8"),
        ("users", "button:btn-9"),
    }
