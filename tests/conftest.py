# tests/conftest.py

"""
Pytest configuration and shared fixtures for testing.
"""

import pytest
from fastapi.testclient import TestClient
from typing import Generator

from core.errors import reset_reported_gaps
from core.policy_config import PolicyConfig
from core.permission_queries import get_permission_queries
from core.session import get_session
from models.actor import Actor, BranchMembership
from models.enums import Role, ActionType, UIComponentType
from models.permission import PermissionEntry


ADMINS = (Role.institute_admin, Role.admin)


@pytest.fixture(scope="function")
def app():
    """Create a test FastAPI application instance."""
    from main import create_app
    return create_app()


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client for the FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


def make_actor(role, user_id="user-1", branch_id="branch-1") -> Actor:
    return Actor(user_id=user_id, role=role, branch_id=branch_id)


@pytest.fixture
def admin_actor():
    return make_actor(Role.admin, user_id="admin-user")


@pytest.fixture
def accountant_actor():
    return make_actor(Role.accountant, user_id="accountant-user")


@pytest.fixture
def academic_actor():
    return make_actor(Role.academic, user_id="academic-user")


@pytest.fixture
def anonymous_actor():
    return Actor.anonymous()


@pytest.fixture
def all_actors(admin_actor, accountant_actor, academic_actor):
    """One actor per role, including the fully privileged one."""
    return [
        admin_actor,
        make_actor(Role.institute_admin, user_id="institute-admin-user"),
        accountant_actor,
        academic_actor,
    ]


@pytest.fixture
def multi_branch_memberships():
    return (
        BranchMembership(branch_id="north", branch_name="North Campus", roles=("ACCOUNTANT",)),
        BranchMembership(branch_id="south", branch_name="South Campus", roles=("academic", "INSTITUTE_ADMIN")),
    )


@pytest.fixture
def policy() -> PolicyConfig:
    """
    Small policy used by most engine tests.

    users:   the scenario resource (delete is explicitly nobody)
    ledger:  tabs declared b, a, c with different audiences
    """
    entries = [
        PermissionEntry(resource="users", action=ActionType.create, allowed_roles=ADMINS),
        PermissionEntry(resource="users", action=ActionType.edit, allowed_roles=ADMINS),
        PermissionEntry(resource="users", action=ActionType.delete, allowed_roles=()),
        PermissionEntry(resource="users", action=ActionType.view, allowed_roles=ADMINS),
        PermissionEntry(resource="users", component_type=UIComponentType.tab, component_id="overview", allowed_roles=ADMINS),
        PermissionEntry(resource="users", component_type=UIComponentType.tab, component_id="roles", allowed_roles=ADMINS),
        PermissionEntry(resource="users", component_type=UIComponentType.tab, component_id="audit", allowed_roles=ADMINS),

        PermissionEntry(resource="ledger", action=ActionType.view, allowed_roles=(Role.accountant,)),
        PermissionEntry(resource="ledger", action=ActionType.export, allowed_roles=(Role.accountant, Role.admin)),
        PermissionEntry(resource="ledger", component_type=UIComponentType.tab, component_id="b", allowed_roles=(Role.accountant, Role.admin)),
        PermissionEntry(resource="ledger", component_type=UIComponentType.tab, component_id="a", allowed_roles=(Role.accountant, Role.academic, Role.admin)),
        PermissionEntry(resource="ledger", component_type=UIComponentType.tab, component_id="c", allowed_roles=(Role.admin,)),
        PermissionEntry(resource="ledger", component_type=UIComponentType.section, component_id="totals", allowed_roles=(Role.accountant,)),
        PermissionEntry(resource="ledger", component_type=UIComponentType.section, component_id="history", allowed_roles=(Role.accountant, Role.admin)),
        PermissionEntry(resource="ledger", component_type=UIComponentType.button, component_id="ledger-delete", allowed_roles=()),
        PermissionEntry(resource="ledger", component_type=UIComponentType.button, component_id="ledger-approve", allowed_roles=(Role.admin,)),
    ]
    return PolicyConfig(entries, version="test")


@pytest.fixture(autouse=True)
def reset_engine_state():
    """Reset session, shared query cache and gap log before each test."""
    reset_reported_gaps()
    get_session().logout()
    get_permission_queries().cache.clear()
    yield
    reset_reported_gaps()
    get_session().logout()
    get_permission_queries().cache.clear()
