# routers/permissions.py

from typing import Optional
from fastapi import APIRouter, Depends, Query

from core.permission_helpers import (
    can_perform_action,
    can_view_ui_component,
    get_action_permissions,
    get_visible_tabs,
    get_visible_sections,
    get_visible_buttons,
)
from core.policy_config import get_policy_config
from core.tab_resolver import get_default_tab
from dependencies.auth import get_current_actor
from models.actor import Actor
from models.enums import Role, ActionType, UIComponentType
from models.permission import (
    ResourcePermissionSummary,
    ActionCheckRead,
    ComponentCheckRead,
)

router = APIRouter(
    prefix="/permissions",
    tags=["Permissions"],
)


# -----------------------------------------------------
# GET /permissions
# Configured resources and the closed value sets (no actor needed).
# Lives on the prefix itself so no resource name is reserved.
# -----------------------------------------------------
@router.get("", summary="List configured resources")
async def list_resources():
    config = get_policy_config()
    return {
        "version": config.version,
        "resources": list(config.resources()),
        "roles": Role.list(),
        "actions": ActionType.list(),
        "component_types": UIComponentType.list(),
    }


# -----------------------------------------------------
# GET /permissions/{resource}
# Everything a page needs to render one resource.
# Unknown resources answer "nothing allowed", not 404.
# -----------------------------------------------------
@router.get(
    "/{resource}",
    response_model=ResourcePermissionSummary,
    summary="Rendering permissions for one resource",
)
async def resource_summary(
    resource: str,
    preferred_tab: Optional[str] = Query(None),
    actor: Actor = Depends(get_current_actor),
):
    return ResourcePermissionSummary(
        resource=resource,
        role=actor.role,
        actions=get_action_permissions(actor, resource),
        tabs=get_visible_tabs(actor, resource),
        sections=get_visible_sections(actor, resource),
        buttons=get_visible_buttons(actor, resource),
        default_tab=get_default_tab(actor, resource, preferred_tab),
    )


# -----------------------------------------------------
# GET /permissions/{resource}/actions/{action}
# -----------------------------------------------------
@router.get(
    "/{resource}/actions/{action}",
    response_model=ActionCheckRead,
    summary="Check one action",
)
async def check_action(
    resource: str,
    action: ActionType,
    actor: Actor = Depends(get_current_actor),
):
    return ActionCheckRead(
        resource=resource,
        action=action,
        allowed=can_perform_action(actor, resource, action),
    )


# -----------------------------------------------------
# GET /permissions/{resource}/{component_type}/{component_id}
# -----------------------------------------------------
@router.get(
    "/{resource}/{component_type}/{component_id}",
    response_model=ComponentCheckRead,
    summary="Check one tab, section or button",
)
async def check_component(
    resource: str,
    component_type: UIComponentType,
    component_id: str,
    actor: Actor = Depends(get_current_actor),
):
    return ComponentCheckRead(
        resource=resource,
        component_type=component_type,
        component_id=component_id,
        visible=can_view_ui_component(actor, resource, component_type, component_id),
    )
