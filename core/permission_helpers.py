from typing import List, Optional, Dict, Sequence, TypeVar, Mapping

from core.errors import report_configuration_gap
from core.policy_config import PolicyConfig, get_policy_config, normalize_dimension_key
from models.actor import Actor
from models.enums import ActionType, UIComponentType


T = TypeVar("T")


# -----------------------------------------------------
# Shared rule
#   deny when: no actor / no role, no entry (gap),
#   empty role set, or role not in the set
# -----------------------------------------------------
def _resolve(config: Optional[PolicyConfig]) -> PolicyConfig:
    return config if config is not None else get_policy_config()


def _role_of(actor: Optional[Actor]):
    if actor is None:
        return None
    return getattr(actor, "role", None)


def _is_granted(actor: Optional[Actor], resource: str, dimension_key, config: PolicyConfig) -> bool:
    role = _role_of(actor)
    if role is None:
        return False

    allowed = config.lookup(resource, dimension_key)
    if allowed is None:
        report_configuration_gap(
            resource,
            normalize_dimension_key(dimension_key) or dimension_key,
            known_resource=resource in config,
        )
        return False

    return role in allowed


# -----------------------------------------------------
# Action and UI checks
# -----------------------------------------------------
def can_perform_action(
    actor: Optional[Actor],
    resource: str,
    action: ActionType,
    *,
    config: Optional[PolicyConfig] = None,
) -> bool:
    return _is_granted(actor, resource, action, _resolve(config))


def can_view_ui_component(
    actor: Optional[Actor],
    resource: str,
    component_type: UIComponentType,
    component_id: str,
    *,
    config: Optional[PolicyConfig] = None,
) -> bool:
    return _is_granted(
        actor, resource, (component_type, component_id), _resolve(config)
    )


# -----------------------------------------------------
# Visible component lists (config-declared order)
# -----------------------------------------------------
def get_visible_components(
    actor: Optional[Actor],
    resource: str,
    component_type: UIComponentType,
    *,
    config: Optional[PolicyConfig] = None,
) -> List[str]:
    config = _resolve(config)
    if _role_of(actor) is None:
        return []

    return [
        component_id
        for component_id in config.component_ids(resource, component_type)
        if _is_granted(actor, resource, (component_type, component_id), config)
    ]


def get_visible_tabs(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> List[str]:
    return get_visible_components(actor, resource, UIComponentType.tab, config=config)


def get_visible_sections(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> List[str]:
    return get_visible_components(actor, resource, UIComponentType.section, config=config)


def get_visible_buttons(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> List[str]:
    return get_visible_components(actor, resource, UIComponentType.button, config=config)


def tab_value(tab) -> Optional[str]:
    """Tab id from an object with .value or a mapping with a "value" key."""
    if isinstance(tab, Mapping):
        return tab.get("value")
    return getattr(tab, "value", None)


def filter_tabs_by_permission(
    actor: Optional[Actor],
    resource: str,
    tabs: Sequence[T],
    *,
    config: Optional[PolicyConfig] = None,
) -> List[T]:
    """
    Keep the caller's tab items the actor may see, in the caller's order.
    Items without a value are dropped.
    """
    if _role_of(actor) is None or not tabs:
        return []

    visible = get_visible_tabs(actor, resource, config=config)
    return [tab for tab in tabs if tab_value(tab) in visible]


# -----------------------------------------------------
# One wrapper per ActionType
# -----------------------------------------------------
def can_create(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> bool:
    return can_perform_action(actor, resource, ActionType.create, config=config)


def can_edit(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> bool:
    return can_perform_action(actor, resource, ActionType.edit, config=config)


def can_delete(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> bool:
    return can_perform_action(actor, resource, ActionType.delete, config=config)


def can_view(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> bool:
    return can_perform_action(actor, resource, ActionType.view, config=config)


def can_export(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> bool:
    return can_perform_action(actor, resource, ActionType.export, config=config)


def can_import(actor: Optional[Actor], resource: str, *, config: Optional[PolicyConfig] = None) -> bool:
    return can_perform_action(actor, resource, ActionType.import_, config=config)


ACTION_CHECKS = {
    ActionType.create: can_create,
    ActionType.edit: can_edit,
    ActionType.delete: can_delete,
    ActionType.view: can_view,
    ActionType.export: can_export,
    ActionType.import_: can_import,
}

# A new ActionType needs its wrapper above
if set(ACTION_CHECKS) != set(ActionType):
    raise RuntimeError("ACTION_CHECKS out of sync with ActionType")


def get_action_permissions(
    actor: Optional[Actor],
    resource: str,
    *,
    config: Optional[PolicyConfig] = None,
) -> Dict[str, bool]:
    """Every ActionType for one resource, keyed by action value."""
    return {
        action.value: check(actor, resource, config=config)
        for action, check in ACTION_CHECKS.items()
    }
