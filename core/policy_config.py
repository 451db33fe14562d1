# core/policy_config.py

"""
Compiled, read-only view of the permission table.

The static dict in core/permissions.py is compiled once into a PolicyConfig.
Lookups are O(1) by (resource, dimension key) and the compiled object has no
mutation API.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, FrozenSet, Tuple
from threading import Lock

from pydantic import ValidationError

from core.errors import PolicyConfigError
from core.logging_config import logger
from models.enums import ActionType, UIComponentType, Role
from models.permission import PermissionEntry, DimensionKey


# "ui" group name in the table → component type
UI_GROUPS = {
    "tabs": UIComponentType.tab,
    "sections": UIComponentType.section,
    "buttons": UIComponentType.button,
}

RESOURCE_KEYS = {"actions", "ui"}


class PolicyConfig:
    """
    Immutable set of PermissionEntry values.

    lookup() returns None for a configuration gap and an empty frozenset
    for an entry that explicitly grants nobody. Both deny, but they are
    reported differently.
    """

    def __init__(self, entries: Iterable[PermissionEntry], version: Optional[str] = None):
        rules: dict = {}
        order: dict = {}
        kept = []

        for entry in entries:
            resource_rules = rules.setdefault(entry.resource, {})
            key = entry.dimension_key

            if key in resource_rules:
                raise PolicyConfigError(
                    f"Duplicate permission entry for '{entry.resource}' / {key!r}"
                )

            resource_rules[key] = frozenset(entry.allowed_roles)

            if entry.component_type is not None:
                order.setdefault(entry.resource, {}).setdefault(
                    entry.component_type, []
                ).append(entry.component_id)

            kept.append(entry)

        self._rules = MappingProxyType(
            {resource: MappingProxyType(r) for resource, r in rules.items()}
        )
        self._order = MappingProxyType({
            resource: MappingProxyType({t: tuple(ids) for t, ids in by_type.items()})
            for resource, by_type in order.items()
        })
        self._entries = tuple(kept)
        self.version = version

    # -----------------------------------------------------
    # Build from the declarative dict
    # -----------------------------------------------------
    @classmethod
    def from_table(cls, table: Mapping, version: Optional[str] = None) -> "PolicyConfig":
        entries = []

        for resource, block in table.items():
            if not isinstance(block, Mapping):
                raise PolicyConfigError(f"Resource '{resource}' must map to a dict")

            unknown = set(block) - RESOURCE_KEYS
            if unknown:
                raise PolicyConfigError(
                    f"Resource '{resource}' has unknown keys: {sorted(unknown)}"
                )

            for action_name, roles in (block.get("actions") or {}).items():
                try:
                    action = ActionType(action_name)
                except ValueError:
                    raise PolicyConfigError(
                        f"Resource '{resource}' has unknown action '{action_name}'"
                    ) from None
                entries.append(_build_entry(resource, roles, action=action))

            for group, components in (block.get("ui") or {}).items():
                component_type = UI_GROUPS.get(group)
                if component_type is None:
                    raise PolicyConfigError(
                        f"Resource '{resource}' has unknown UI group '{group}'"
                    )
                for component_id, roles in components.items():
                    entries.append(_build_entry(
                        resource,
                        roles,
                        component_type=component_type,
                        component_id=component_id,
                    ))

        return cls(entries, version=version)

    # -----------------------------------------------------
    # Queries
    # -----------------------------------------------------
    def lookup(self, resource: str, dimension_key: DimensionKey) -> Optional[FrozenSet[Role]]:
        if resource not in self:
            return None

        key = normalize_dimension_key(dimension_key)
        if key is None:
            return None

        try:
            return self._rules[resource].get(key)
        except TypeError:
            # unhashable component id can never match an entry
            return None

    def component_ids(self, resource: str, component_type: UIComponentType) -> Tuple[str, ...]:
        if resource not in self:
            return ()
        component_type = _coerce(UIComponentType, component_type)
        by_type = self._order.get(resource)
        if by_type is None or component_type is None:
            return ()
        return by_type.get(component_type, ())

    def resources(self) -> Tuple[str, ...]:
        return tuple(self._rules)

    def entries(self) -> Tuple[PermissionEntry, ...]:
        return self._entries

    def __contains__(self, resource) -> bool:
        try:
            return resource in self._rules
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._entries)


def _coerce(enum_cls, value):
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return None


def normalize_dimension_key(dimension_key) -> Optional[DimensionKey]:
    """
    Turn "edit" or ("tab", "overview") into enum-typed keys.
    Returns None for anything that cannot name a dimension.
    """
    if isinstance(dimension_key, tuple):
        if len(dimension_key) != 2:
            return None
        component_type = _coerce(UIComponentType, dimension_key[0])
        if component_type is None:
            return None
        return (component_type, dimension_key[1])

    return _coerce(ActionType, dimension_key)


def _build_entry(resource, roles, **dimension) -> PermissionEntry:
    if isinstance(roles, (str, bytes)) or not isinstance(roles, (list, tuple, set, frozenset)):
        raise PolicyConfigError(
            f"Roles for '{resource}' / {dimension} must be a list, got {type(roles).__name__}"
        )
    try:
        return PermissionEntry(resource=resource, allowed_roles=tuple(roles), **dimension)
    except ValidationError as e:
        raise PolicyConfigError(
            f"Invalid permission entry for '{resource}' / {dimension}: {e}"
        ) from e


# -----------------------------------------------------
# Process-wide instance
# -----------------------------------------------------
_policy_config: Optional[PolicyConfig] = None
_policy_lock = Lock()


def get_policy_config() -> PolicyConfig:
    """Get the policy compiled from core/permissions.py (built once)."""
    global _policy_config

    if _policy_config is None:
        with _policy_lock:
            if _policy_config is None:
                from core.permissions import RESOURCE_PERMISSIONS, POLICY_VERSION

                _policy_config = PolicyConfig.from_table(
                    RESOURCE_PERMISSIONS, version=POLICY_VERSION
                )
                logger.info(
                    f"Permission policy {POLICY_VERSION} compiled: "
                    f"{len(_policy_config.resources())} resources, "
                    f"{len(_policy_config)} entries"
                )
    return _policy_config
