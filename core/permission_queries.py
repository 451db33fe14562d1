# core/permission_queries.py

"""
Permission queries bound to the session's current actor.

Each method mirrors a function in core.permission_helpers without the actor
argument. Answers are memoized per actor identity (user, branch, role), so a
view that asks the same question on every render gets the same object back,
and a role switch, branch switch or logout starts from an empty cache.

Collections come back as tuples and permission maps as read-only mappings,
so the shared cached objects cannot be changed by a caller.
"""

from types import MappingProxyType
from typing import Optional, Sequence, Tuple, Mapping, TypeVar
from threading import Lock

from core import permission_helpers as helpers
from core.cache import PermissionCache
from core.policy_config import PolicyConfig
from core.session import SessionState, get_session
from core.tab_resolver import get_default_tab
from models.actor import Actor
from models.enums import ActionType, UIComponentType


T = TypeVar("T")


class PermissionQueries:

    def __init__(
        self,
        session: Optional[SessionState] = None,
        config: Optional[PolicyConfig] = None,
        cache: Optional[PermissionCache] = None,
    ):
        self._session = session if session is not None else get_session()
        self._config = config
        self._cache = cache if cache is not None else PermissionCache()

    @property
    def actor(self) -> Actor:
        return self._session.current_actor()

    @property
    def cache(self) -> PermissionCache:
        return self._cache

    def _memo(self, key: Tuple, compute):
        # One actor snapshot per call: the answer is computed for, and
        # stored under, the same identity.
        actor = self.actor
        return self._cache.get_or_compute(actor.identity, key, lambda: compute(actor))

    # -----------------------------------------------------
    # Actions
    # -----------------------------------------------------
    def can_perform_action(self, resource: str, action: ActionType) -> bool:
        return self._memo(
            ("action", resource, action),
            lambda actor: helpers.can_perform_action(actor, resource, action, config=self._config),
        )

    def can_create(self, resource: str) -> bool:
        return self.can_perform_action(resource, ActionType.create)

    def can_edit(self, resource: str) -> bool:
        return self.can_perform_action(resource, ActionType.edit)

    def can_delete(self, resource: str) -> bool:
        return self.can_perform_action(resource, ActionType.delete)

    def can_view(self, resource: str) -> bool:
        return self.can_perform_action(resource, ActionType.view)

    def can_export(self, resource: str) -> bool:
        return self.can_perform_action(resource, ActionType.export)

    def can_import(self, resource: str) -> bool:
        return self.can_perform_action(resource, ActionType.import_)

    def get_action_permissions(self, resource: str) -> Mapping[str, bool]:
        return self._memo(
            ("actions", resource),
            lambda actor: MappingProxyType(
                helpers.get_action_permissions(actor, resource, config=self._config)
            ),
        )

    # -----------------------------------------------------
    # UI components
    # -----------------------------------------------------
    def can_view_ui_component(
        self, resource: str, component_type: UIComponentType, component_id: str
    ) -> bool:
        return self._memo(
            ("component", resource, component_type, component_id),
            lambda actor: helpers.can_view_ui_component(
                actor, resource, component_type, component_id, config=self._config
            ),
        )

    def get_visible_tabs(self, resource: str) -> Tuple[str, ...]:
        return self._memo(
            ("tabs", resource),
            lambda actor: tuple(helpers.get_visible_tabs(actor, resource, config=self._config)),
        )

    def get_visible_sections(self, resource: str) -> Tuple[str, ...]:
        return self._memo(
            ("sections", resource),
            lambda actor: tuple(helpers.get_visible_sections(actor, resource, config=self._config)),
        )

    def get_visible_buttons(self, resource: str) -> Tuple[str, ...]:
        return self._memo(
            ("buttons", resource),
            lambda actor: tuple(helpers.get_visible_buttons(actor, resource, config=self._config)),
        )

    def get_default_tab(self, resource: str, preferred_default: Optional[str] = None) -> Optional[str]:
        return self._memo(
            ("default_tab", resource, preferred_default),
            lambda actor: get_default_tab(actor, resource, preferred_default, config=self._config),
        )

    def filter_tabs_by_permission(self, resource: str, tabs: Sequence[T]) -> Tuple[T, ...]:
        """
        Filter the caller's tab items, keeping the caller's order.

        The cached result is reused only while the same tab objects are
        passed in again; new objects with the same values are re-filtered.
        """
        actor = self.actor
        source = tuple(tabs or ())
        key = ("filter_tabs", resource, tuple(helpers.tab_value(t) for t in source))

        def same_items(cached) -> bool:
            cached_source, _ = cached
            return len(cached_source) == len(source) and all(
                a is b for a, b in zip(cached_source, source)
            )

        def compute():
            result = helpers.filter_tabs_by_permission(actor, resource, source, config=self._config)
            return source, tuple(result)

        _, result = self._cache.get_or_compute(actor.identity, key, compute, is_valid=same_items)
        return result


# -----------------------------------------------------
# Process-wide instance bound to the global session
# -----------------------------------------------------
_queries: Optional[PermissionQueries] = None
_queries_lock = Lock()


def get_permission_queries() -> PermissionQueries:
    global _queries

    if _queries is None:
        with _queries_lock:
            if _queries is None:
                _queries = PermissionQueries()
    return _queries
