# core/tab_resolver.py

from typing import Optional

from core.permission_helpers import get_visible_tabs
from core.policy_config import PolicyConfig
from models.actor import Actor


def get_default_tab(
    actor: Optional[Actor],
    resource: str,
    preferred_default: Optional[str] = None,
    *,
    config: Optional[PolicyConfig] = None,
) -> Optional[str]:
    """
    Pick the tab a resource page opens on.

    1. No visible tab → None, whatever the preference.
    2. The preferred tab, if the actor can see it.
    3. Otherwise the first visible tab in declared order.

    Declared order in core/permissions.py is therefore the priority order.
    """
    visible = get_visible_tabs(actor, resource, config=config)
    if not visible:
        return None

    if preferred_default is not None and preferred_default in visible:
        return preferred_default

    return visible[0]
