# -------------------------
# Enums
# -------------------------
from .enums import (
    BaseStrEnum,
    Role,
    ActionType,
    UIComponentType,
)

# -------------------------
# Permission Models
# -------------------------
from .permission import (
    PermissionEntry,
    ResourcePermissionSummary,
    ActionCheckRead,
    ComponentCheckRead,
)

# Actor models live in models.actor (they depend on core.roles)
