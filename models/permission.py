# models/permission.py

from typing import Optional, Tuple, Union, List, Dict
from pydantic import BaseModel, ConfigDict, model_validator

from models.enums import Role, ActionType, UIComponentType


DimensionKey = Union[ActionType, Tuple[UIComponentType, str]]


# ===============================================================
# POLICY ENTRY
# ===============================================================

class PermissionEntry(BaseModel):
    """
    Atomic configuration unit: one resource, one dimension, one role set.

    The dimension is either an action, or a (component type, component id)
    pair. An empty allowed_roles tuple means "nobody" and is legal.
    """
    model_config = ConfigDict(frozen=True)

    resource: str
    action: Optional[ActionType] = None
    component_type: Optional[UIComponentType] = None
    component_id: Optional[str] = None
    allowed_roles: Tuple[Role, ...] = ()

    @model_validator(mode="after")
    def check_single_dimension(self):
        is_action = self.action is not None
        is_component = self.component_type is not None or self.component_id is not None

        if is_action == is_component:
            raise ValueError(
                f"Entry for '{self.resource}' must set either action "
                f"or component_type + component_id"
            )
        if is_component and (self.component_type is None or not self.component_id):
            raise ValueError(
                f"UI entry for '{self.resource}' needs both component_type and component_id"
            )
        return self

    @property
    def dimension_key(self) -> DimensionKey:
        if self.action is not None:
            return self.action
        return (self.component_type, self.component_id)


# ===============================================================
# API RESPONSE MODELS
# ===============================================================

class ResourcePermissionSummary(BaseModel):
    """
    Everything a page needs to render one resource for the current actor.
    """
    resource: str
    role: Optional[Role] = None
    actions: Dict[str, bool]
    tabs: List[str] = []
    sections: List[str] = []
    buttons: List[str] = []
    default_tab: Optional[str] = None


class ActionCheckRead(BaseModel):
    resource: str
    action: ActionType
    allowed: bool


class ComponentCheckRead(BaseModel):
    resource: str
    component_type: UIComponentType
    component_id: str
    visible: bool
