from enum import Enum


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for the policy listing endpoint.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]


# -----------------------------------------------------
# ROLE
# -----------------------------------------------------
class Role(BaseStrEnum):
    """Authority level of an actor within one branch."""

    admin = "admin"
    institute_admin = "institute_admin"
    accountant = "accountant"
    academic = "academic"


# -----------------------------------------------------
# ACTION TYPE
# -----------------------------------------------------
class ActionType(BaseStrEnum):
    """
    Permission dimension over a resource.
    Each one is granted on its own; edit does not imply view.
    """

    create = "create"
    edit = "edit"
    delete = "delete"
    view = "view"
    export = "export"
    import_ = "import"


# -----------------------------------------------------
# UI COMPONENT TYPE
# -----------------------------------------------------
class UIComponentType(BaseStrEnum):
    """Class of UI surface gated independently from actions."""

    tab = "tab"
    section = "section"
    button = "button"
