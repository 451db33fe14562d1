# models/actor.py

from typing import Optional, Tuple, Iterable
from pydantic import BaseModel, ConfigDict

from models.enums import Role
from core.roles import extract_primary_role


# ===============================================================
# BRANCH MEMBERSHIP
# ===============================================================

class BranchMembership(BaseModel):
    """
    One branch the user belongs to, as delivered by the auth service.
    Roles stay raw strings here; they are normalized when an Actor is built.
    """
    model_config = ConfigDict(frozen=True)

    branch_id: str
    branch_name: Optional[str] = None
    roles: Tuple[str, ...] = ()


# ===============================================================
# ACTOR
# ===============================================================

class Actor(BaseModel):
    """
    Read-only view of who is asking.

    role is None for unauthenticated or mid-transition sessions,
    and every permission query resolves to deny for such an actor.
    """
    model_config = ConfigDict(frozen=True)

    user_id: Optional[str] = None
    role: Optional[Role] = None
    branch_id: Optional[str] = None
    branches: Tuple[BranchMembership, ...] = ()

    @property
    def identity(self) -> Tuple[Optional[str], Optional[str], Optional[Role]]:
        return (self.user_id, self.branch_id, self.role)

    @property
    def is_authenticated(self) -> bool:
        return self.role is not None

    def membership(self, branch_id: str) -> Optional[BranchMembership]:
        for branch in self.branches:
            if branch.branch_id == branch_id:
                return branch
        return None

    @classmethod
    def for_branch(
        cls,
        user_id: Optional[str],
        branches: Iterable[BranchMembership],
        branch_id: Optional[str],
    ) -> "Actor":
        actor = cls(user_id=user_id, branch_id=branch_id, branches=tuple(branches))

        current = actor.membership(branch_id)
        if current is None:
            return actor
        return actor.model_copy(update={"role": extract_primary_role(current.roles)})

    @classmethod
    def anonymous(cls) -> "Actor":
        return cls()
