from typing import Optional
from fastapi import Header

from core.logging_config import logger
from core.roles import normalize_role
from models.actor import Actor


# ============================================================
# CURRENT ACTOR (identity forwarded by the auth gateway)
# ============================================================
def get_current_actor(
    x_user_id: Optional[str] = Header(None),
    x_branch_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
) -> Actor:
    """
    Build the Actor for this request from gateway headers.

    Authentication happens upstream; this only reads what the gateway
    asserted. A missing or unrecognised role is not an error: the actor
    simply has no role and every permission answer is "no".
    """
    role = normalize_role(x_user_role)

    if x_user_role and role is None:
        logger.warning(f"Unrecognised role '{x_user_role}' for user {x_user_id}; treating as no role")

    return Actor(
        user_id=x_user_id,
        role=role,
        branch_id=x_branch_id,
    )
