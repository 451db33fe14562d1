# core/roles.py

from typing import Iterable, Optional

from models.enums import Role


# ============================================
# ROLE PRIORITY (highest authority first)
# ============================================
ROLE_PRIORITY = (
    Role.admin,
    Role.institute_admin,
    Role.accountant,
    Role.academic,
)


def normalize_role(value) -> Optional[Role]:
    """
    Map a raw role string from the auth collaborator to a Role.

    "INSTITUTE_ADMIN", "institute-admin" and " Institute Admin " all
    resolve to Role.institute_admin. Anything unrecognised is None.
    """
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        return None

    cleaned = value.strip().lower().replace("-", "_").replace(" ", "_")
    if not cleaned:
        return None

    try:
        return Role(cleaned)
    except ValueError:
        return None


def extract_primary_role(roles: Iterable) -> Optional[Role]:
    """
    Pick the single effective role from a branch membership.
    Unknown role strings are skipped.
    """
    if roles is None:
        return None

    held = {normalize_role(r) for r in roles}
    held.discard(None)

    for role in ROLE_PRIORITY:
        if role in held:
            return role
    return None
