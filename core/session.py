# core/session.py

"""
Holder for the "current actor" of a running UI session.

Login, branch switching and logout belong to the auth subsystem; it pushes
the resulting Actor in here. The policy engine only ever reads from it.
"""

from typing import Optional
from threading import Lock

from core.logging_config import logger
from models.actor import Actor


class SessionState:
    def __init__(self, actor: Optional[Actor] = None):
        self._actor = actor if actor is not None else Actor.anonymous()
        self._lock = Lock()

    def current_actor(self) -> Actor:
        with self._lock:
            return self._actor

    def set_actor(self, actor: Optional[Actor]) -> Actor:
        """Commit a new actor. None is treated as logged out."""
        actor = actor if actor is not None else Actor.anonymous()
        with self._lock:
            self._actor = actor
        logger.info(
            f"Session actor set: user={actor.user_id} branch={actor.branch_id} role={actor.role}"
        )
        return actor

    def switch_branch(self, branch_id: str) -> Actor:
        """
        Move the current user to another of their branches.
        The role is re-derived from that branch's membership; a branch the
        user does not belong to leaves them with no role.
        """
        with self._lock:
            current = self._actor
            actor = Actor.for_branch(current.user_id, current.branches, branch_id)
            self._actor = actor

        if actor.role is None:
            logger.warning(
                f"Branch switch to '{branch_id}' gave user {current.user_id} no role"
            )
        else:
            logger.info(f"Switched branch: user={actor.user_id} branch={branch_id} role={actor.role}")
        return actor

    def logout(self) -> Actor:
        anonymous = Actor.anonymous()
        with self._lock:
            previous = self._actor
            self._actor = anonymous
        logger.info(f"Session cleared for user {previous.user_id}")
        return anonymous


# Global session instance
_session = SessionState()


def get_session() -> SessionState:
    """Get the global session instance."""
    return _session
