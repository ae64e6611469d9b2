"""Role-based admission decisions shared by every gated operation."""

from __future__ import annotations

from .entities import AuthSession, Role
from .errors import Forbidden, Unauthenticated


def satisfies(role: Role, required_role: Role | None) -> bool:
    """Return ``True`` when ``role`` meets ``required_role``.

    ``SUPER_ADMIN`` satisfies every requirement; any other role must match
    exactly.
    """

    if required_role is None:
        return True
    return role == required_role or role == Role.SUPER_ADMIN


def admit(session: AuthSession | None, required_role: Role | None = None) -> AuthSession:
    """Return ``session`` unchanged when it may proceed, otherwise raise.

    Raises :class:`Unauthenticated` when no session is present and
    :class:`Forbidden` when the session role does not satisfy
    ``required_role``.
    """

    if session is None:
        raise Unauthenticated()
    if not satisfies(session.role, required_role):
        raise Forbidden()
    return session


__all__ = ["admit", "satisfies"]
