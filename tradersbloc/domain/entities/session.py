"""Domain entity describing an authenticated session."""

from dataclasses import dataclass

from .role import Role


@dataclass(frozen=True)
class AuthSession:
    """Identity and role tag attached to an inbound call.

    Sessions are issued by the identity provider at login time and decoded
    from the bearer token on every request. They are never persisted.
    """

    identity_id: int
    email: str
    role: Role

    @property
    def is_staff(self) -> bool:
        return self.role.is_staff


__all__ = ["AuthSession"]
