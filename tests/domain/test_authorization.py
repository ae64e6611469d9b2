"""Tests for the role gate shared by every protected operation."""

import pytest

from tradersbloc.domain.authorization import admit, satisfies
from tradersbloc.domain.entities import AuthSession, Role
from tradersbloc.domain.errors import Forbidden, Unauthenticated


def _session(role: Role) -> AuthSession:
    return AuthSession(identity_id=1, email="someone@example.com", role=role)


@pytest.mark.parametrize("required", [None, *Role])
def test_super_admin_satisfies_every_requirement(required):
    assert satisfies(Role.SUPER_ADMIN, required) is True


@pytest.mark.parametrize(
    ("role", "required", "expected"),
    [
        (Role.ORDINARY_USER, Role.ORDINARY_USER, True),
        (Role.ORDINARY_USER, Role.ADMIN, False),
        (Role.ORDINARY_USER, Role.SUPER_ADMIN, False),
        (Role.ADMIN, Role.ADMIN, True),
        (Role.ADMIN, Role.ORDINARY_USER, False),
        (Role.ADMIN, Role.SUPER_ADMIN, False),
        (Role.ADMIN, None, True),
    ],
)
def test_other_roles_need_an_exact_match(role, required, expected):
    assert satisfies(role, required) is expected


def test_admit_without_session_is_unauthenticated():
    with pytest.raises(Unauthenticated):
        admit(None)

    with pytest.raises(Unauthenticated):
        admit(None, Role.ADMIN)


def test_admit_rejects_insufficient_role():
    with pytest.raises(Forbidden):
        admit(_session(Role.ORDINARY_USER), Role.ADMIN)


def test_admit_returns_the_same_session():
    session = _session(Role.ADMIN)

    assert admit(session, Role.ADMIN) is session
    assert admit(session) is session
