"""Use case for updating the caller's profile."""

from dataclasses import replace

from sqlalchemy.orm import Session

from tradersbloc.domain.entities import User
from tradersbloc.domain.errors import BadRequest, Conflict, NotFound
from tradersbloc.infrastructure.repositories import UserRepository
from tradersbloc.infrastructure.security import PasswordHasher
from tradersbloc.utils import now_utc


def update_user(
    session: Session,
    hasher: PasswordHasher,
    *,
    user_id: int,
    first_name: str | None = None,
    last_name: str | None = None,
    phone_number: str | None = None,
    email: str | None = None,
    company_name: str | None = None,
    tax_id: str | None = None,
    industry: str | None = None,
    current_password: str | None = None,
    new_password: str | None = None,
) -> User:
    """Update the provided user with the new values.

    Changing the password requires both ``current_password`` and
    ``new_password``; supplying only one of them is rejected.
    """

    repository = UserRepository(session)
    current_user = repository.get(user_id)
    if current_user is None:
        raise NotFound("User not found")

    new_email = current_user.email
    if email is not None and email.lower() != current_user.email.lower():
        existing_with_email = repository.get_by_email(email)
        if existing_with_email and existing_with_email.id != user_id:
            raise Conflict("Email already exists")
        new_email = email

    password = current_user.password
    if current_password:
        if not new_password:
            raise BadRequest("New password must be provided when updating password")
        if not hasher.verify(current_password, current_user.password):
            raise BadRequest("Current password is incorrect")
        password = hasher.hash(new_password)
    elif new_password:
        raise BadRequest("Current password is required to update password")

    updated_user = replace(
        current_user,
        first_name=first_name if first_name is not None else current_user.first_name,
        last_name=last_name if last_name is not None else current_user.last_name,
        phone_number=(
            phone_number if phone_number is not None else current_user.phone_number
        ),
        email=new_email,
        company_name=(
            company_name if company_name is not None else current_user.company_name
        ),
        tax_id=tax_id if tax_id is not None else current_user.tax_id,
        industry=industry if industry is not None else current_user.industry,
        password=password,
        updated_at=now_utc(),
    )
    return repository.update(updated_user)


__all__ = ["update_user"]
