"""Utility script to create the initial super-admin account."""

from __future__ import annotations

import argparse
from getpass import getpass

from tradersbloc.config import get_settings
from tradersbloc.domain.entities import Admin, AdminStatus, Role
from tradersbloc.domain.errors import AppError
from tradersbloc.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from tradersbloc.infrastructure.repositories import AdminRepository
from tradersbloc.infrastructure.security import PasswordHasher, generate_secure_password
from tradersbloc.utils import now_utc


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the super-admin creation."""

    parser = argparse.ArgumentParser(
        description="Create the initial super-admin for the TradersBloc API.",
    )
    parser.add_argument(
        "--name",
        default="Super Administrador",
        help="Nombre del administrador (por defecto: Super Administrador)",
    )
    parser.add_argument(
        "--email",
        default="superadmin@example.com",
        help="Correo electrónico del administrador (por defecto: superadmin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Contraseña. Si no se proporciona se solicitará interactivamente.",
    )
    parser.add_argument(
        "--generate-password",
        action="store_true",
        help="Genera una contraseña aleatoria y la muestra al finalizar.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a super-admin using the provided command line arguments."""

    args = parse_args()

    if args.generate_password:
        password = generate_secure_password()
    else:
        password = args.password or getpass("Ingrese la contraseña del administrador: ")
    if not password:
        raise SystemExit("No se proporcionó una contraseña válida.")

    settings = get_settings()
    engine = build_engine(settings)
    initialize_database(engine)
    hasher = PasswordHasher(rounds=settings.password_hash_rounds)

    session = build_session_factory(engine)()
    try:
        repository = AdminRepository(session)
        if repository.get_by_email(args.email):
            raise SystemExit(f"Ya existe un administrador con el correo {args.email}.")
        admin = repository.create(
            Admin(
                id=None,
                name=args.name,
                email=args.email,
                password=hasher.hash(password),
                role=Role.SUPER_ADMIN,
                status=AdminStatus.ACTIVE,
                created_at=now_utc(),
            )
        )
    except AppError as exc:
        raise SystemExit(f"No se pudo crear el administrador: {exc.message}") from exc
    else:
        print(
            "Administrador creado exitosamente:\n"
            f"  ID: {admin.id}\n"
            f"  Nombre: {admin.name}\n"
            f"  Email: {admin.email}"
        )
        if args.generate_password:
            print(f"  Contraseña: {password}")
    finally:
        session.close()
        engine.dispose()


if __name__ == "__main__":
    main()
