"""Use cases for mobile application users."""

from .register_app_user import register_app_user

__all__ = ["register_app_user"]
