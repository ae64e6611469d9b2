"""Use cases for the identity provider."""

from .authenticate import AuthenticationStatus, authenticate

__all__ = ["AuthenticationStatus", "authenticate"]
