"""Authentication utilities."""

__all__ = [
    "AuthProvider",
    "AuthResult",
    "LocalAuthProvider",
]

from .local import LocalAuthProvider
from .provider import AuthProvider, AuthResult
