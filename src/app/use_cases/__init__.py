"""
Use Cases

Organized into domain folders:
- account/: Account creation and lookup
- auth/: Authentication flows
"""

from .account import AddAccountUseCase, LoadAccountByTokenUseCase
from .auth import AuthenticationService

__all__ = [
    "AddAccountUseCase",
    "LoadAccountByTokenUseCase",
    "AuthenticationService",
]
