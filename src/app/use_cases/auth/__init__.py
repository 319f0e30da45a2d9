"""
Authentication Use Cases

Credential verification and token issuance.
"""

from .authentication_service import AuthenticationService

__all__ = [
    "AuthenticationService",
]
