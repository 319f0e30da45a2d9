"""
Account Use Cases
"""

from .add_account_use_case import AddAccountUseCase
from .load_account_by_token_use_case import LoadAccountByTokenUseCase

__all__ = [
    "AddAccountUseCase",
    "LoadAccountByTokenUseCase",
]
