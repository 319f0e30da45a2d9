"""
Account Entity

Represents a registered identity that can sign in and receive access tokens.
"""

from sqlmodel import Field, SQLModel


class Account(SQLModel):
    """
    Account entity - public shape of a stored account record.

    Business Rules:
    - id is assigned by storage on creation and never changes
    - Email must be unique across all accounts (exact, case-sensitive match)
    - Password holds whatever the configured hasher produced at signup
    """

    id: str
    name: str = Field(min_length=1)
    email: str = Field(max_length=320)
    password: str
