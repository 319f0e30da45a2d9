"""Domain-level request contracts shared by multiple layers."""

from pydantic import BaseModel, ConfigDict


class AddAccountInput(BaseModel):
    """
    Data required to create an account.

    Built by the signup controller from an already validated request.
    Carries no password confirmation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    email: str
    password: str


class AuthenticationInput(BaseModel):
    """Credentials presented for authentication"""

    model_config = ConfigDict(frozen=True)

    email: str
    password: str
