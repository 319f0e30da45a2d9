from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from src.api.protocols import Controller
from src.api.utils.route_adapter import adapt_route
from src.depends import get_login_controller, get_signup_controller

router = APIRouter(tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Documentation only: validation happens in the controller so that
    failures come back as 400 with the controller's error message.
    """

    name: str = Field(..., description="Account holder name")
    email: str = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")
    passwordConfirmation: str = Field(..., description="Must equal password")


class LoginRequest(BaseModel):
    email: str = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


class AccessTokenResponse(BaseModel):
    accessToken: str


@router.post(
    "/signup",
    response_model=AccessTokenResponse,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": SignupRequest.model_json_schema()}}
        }
    },
)
async def signup(request: Request, controller: Controller = Depends(get_signup_controller)):
    """
    Account Signup

    Creates an account and returns an access token for it.

    Returns:
        - 200 OK: {"accessToken": ...}
        - 400 Bad Request: Missing/invalid param or password mismatch
        - 403 Forbidden: Email already in use
        - 500 Internal Server Error: Server error
    """
    return await adapt_route(controller, request)


@router.post(
    "/login",
    response_model=AccessTokenResponse,
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": LoginRequest.model_json_schema()}}
        }
    },
)
async def login(request: Request, controller: Controller = Depends(get_login_controller)):
    """
    Account Login

    Returns:
        - 200 OK: {"accessToken": ...}
        - 400 Bad Request: Missing/invalid param
        - 401 Unauthorized: Invalid credentials
        - 500 Internal Server Error: Server error
    """
    return await adapt_route(controller, request)
