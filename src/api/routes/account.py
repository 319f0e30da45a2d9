from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.depends import get_current_account
from src.domain.entities import Account

router = APIRouter(tags=["Account"])


class MeResponse(BaseModel):
    """GET /me response payload"""
    id: str
    name: str
    email: str


@router.get("/me", status_code=status.HTTP_200_OK, response_model=MeResponse)
async def get_me(account: Account = Depends(get_current_account)):
    """
    Load Current Account

    Raises:
        - 403 Forbidden: Missing, invalid or orphaned access token
        - 500 Internal Server Error: Server error
    """
    return MeResponse(id=account.id, name=account.name, email=account.email)
