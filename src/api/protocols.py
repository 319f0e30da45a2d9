"""
Transport-agnostic request/response envelopes and controller contract.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class HttpRequest(BaseModel):
    body: Dict[str, Any] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)


class HttpResponse(BaseModel):
    status_code: int
    body: Optional[Any] = None


class Controller(ABC):
    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        pass
