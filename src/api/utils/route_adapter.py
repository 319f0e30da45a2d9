import json
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from src.api.protocols import Controller, HttpRequest

logger = logging.getLogger(__name__)


async def read_body(request: Request) -> dict:
    """Raw JSON body as a dict; anything else counts as an empty body"""
    raw = await request.body()
    if not raw:
        return {}
    try:
        body = json.loads(raw)
    except ValueError:
        logger.warning("Request body is not valid JSON")
        return {}
    return body if isinstance(body, dict) else {}


async def adapt_route(controller: Controller, request: Request) -> JSONResponse:
    http_request = HttpRequest(body=await read_body(request))
    http_response = await controller.handle(http_request)
    return JSONResponse(
        status_code=http_response.status_code, content=http_response.body
    )
