import logging
from typing import Any

from fastapi import status

from src.api.error import InternalServerError, PresentationError, UnauthorizedError
from src.api.protocols import HttpResponse

logger = logging.getLogger(__name__)


def _client_error(error: PresentationError, status_code: int) -> HttpResponse:
    logger.warning(f"Client error: {error.code} - {error.message}")
    return HttpResponse(status_code=status_code, body={"error": error.message})


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_200_OK, body=data)


def bad_request(error: PresentationError) -> HttpResponse:
    return _client_error(error, status.HTTP_400_BAD_REQUEST)


def unauthorized() -> HttpResponse:
    return _client_error(UnauthorizedError(), status.HTTP_401_UNAUTHORIZED)


def forbidden(error: PresentationError) -> HttpResponse:
    return _client_error(error, status.HTTP_403_FORBIDDEN)


def server_error(cause: BaseException) -> HttpResponse:
    """Wrap any failure into a generic 500; the cause only reaches the logs"""
    error = InternalServerError(cause)
    logger.error(f"Server error: {cause.__class__.__name__}", exc_info=cause)
    return HttpResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        body={"error": error.message},
    )
