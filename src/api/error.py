from typing import Optional

from fastapi import status


class PresentationError(Exception):
    """Error value returned to callers as part of a response envelope"""

    code = "ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __eq__(self, other):
        return (
            type(self) is type(other)
            and self.code == other.code
            and self.message == other.message
        )

    def __hash__(self):
        return hash((type(self), self.code, self.message))


class MissingParamError(PresentationError):
    code = "MISSING_PARAM"

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Missing param: {param}")


class InvalidParamError(PresentationError):
    code = "INVALID_PARAM"

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Invalid param: {param}")


class PasswordMismatchError(PresentationError):
    code = "PASSWORD_MISMATCH"

    def __init__(self, param: str):
        self.param = param
        super().__init__(f"Param does not match: {param}")


class EmailInUseError(PresentationError):
    code = "EMAIL_IN_USE"

    def __init__(self):
        super().__init__("The received email is already in use")


class UnauthorizedError(PresentationError):
    code = "UNAUTHORIZED"

    def __init__(self):
        super().__init__("Unauthorized")


class AccessDeniedError(PresentationError):
    code = "ACCESS_DENIED"

    def __init__(self):
        super().__init__("Access denied")


class InternalServerError(PresentationError):
    """Generic server failure; the cause is kept for logs only"""

    code = "INTERNAL_SERVER_ERROR"

    def __init__(self, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__("Internal server error")


class ClientError(Exception):
    def __init__(self, base_error: PresentationError, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: InternalServerError):
        self.base_error = base_error
        super().__init__(base_error.message)
