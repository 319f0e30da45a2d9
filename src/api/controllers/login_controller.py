from src.api.helpers import bad_request, ok, server_error, unauthorized
from src.api.protocols import Controller, HttpRequest, HttpResponse
from src.api.validation import Validation
from src.app.errors import InvalidCredentialsError
from src.app.use_cases.auth import AuthenticationService
from src.domain.contracts import AuthenticationInput


class LoginController(Controller):
    def __init__(self, validation: Validation, authentication: AuthenticationService):
        self.validation = validation
        self.authentication = authentication

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body
        error = self.validation.validate(body)
        if error:
            return bad_request(error)

        try:
            access_token = await self.authentication.auth(
                AuthenticationInput(email=body["email"], password=body["password"])
            )
        except InvalidCredentialsError:
            return unauthorized()
        except Exception as exc:
            return server_error(exc)

        return ok({"accessToken": access_token})
