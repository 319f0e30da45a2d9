from src.api.error import EmailInUseError
from src.api.helpers import bad_request, forbidden, ok, server_error
from src.api.protocols import Controller, HttpRequest, HttpResponse
from src.api.validation import Validation
from src.app.use_cases.account import AddAccountUseCase
from src.app.use_cases.auth import AuthenticationService
from src.domain.contracts import AddAccountInput, AuthenticationInput


class SignupController(Controller):
    """
    Signup request flow:
    1. Validate the raw body (400 on first failure)
    2. Add the account (403 on duplicate email)
    3. Authenticate the new account (200 with access token)

    Any raised failure becomes a generic 500. Authentication failures take
    the same path as infrastructure failures.
    """

    def __init__(
        self,
        add_account: AddAccountUseCase,
        validation: Validation,
        authentication: AuthenticationService,
    ):
        self.add_account = add_account
        self.validation = validation
        self.authentication = authentication

    async def handle(self, request: HttpRequest) -> HttpResponse:
        body = request.body
        error = self.validation.validate(body)
        if error:
            return bad_request(error)

        try:
            account = await self.add_account.add(
                AddAccountInput(
                    name=body["name"], email=body["email"], password=body["password"]
                )
            )
        except Exception as exc:
            return server_error(exc)

        if account is None:
            return forbidden(EmailInUseError())

        try:
            access_token = await self.authentication.auth(
                AuthenticationInput(email=body["email"], password=body["password"])
            )
        except Exception as exc:
            return server_error(exc)

        return ok({"accessToken": access_token})
