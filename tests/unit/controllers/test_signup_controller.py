from unittest.mock import AsyncMock, MagicMock

import pytest

from src.api.controllers import SignupController
from src.api.error import MissingParamError, PasswordMismatchError
from src.api.protocols import HttpRequest
from src.app.errors import InvalidCredentialsError, PersistenceError
from src.domain.contracts import AddAccountInput, AuthenticationInput


@pytest.fixture
def add_account_stub(fake_account):
    add_account = MagicMock()
    add_account.add = AsyncMock(return_value=fake_account)
    return add_account


@pytest.fixture
def validation_stub():
    validation = MagicMock()
    validation.validate.return_value = None
    return validation


@pytest.fixture
def authentication_stub():
    authentication = MagicMock()
    authentication.auth = AsyncMock(return_value="any_token")
    return authentication


@pytest.fixture
def sut(add_account_stub, validation_stub, authentication_stub):
    return SignupController(add_account_stub, validation_stub, authentication_stub)


def make_fake_request():
    return HttpRequest(
        body={
            "name": "any_name",
            "email": "any_email@mail.com",
            "password": "any_password",
            "passwordConfirmation": "any_password",
        }
    )


@pytest.mark.asyncio
async def test_calls_validation_with_request_body(sut, validation_stub):
    request = make_fake_request()
    await sut.handle(request)
    validation_stub.validate.assert_called_once_with(request.body)


@pytest.mark.asyncio
async def test_returns_400_if_validation_fails(
    sut, validation_stub, add_account_stub, authentication_stub
):
    validation_stub.validate.return_value = MissingParamError("any_field")

    response = await sut.handle(make_fake_request())

    assert response.status_code == 400
    assert response.body == {"error": "Missing param: any_field"}
    add_account_stub.add.assert_not_called()
    authentication_stub.auth.assert_not_called()


@pytest.mark.asyncio
async def test_returns_400_on_mismatch_without_downstream_calls(
    sut, validation_stub, add_account_stub, authentication_stub
):
    validation_stub.validate.return_value = PasswordMismatchError("passwordConfirmation")

    response = await sut.handle(make_fake_request())

    assert response.status_code == 400
    assert response.body == {"error": "Param does not match: passwordConfirmation"}
    add_account_stub.add.assert_not_called()
    authentication_stub.auth.assert_not_called()


@pytest.mark.asyncio
async def test_calls_add_account_without_confirmation(sut, add_account_stub):
    await sut.handle(make_fake_request())

    add_account_stub.add.assert_called_once_with(
        AddAccountInput(
            name="any_name", email="any_email@mail.com", password="any_password"
        )
    )
    sent = add_account_stub.add.call_args[0][0]
    assert "passwordConfirmation" not in sent.model_dump()


@pytest.mark.asyncio
async def test_returns_403_if_add_account_returns_none(
    sut, add_account_stub, authentication_stub
):
    add_account_stub.add.return_value = None

    response = await sut.handle(make_fake_request())

    assert response.status_code == 403
    assert response.body == {"error": "The received email is already in use"}
    authentication_stub.auth.assert_not_called()


@pytest.mark.asyncio
async def test_returns_500_if_add_account_throws(sut, add_account_stub):
    add_account_stub.add.side_effect = PersistenceError("secret connection string")

    response = await sut.handle(make_fake_request())

    assert response.status_code == 500
    assert response.body == {"error": "Internal server error"}
    assert "secret connection string" not in str(response.body)


@pytest.mark.asyncio
async def test_calls_authentication_with_correct_values(sut, authentication_stub):
    await sut.handle(make_fake_request())

    authentication_stub.auth.assert_called_once_with(
        AuthenticationInput(email="any_email@mail.com", password="any_password")
    )


@pytest.mark.asyncio
async def test_returns_500_if_authentication_throws(sut, authentication_stub):
    authentication_stub.auth.side_effect = RuntimeError("boom")

    response = await sut.handle(make_fake_request())

    assert response.status_code == 500
    assert response.body == {"error": "Internal server error"}


@pytest.mark.asyncio
async def test_invalid_credentials_after_signup_map_to_500(sut, authentication_stub):
    authentication_stub.auth.side_effect = InvalidCredentialsError()

    response = await sut.handle(make_fake_request())

    assert response.status_code == 500


@pytest.mark.asyncio
async def test_returns_200_with_access_token(sut):
    response = await sut.handle(make_fake_request())

    assert response.status_code == 200
    assert response.body == {"accessToken": "any_token"}
