import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_signup(client: AsyncClient, test_data, accounts_collection):
    """Successful Signup

    Given no account exists with email "jane@x.com"
    When I submit signup with name, email, password and matching confirmation
    Then an Account is created with a generated id
    And I receive an access token
    """
    response = await client.post("/api/signup", json=test_data.get_copy("signup_request"))

    assert response.status_code == 200
    data = response.json()
    assert isinstance(data["accessToken"], str)
    assert len(data["accessToken"]) > 0

    stored = await accounts_collection.find_one({"email": "jane@x.com"})
    assert stored["_id"]
    assert stored["name"] == "Jane"
    assert "passwordConfirmation" not in stored


@pytest.mark.asyncio
async def test_signup_twice_is_forbidden(client: AsyncClient, test_data, accounts_collection):
    """Repeating the same signup yields 403 EmailInUse"""
    first = await client.post("/api/signup", json=test_data.get_copy("signup_request"))
    second = await client.post("/api/signup", json=test_data.get_copy("signup_request"))

    assert first.status_code == 200
    assert second.status_code == 403
    assert second.json() == {"error": "The received email is already in use"}
    assert len(await accounts_collection.find({"email": "jane@x.com"})) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("field", ["name", "email", "password", "passwordConfirmation"])
async def test_signup_missing_field(client: AsyncClient, test_data, field):
    payload = test_data.get_copy("signup_request")
    del payload[field]

    response = await client.post("/api/signup", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": f"Missing param: {field}"}


@pytest.mark.asyncio
async def test_signup_invalid_email(client: AsyncClient, test_data):
    payload = test_data.get_copy("signup_request")
    payload["email"] = "not-an-email"

    response = await client.post("/api/signup", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid param: email"}


@pytest.mark.asyncio
async def test_signup_password_mismatch(client: AsyncClient, test_data, accounts_collection):
    payload = test_data.get_copy("signup_request")
    payload["passwordConfirmation"] = "other"

    response = await client.post("/api/signup", json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Param does not match: passwordConfirmation"}
    assert await accounts_collection.find() == []


@pytest.mark.asyncio
async def test_signup_with_non_json_body(client: AsyncClient):
    response = await client.post(
        "/api/signup", content=b"name=Jane", headers={"Content-Type": "text/plain"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Missing param: name"}
