import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import Account


@pytest.fixture
def fake_account():
    return Account(
        id="valid_id",
        name="valid_name",
        email="valid_email@mail.com",
        password="valid_password",
    )


@pytest.fixture
def mock_repository():
    repository = MagicMock()
    repository.find_by_email = AsyncMock(return_value=None)
    repository.add = AsyncMock()
    repository.load_all = AsyncMock(return_value=[])
    repository.load_by_id = AsyncMock(return_value=None)
    return repository
