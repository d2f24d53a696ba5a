import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.find_one = AsyncMock(return_value=None)
    uow.users.create = AsyncMock()
    return uow


@pytest.fixture
def mock_password_hasher():
    hasher = MagicMock()
    hasher.hash = AsyncMock(return_value="hashed.password.mock")
    hasher.verify = AsyncMock(return_value=True)
    return hasher


@pytest.fixture
def mock_token_signer():
    signer = MagicMock()
    signer.sign_access = AsyncMock(return_value="access.token.mock")
    signer.sign_refresh = AsyncMock(return_value="refresh.token.mock")
    return signer
