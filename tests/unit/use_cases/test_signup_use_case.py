import pytest

from src.app.repositories.errors import DuplicateKeyError
from src.app.use_cases.auth.signup_dto import (
    ALL_FIELDS_REQUIRED_MESSAGE,
    USER_ALREADY_EXISTS,
    USER_ALREADY_EXISTS_MESSAGE,
    VALIDATION_ERROR,
    SignupCommand,
    validate_signup_fields,
)
from src.app.use_cases.auth.signup_use_case import SignupUseCase
from src.domain.entities import User
from tests.fixtures.json_loader import TestDataLoader
from tests.utils.json_compare import PUBLIC_PROFILE_KEYS, has_exactly_keys


@pytest.fixture
def command():
    return SignupCommand(**TestDataLoader.get_copy("signup_payload"))


@pytest.fixture
def stored_user():
    return User(**TestDataLoader.get_copy("stored_user"))


@pytest.fixture
def use_case(mock_uow, mock_password_hasher, mock_token_signer):
    return SignupUseCase(mock_uow, mock_password_hasher, mock_token_signer)


@pytest.mark.asyncio
async def test_successful_signup(use_case, command, stored_user, mock_uow, mock_token_signer):
    """New email and username: user created, profile and both tokens returned"""
    # Arrange
    mock_uow.users.create.return_value = stored_user

    # Act
    result = await use_case.execute(command)

    # Assert
    assert result.is_ok()
    assert result.value.profile.model_dump() == TestDataLoader.get("public_profile")
    assert result.value.tokens.access_token == "access.token.mock"
    assert result.value.tokens.refresh_token == "refresh.token.mock"

    mock_uow.users.find_one.assert_called_once_with(
        email="ddobariya@gmail.com", username="Dhwani"
    )
    mock_uow.users.create.assert_called_once()
    mock_uow.commit.assert_called_once()
    mock_token_signer.sign_access.assert_called_once_with({"sub": stored_user.id})
    mock_token_signer.sign_refresh.assert_called_once_with({"sub": stored_user.id})


@pytest.mark.asyncio
async def test_password_is_stored_hashed(use_case, command, stored_user, mock_uow, mock_password_hasher):
    """The repository receives the hasher output, never the plain password"""
    mock_uow.users.create.return_value = stored_user

    result = await use_case.execute(command)

    assert result.is_ok()
    mock_password_hasher.hash.assert_called_once_with("123456")

    created_user = mock_uow.users.create.call_args[0][0]
    assert created_user.password_hash == "hashed.password.mock"
    assert created_user.name == "Dhwani"
    assert created_user.username == "Dhwani"
    assert created_user.email == "ddobariya@gmail.com"


@pytest.mark.asyncio
async def test_profile_does_not_expose_password_hash(use_case, command, stored_user, mock_uow):
    mock_uow.users.create.return_value = stored_user

    result = await use_case.execute(command)

    profile = result.value.profile.model_dump()
    assert has_exactly_keys(profile, PUBLIC_PROFILE_KEYS)
    assert "hashed.password.mock" not in profile.values()


@pytest.mark.asyncio
async def test_signup_existing_user_found_by_precheck(
    use_case, command, stored_user, mock_uow, mock_password_hasher, mock_token_signer
):
    """Pre-check hit: conflict returned before hashing or persisting"""
    mock_uow.users.find_one.return_value = stored_user

    result = await use_case.execute(command)

    assert result.is_err()
    assert result.error.code == USER_ALREADY_EXISTS
    assert result.error.message == USER_ALREADY_EXISTS_MESSAGE

    mock_password_hasher.hash.assert_not_called()
    mock_uow.users.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    mock_token_signer.sign_access.assert_not_called()
    mock_token_signer.sign_refresh.assert_not_called()


@pytest.mark.asyncio
async def test_signup_duplicate_key_on_create(use_case, command, mock_uow, mock_token_signer):
    """Pre-check passed but the insert hit a unique constraint"""
    mock_uow.users.find_one.return_value = None
    mock_uow.users.create.side_effect = DuplicateKeyError()

    result = await use_case.execute(command)

    assert result.is_err()
    assert result.error.code == USER_ALREADY_EXISTS
    assert result.error.message == USER_ALREADY_EXISTS_MESSAGE
    mock_uow.commit.assert_not_called()
    mock_token_signer.sign_access.assert_not_called()
    mock_token_signer.sign_refresh.assert_not_called()


@pytest.mark.asyncio
async def test_signup_duplicate_key_on_commit(use_case, command, stored_user, mock_uow, mock_token_signer):
    mock_uow.users.create.return_value = stored_user
    mock_uow.commit.side_effect = DuplicateKeyError()

    result = await use_case.execute(command)

    assert result.is_err()
    assert result.error.code == USER_ALREADY_EXISTS
    mock_token_signer.sign_access.assert_not_called()


@pytest.mark.asyncio
async def test_unexpected_create_error_propagates(use_case, command, mock_uow, mock_token_signer):
    """Errors without a duplicate-key signal are raised unchanged"""
    error = RuntimeError("boom")
    mock_uow.users.create.side_effect = error

    with pytest.raises(RuntimeError) as exc_info:
        await use_case.execute(command)

    assert exc_info.value is error
    mock_token_signer.sign_access.assert_not_called()


@pytest.mark.asyncio
async def test_hashing_error_propagates(use_case, command, mock_uow, mock_password_hasher):
    mock_password_hasher.hash.side_effect = ValueError("bad salt")

    with pytest.raises(ValueError):
        await use_case.execute(command)

    mock_uow.users.create.assert_not_called()


@pytest.mark.asyncio
async def test_signing_error_propagates(use_case, command, stored_user, mock_uow, mock_token_signer):
    mock_uow.users.create.return_value = stored_user
    mock_token_signer.sign_refresh.side_effect = RuntimeError("signer down")

    with pytest.raises(RuntimeError):
        await use_case.execute(command)

    mock_token_signer.sign_access.assert_called_once()


def test_validate_signup_fields_accepts_complete_input():
    result = validate_signup_fields(**TestDataLoader.get_copy("signup_payload"))

    assert result.is_ok()
    assert result.value == SignupCommand(**TestDataLoader.get_copy("signup_payload"))


@pytest.mark.parametrize("field", ["name", "username", "email", "password"])
@pytest.mark.parametrize("value", [None, ""])
def test_validate_signup_fields_rejects_missing_or_empty(field, value):
    payload = TestDataLoader.get_copy("signup_payload", **{field: value})

    result = validate_signup_fields(**payload)

    assert result.is_err()
    assert result.error.code == VALIDATION_ERROR
    assert result.error.message == ALL_FIELDS_REQUIRED_MESSAGE


@pytest.mark.parametrize("field", ["name", "username", "email", "password"])
def test_validate_signup_fields_accepts_whitespace_only(field):
    """Only absent or empty values are rejected; whitespace is kept as given"""
    payload = TestDataLoader.get_copy("signup_payload", **{field: "   "})

    result = validate_signup_fields(**payload)

    assert result.is_ok()
    assert getattr(result.value, field) == "   "
