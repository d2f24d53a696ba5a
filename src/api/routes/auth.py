from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.cookies import CookieSettings, set_auth_cookies
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_signer import ITokenSigner
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    USER_ALREADY_EXISTS,
    PublicProfile,
    SignupCommand,
    SignupUseCase,
    validate_signup_fields,
)
from src.depends import (
    get_cookie_settings,
    get_password_hasher,
    get_token_signer,
    get_unit_of_work,
)
from src.libs.result import Result

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Fields are optional at parse time so that a missing field reaches
    validate_signup_fields and gets the signup-specific 400 response.
    """

    name: Optional[str] = Field(default=None, description="Display name")
    username: Optional[str] = Field(default=None, description="Unique username")
    email: Optional[str] = Field(default=None, description="Unique email address")
    password: Optional[str] = Field(default=None, description="Plain text password")

    def to_command(self) -> Result[SignupCommand]:
        return validate_signup_fields(
            name=self.name,
            username=self.username,
            email=self.email,
            password=self.password,
        )


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=PublicProfile
)
async def signup(
    request: SignupRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_signer: ITokenSigner = Depends(get_token_signer),
    cookie_settings: CookieSettings = Depends(get_cookie_settings),
):
    """
    User Signup

    1. Validate that name, username, email and password are all present
    2. Execute SignupUseCase
    3. Put access and refresh tokens in HTTP-only cookies
    4. Return the public profile (never the tokens)

    Raises:
        - 400 Bad Request: A required field is missing or empty
        - 409 Conflict: Email or username already taken
        - Anything unexpected is left to the app's error reporter
    """
    command_result = request.to_command()
    if command_result.is_err():
        raise ClientError(command_result.error, status_code=status.HTTP_400_BAD_REQUEST)

    use_case = SignupUseCase(uow, password_hasher, token_signer)
    result = await use_case.execute(command_result.value)

    # Handle errors
    if result.is_err():
        error = result.error
        if error.code == USER_ALREADY_EXISTS:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    set_auth_cookies(response, result.value.tokens, cookie_settings)
    return result.value.profile
