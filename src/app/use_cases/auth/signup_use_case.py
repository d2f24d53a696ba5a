import logging

from src.app.repositories.errors import DuplicateKeyError
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_signer import ITokenSigner
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from src.libs.result import Error, Result, Return

from .signup_dto import (
    USER_ALREADY_EXISTS,
    USER_ALREADY_EXISTS_MESSAGE,
    PublicProfile,
    SignupCommand,
    SignupResult,
    TokenPair,
)

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResult] (public profile + token pair)

    Business Logic:
    1. Check if email or username already exists (fast path)
    2. Hash password
    3. Create User and commit; a duplicate-key failure here is authoritative,
       since the check in step 1 is not atomic with the insert
    4. Sign one access token and one refresh token for the new user id
    5. Return the public profile and tokens

    Only the duplicate identity case is returned as an Error. Anything else
    raised by the collaborators propagates unchanged.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: IPasswordHasher,
        token_signer: ITokenSigner,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_signer = token_signer

    async def execute(self, command: SignupCommand) -> Result[SignupResult]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with name, username, email, password

        Returns:
            Result[SignupResult], or Error(USER_ALREADY_EXISTS) if the
            email or username is taken
        """
        async with self.uow:
            existing_user = await self.uow.users.find_one(
                email=command.email, username=command.username
            )
            if existing_user:
                logger.info("Signup rejected: email or username already registered")
                return Return.err(
                    Error(USER_ALREADY_EXISTS, USER_ALREADY_EXISTS_MESSAGE)
                )

            password_hash = await self.password_hasher.hash(command.password)

            user = User(
                name=command.name,
                username=command.username,
                email=command.email,
                password_hash=password_hash,
            )
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except DuplicateKeyError:
                logger.warning("Signup rejected: duplicate key on create")
                return Return.err(
                    Error(USER_ALREADY_EXISTS, USER_ALREADY_EXISTS_MESSAGE)
                )

            logger.info(f"User created: {user.id}")

            profile = PublicProfile(
                id=str(user.id),
                name=user.name,
                username=user.username,
                email=user.email,
            )

        claims = {"sub": profile.id}
        access_token = await self.token_signer.sign_access(claims)
        refresh_token = await self.token_signer.sign_refresh(claims)

        return Return.ok(
            SignupResult(
                profile=profile,
                tokens=TokenPair(access_token=access_token, refresh_token=refresh_token),
            )
        )
