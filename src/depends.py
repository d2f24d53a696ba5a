from datetime import timedelta

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_signer import JwtTokenSigner, TokenSettings
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.cookies import CookieSettings
from src.app.services.password_hasher import IPasswordHasher
from src.app.services.token_signer import ITokenSigner

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

token_settings = TokenSettings(
    access_secret=ApplicationConfig.ACCESS_TOKEN_SECRET,
    refresh_secret=ApplicationConfig.REFRESH_TOKEN_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    access_expires=timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_EXPIRE_MINUTES),
    refresh_expires=timedelta(days=ApplicationConfig.REFRESH_TOKEN_EXPIRE_DAYS),
)


def build_cookie_settings(config, token_settings: TokenSettings) -> CookieSettings:
    """Cookie options from config; Max-Age follows each token lifetime"""
    return CookieSettings(
        secure=config.COOKIE_SECURE,
        samesite=config.COOKIE_SAMESITE.lower(),
        path=config.COOKIE_PATH,
        domain=config.COOKIE_DOMAIN,
        access_max_age=int(token_settings.access_expires.total_seconds()),
        refresh_max_age=int(token_settings.refresh_expires.total_seconds()),
    )


cookie_settings = build_cookie_settings(ApplicationConfig, token_settings)

password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
token_signer = JwtTokenSigner(token_settings)


async def init_db():
    """Create tables for all registered SQLModel entities"""
    import src.domain.entities  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> IPasswordHasher:
    return password_hasher


def get_token_signer() -> ITokenSigner:
    return token_signer


def get_cookie_settings() -> CookieSettings:
    return cookie_settings
