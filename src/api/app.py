from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from .error import ClientError, ErrorReporter, JsonErrorReporter, ServerError, SERVER_ERROR_MESSAGE
from src.app.use_cases.auth import ALL_FIELDS_REQUIRED_MESSAGE
import logging

logger = logging.getLogger(__name__)


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code}")
    return JSONResponse(
        status_code=exc.status_code, content={"error": exc.base_error.message}
    )


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": SERVER_ERROR_MESSAGE},
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Bodies that cannot be read as the signup fields get the same answer as missing fields
    logger.warning(f"Request validation error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": ALL_FIELDS_REQUIRED_MESSAGE},
    )


def create_app(ApplicationConfig, error_reporter: Optional[ErrorReporter] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if ApplicationConfig.AUTO_CREATE_TABLES:
            from src.depends import init_db

            await init_db()
        yield

    app = FastAPI(title="Signup API", version="0.1.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.routes import auth, health_check

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, prefix=ApplicationConfig.API_PREFIX, tags=["Authentication"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, error_reporter or JsonErrorReporter())

    return app
