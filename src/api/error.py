import logging
from abc import ABC, abstractmethod

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.libs.result import Error

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "server error"


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


class ErrorReporter(ABC):
    """
    Receives exceptions no route or use case classified, and owns the
    final response for them. Installed as the app's Exception handler.
    """

    @abstractmethod
    async def __call__(self, request: Request, exc: Exception) -> JSONResponse:
        pass


class JsonErrorReporter(ErrorReporter):
    """Logs the exception and answers 500 {"error": "server error"}"""

    async def __call__(self, request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            f"Unhandled error on {request.method} {request.url.path}", exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": SERVER_ERROR_MESSAGE},
        )
