import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import ConfigurationError, ResolutionError

logger = logging.getLogger(__name__)


async def configuration_error_handler(_request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error: %s", exc.message)
    return JSONResponse(
        status_code=503,
        content={"detail": f"Configuration error: {exc.message}"},
    )


async def resolution_error_handler(_request: Request, exc: ResolutionError) -> JSONResponse:
    logger.warning("Could not resolve address %r: %s", exc.address, exc.message)
    return JSONResponse(
        status_code=400,
        content={"detail": exc.message},
    )
