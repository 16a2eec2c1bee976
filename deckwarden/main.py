import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from deckwarden.api import health_router, validation_router
from deckwarden.config import settings
from deckwarden.models.failure import KnownError, create_unknown_failure, finalize_response

logger = logging.getLogger(__name__)


def _app_version() -> str:
    try:
        return pkg_version("deckwarden")
    except PackageNotFoundError:
        return "0.0.0"


app = FastAPI(
    title=settings.app_name,
    version=_app_version(),
    debug=settings.debug,
)

app.include_router(health_router)
app.include_router(validation_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    response = finalize_response(exc.to_response())
    return JSONResponse(status_code=exc.status_code, content=response.model_dump(mode="json"))


@app.exception_handler(Exception)
async def unknown_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    response = create_unknown_failure(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response.model_dump(mode="json"),
    )
