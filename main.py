# main.py
import logging
from contextlib import asynccontextmanager
from typing import Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings
from errors import PartyError, RouteNotFound
from logging_config import setup_logging
from party import PARTY, Pokemon
from party_api import CleanPathMiddleware, render_error, render_response, router as party_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(get_settings().log_level)
    logger.info("party API started with %d pokemon", len(app.state.party))
    yield
    logger.info("party API shutting down")


def create_app(party: Tuple[Pokemon, ...] = PARTY) -> FastAPI:
    app = FastAPI(title="Pokémon Party API", lifespan=lifespan)
    app.state.party = tuple(party)

    app.add_middleware(CleanPathMiddleware)
    app.include_router(party_router, prefix="/party", tags=["Party"])

    @app.exception_handler(PartyError)
    async def party_error_handler(request: Request, exc: PartyError):
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(level, "%s %s -> %d: %s", request.method, request.url.path, exc.http_status, exc.message)
        return render_response(exc.to_response(), exc.http_status)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # unmatched paths land here as plain 404s from the router
        if exc.status_code == 404:
            return await party_error_handler(request, RouteNotFound(request.url.path))
        return render_error(exc.detail, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("validation error on %s: %s", request.url.path, exc.errors())
        fields = ", ".join(".".join(str(loc) for loc in e["loc"]) for e in exc.errors())
        return render_error(f"invalid request: {fields}", 400)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error("unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        return render_error("internal server error", 500)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
