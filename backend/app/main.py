import logging
import random

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, load_settings
from models.errors import NotFoundError, YatzyError
from routes import games
from services.store import GameStore

logger = logging.getLogger(__name__)

# Body fields whose validation failures get a domain-specific message.
_FIELD_ERRORS = {
    "index": "Invalid index",
    "category": "Invalid category",
}


async def handle_game_error(request: Request, exc: YatzyError) -> JSONResponse:
    status_code = 404 if isinstance(exc, NotFoundError) else 400
    logger.warning(
        "[api] %s %s -> %d %s: %s",
        request.method,
        request.url.path,
        status_code,
        type(exc).__name__,
        exc.message,
    )
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = "Invalid request body"
    for error in exc.errors():
        field = error.get("loc", ())[-1:]
        if field and field[0] in _FIELD_ERRORS:
            message = _FIELD_ERRORS[field[0]]
            break
    logger.warning("[api] %s %s -> 400 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=400, content={"error": message})


def create_app(settings: Settings | None = None, store: GameStore | None = None) -> FastAPI:
    """Build the API around one explicitly owned GameStore."""
    settings = settings or load_settings()
    if store is None:
        rng = random.Random(settings.rng_seed) if settings.rng_seed is not None else None
        store = GameStore(rng=rng)

    app = FastAPI(title="Yatzy API", version="0.1.0")
    app.state.settings = settings
    app.state.store = store
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(YatzyError, handle_game_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    @app.get(f"{settings.api_prefix}/health")
    def health(request: Request) -> dict[str, str | int]:
        return {"status": "ok", "games": len(request.app.state.store)}

    app.include_router(games.router, prefix=settings.api_prefix)
    return app


app = create_app()
