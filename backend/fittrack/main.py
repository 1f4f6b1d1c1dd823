import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fittrack.api.goals import router as goals_router
from fittrack.api.measurements import router as measurements_router
from fittrack.api.users import router as users_router
from fittrack.api.workouts import router as workouts_router
from fittrack.core.config import Settings, settings
from fittrack.core.log_config import configure_logging
from fittrack.seed import seed_database
from fittrack.storage.base import Storage
from fittrack.storage.errors import IntegrityViolation, StoreUnavailable
from fittrack.storage.factory import build_storage

logger = logging.getLogger(__name__)


async def _integrity_violation(request: Request, exc: IntegrityViolation):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def _store_unavailable(request: Request, exc: StoreUnavailable):
    logger.error(
        "Store unavailable for %s %s: %s", request.method, request.url.path, exc
    )
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


def create_app(app_settings: Settings = settings, storage: Storage | None = None) -> FastAPI:
    """Build the API around one storage instance.

    `storage` is built from `app_settings` unless the caller injects one.
    """
    configure_logging(app_settings.log_level)

    if storage is None:
        storage = build_storage(app_settings)
    if app_settings.seed_demo_data:
        seed_database(storage)

    app = FastAPI(title="FitTrack")
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(IntegrityViolation, _integrity_violation)
    app.add_exception_handler(StoreUnavailable, _store_unavailable)

    app.include_router(users_router)
    app.include_router(workouts_router)
    app.include_router(measurements_router)
    app.include_router(goals_router)

    @app.get("/")
    def root():
        return {"message": "FitTrack backend is running"}

    return app


app = create_app()
