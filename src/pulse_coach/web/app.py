"""FastAPI application for the pulse-coach API."""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import configure_logging, get_settings
from ..db.engine import init_db, seed_exercises
from ..exceptions import PulseCoachError
from .routers import adaptations, profiles, workouts


def create_app(db_path: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    db_path = db_path or settings.db_path

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize the database on startup."""
        configure_logging(settings.log_level)
        if not db_path.exists():
            db_path.parent.mkdir(parents=True, exist_ok=True)
            await init_db(db_path)
            await seed_exercises(db_path)
        yield

    app = FastAPI(
        title="pulse-coach",
        description="Adaptive daily workout API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_path = db_path

    app.include_router(profiles.router)
    app.include_router(workouts.router)
    app.include_router(adaptations.router)

    @app.exception_handler(PulseCoachError)
    async def not_found(request: Request, exc: PulseCoachError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
