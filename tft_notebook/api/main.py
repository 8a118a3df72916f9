"""
FastAPI main application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tft_notebook.config import get_settings
from tft_notebook.errors import (
    AssetError,
    EntityLookupError,
    NoChampionSelectedError,
    PersistenceError,
)
from tft_notebook.utils import setup_logging

from .dependencies import get_notebook_service
from .routes import builds, components, data, notebook
from .schemas.common import ErrorResponse

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Ingest game data before serving; ingestion failures abort startup."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    app.dependency_overrides.get(get_notebook_service, get_notebook_service)()
    yield


app = FastAPI(
    title="TFT Notebook API",
    description="Teamfight Tactics item build planner",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(data.router, prefix="/api/data", tags=["Data"])
app.include_router(builds.router, prefix="/api/builds", tags=["Builds"])
app.include_router(components.router, prefix="/api/components", tags=["Components"])
app.include_router(notebook.router, prefix="/api/notebook", tags=["Notebook"])


def _error(status_code: int, error: str, exc: Exception) -> JSONResponse:
    body = ErrorResponse.from_exception(error, exc)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(EntityLookupError)
async def lookup_error_handler(request: Request, exc: EntityLookupError):
    return _error(404, f"{exc.kind} not found", exc)


@app.exception_handler(NoChampionSelectedError)
async def no_selection_handler(request: Request, exc: NoChampionSelectedError):
    return _error(409, "no champion selected", exc)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    return _error(500, "save failed", exc)


@app.exception_handler(AssetError)
async def asset_error_handler(request: Request, exc: AssetError):
    return _error(502, "icon unavailable", exc)


@app.get("/")
async def root():
    """API status check."""
    return {
        "status": "ok",
        "name": "TFT Notebook API",
        "version": "1.0.0",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
