"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from worklog.config import settings
from worklog.database import database
from worklog.exceptions import PersistFailure
from worklog.routers import backup, entries, reports, timers
from worklog.routers import settings as settings_router
from worklog.utils.clock import Ticker, live_clock


logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    database.connect()
    ticker = Ticker(settings.tick_seconds, live_clock.update)
    ticker.start()
    yield
    # Shutdown
    await ticker.stop()
    database.disconnect()


app = FastAPI(
    title="Work Ledger API",
    description="Local API for logging work sessions and reporting earnings",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PersistFailure)
async def persist_failure_handler(request: Request, exc: PersistFailure):
    """Report failed durable writes as server errors."""
    logger.error("Persist failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": f"Could not save changes: {exc}"},
    )


# Include routers
app.include_router(timers.router)
app.include_router(entries.router)
app.include_router(settings_router.router)
app.include_router(reports.router)
app.include_router(backup.router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"status": "ok", "message": "Work Ledger API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
