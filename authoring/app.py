"""Main FastAPI application with modularized routes."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from authoring.config import CORS_ALLOW_ORIGINS
from authoring.database import init_db
from authoring.logging_setup import setup_console_logging
from authoring.routes import catalog, items, wizard
from authoring.services.cleanup_service import schedule_session_cleanup

setup_console_logging()

app = FastAPI(title="Lesson Item Authoring API")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup events
@app.on_event("startup")
def startup_events() -> None:
    """Initialize database and schedule session cleanup on startup."""
    init_db()
    schedule_session_cleanup()


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# Include routers
app.include_router(catalog.router)
app.include_router(wizard.router)
app.include_router(items.router)
