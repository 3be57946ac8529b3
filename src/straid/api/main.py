"""FastAPI application factory."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from straid.api.routes import activities, calendar, chat, preferences, trends
from straid.db.engine import StoreUnavailableError
from straid.i18n import MessageKey, translate

logger = logging.getLogger(__name__)


def _store_unavailable(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Activity store unavailable for %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"error": translate(MessageKey.STORE_UNAVAILABLE), "store_unavailable": True},
    )


def create_app() -> FastAPI:
    """Build and return the FastAPI app."""

    app = FastAPI(
        title="StrAId API",
        description="Read-only running analytics over a Stryd activity store",
        version="0.1.0",
    )

    app.add_exception_handler(StoreUnavailableError, _store_unavailable)
    app.add_exception_handler(OperationalError, _store_unavailable)

    app.include_router(activities.router, prefix="/activities", tags=["activities"])
    app.include_router(trends.router, prefix="/trends", tags=["trends"])
    app.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
    app.include_router(chat.router, prefix="/chat", tags=["chat"])
    app.include_router(preferences.router, prefix="/preferences", tags=["preferences"])

    return app


# Module-level app instance for uvicorn
app = create_app()
