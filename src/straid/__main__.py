"""
Main entrypoint: serves the StrAId API with uvicorn.

Usage:
    python -m straid                # serve on STRAID host/port from settings
    python -m straid check          # verify the activity store can be opened
    uvicorn straid.api.main:app --host 127.0.0.1 --port 8000
"""
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def _run_check() -> int:
    from sqlalchemy.exc import SQLAlchemyError
    from sqlmodel import Session

    from straid.config import get_settings
    from straid.db.engine import StoreUnavailableError, get_engine
    from straid.queries.stats import get_totals

    settings = get_settings()
    try:
        with Session(get_engine()) as session:
            totals = get_totals(session)
    except StoreUnavailableError as exc:
        logger.error("%s", exc)
        return 1
    except SQLAlchemyError as exc:
        logger.error("Cannot read activity store %s: %s", settings.database_url, exc)
        return 1
    logger.info(
        "Store %s: %d activities, %.1f km",
        settings.database_url,
        totals.count,
        totals.distance_m / 1000,
    )
    return 0


def _run_api() -> None:
    import uvicorn

    from straid.config import get_settings

    settings = get_settings()
    logger.info("Serving StrAId API on %s:%d", settings.api_host, settings.api_port)
    uvicorn.run("straid.api.main:app", host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    # Dispatch on first argument: `python -m straid check` or just `python -m straid`
    if len(sys.argv) > 1 and sys.argv[1] == "check":
        sys.exit(_run_check())
    else:
        _run_api()
