"""
FastAPI application entry point.

Ties together the companies and invoices routers, the store handle and
the error responder. ``create_app`` takes explicit settings so tests can
run against their own database.
"""

from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime.core.config import Settings, get_settings
from biztime.core.db import Database
from biztime.core.errors import install_error_handlers
from biztime.routes import companies, invoices, system

__version__ = "1.0.0"

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    db: Database = app.state.db
    db.create_all()
    logger.info("BizTime API v%s is running", __version__)

    yield

    logger.info("Shutting down BizTime API")
    db.dispose()


def create_app(settings: Settings | None = None, db: Database | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db or Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    # ==========================
    # CORS
    # ==========================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    install_error_handlers(app, debug=settings.DEBUG)

    # ==========================
    # Routers
    # ==========================
    app.include_router(system.router, tags=["system"])
    app.include_router(companies.router, prefix="/companies", tags=["companies"])
    app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])

    @app.get("/")
    def root():
        return {
            "service": "biztime-api",
            "status": "running",
            "endpoints": {
                "health": "/health",
                "companies": "/companies",
                "invoices": "/invoices",
            },
        }

    return app


# Create the application instance
app = create_app()
