from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from biztime import __version__
from biztime.api.core.config import Settings, get_settings
from biztime.api.core.db import create_tables, dispose_engine, init_engine
from biztime.api.core.errors import register_exception_handlers

# Routers
from biztime.api.routes import companies, invoices, system

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )


def create_app(settings: Settings | None = None, manage_database: bool = True) -> FastAPI:
    """
    Build the BizTime API.

    With manage_database=False the caller owns the engine (tests bind their
    own and override get_db); otherwise it is opened at startup and
    disposed at shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if manage_database:
            init_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
            create_tables()
            logger.info("Database initialized")
        logger.info("BizTime API v%s is running", __version__)

        yield

        if manage_database:
            dispose_engine()
        logger.info("BizTime API stopped")

    app = FastAPI(
        title="BizTime API",
        version=__version__,
        lifespan=lifespan,
    )

    # ==========================
    # CORS
    # ==========================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==========================
    # Error -> status mapping
    # ==========================
    register_exception_handlers(app, debug=settings.DEBUG)

    # ==========================
    # Routers
    # ==========================
    app.include_router(system.router, prefix="/system", tags=["system"])
    app.include_router(companies.router, prefix="/companies", tags=["companies"])
    app.include_router(invoices.router, prefix="/invoices", tags=["invoices"])

    # ==========================
    # Root Endpoint
    # ==========================
    @app.get("/")
    def root():
        return {
            "service": "biztime-api",
            "status": "running",
            "endpoints": {
                "system": "/system/health",
                "companies": "/companies",
                "invoices": "/invoices",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("biztime.api.main:app", host="0.0.0.0", port=8000, reload=True)
