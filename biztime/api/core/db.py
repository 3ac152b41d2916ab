import logging
import os

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. ENGINE (created at startup, see init_engine)
# ----------------------------------------------------
engine: Engine | None = None

# ----------------------------------------------------
# 2. SESSION FACTORY
# ----------------------------------------------------
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

# ----------------------------------------------------
# 3. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    """
    Create an engine for any SQLAlchemy URL.

    SQLite gets the same referential behaviour as PostgreSQL:
    FK enforcement is switched on for every new connection.
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)

        # Ensure directory exists for file databases
        if url.database and url.database != ":memory:":
            directory = os.path.dirname(os.path.abspath(url.database))
            os.makedirs(directory, exist_ok=True)

        new_engine = create_engine(url, echo=echo, connect_args=connect_args, **kwargs)
        event.listen(new_engine, "connect", _enable_sqlite_foreign_keys)
        return new_engine

    return create_engine(url, echo=echo, pool_pre_ping=True, **kwargs)


# ----------------------------------------------------
# 4. LIFECYCLE
# ----------------------------------------------------
def init_engine(database_url: str, echo: bool = False, **kwargs) -> Engine:
    global engine

    if engine is not None:
        engine.dispose()

    engine = build_engine(database_url, echo=echo, **kwargs)
    SessionLocal.configure(bind=engine)
    logger.info("Database engine created for %s", engine.url.render_as_string(hide_password=True))
    return engine


def create_tables() -> None:
    """Create missing tables. There is no migration step."""
    # Register models on Base.metadata
    from biztime.api.models import company_model, invoice_model  # noqa: F401

    if engine is None:
        raise RuntimeError("init_engine() must be called before create_tables()")

    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


def dispose_engine() -> None:
    global engine

    if engine is not None:
        engine.dispose()
        engine = None
    logger.info("Database connections closed")


# ----------------------------------------------------
# 5. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db():
    """
    FastAPI dependency — yields a DB session.
    Anything left uncommitted is rolled back on close.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping(db: Session) -> None:
    db.execute(text("SELECT 1"))
