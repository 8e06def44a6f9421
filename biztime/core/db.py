import logging

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# ----------------------------------------------------
# 1. BASE CLASS FOR ALL MODELS
# ----------------------------------------------------
Base = declarative_base()


# ----------------------------------------------------
# 2. ENGINE + SESSION FACTORY
# ----------------------------------------------------
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    # In-memory databases vanish per connection unless the pool pins one
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool

    engine = create_engine(url, echo=echo, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


class Database:
    """
    Store handle: one engine plus its session factory.

    Created by the app factory and kept on ``app.state.db``; routes get
    sessions through the ``get_db`` dependency rather than a module global.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = build_engine(url, echo=echo)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        # Import models so they register on Base.metadata
        from biztime.models import company_model, invoice_model  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Schema ready on %s", self.engine.url.render_as_string(hide_password=True))

    def drop_all(self) -> None:
        from biztime.models import company_model, invoice_model  # noqa: F401

        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> bool:
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


# ----------------------------------------------------
# 3. DEPENDENCY FOR FASTAPI
# ----------------------------------------------------
def get_db(request: Request):
    """
    FastAPI dependency: yields a DB session from the app's store handle.
    """
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
