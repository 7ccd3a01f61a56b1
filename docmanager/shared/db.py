import logging
from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from sqlalchemy.pool import StaticPool

from docmanager.shared.errors import StorageError

logger = logging.getLogger(__name__)

# ids are BIGINT-sized at most; anything larger cannot name a stored row
MAX_ID = 2**63 - 1


def in_id_range(value: int) -> bool:
    return 0 <= value <= MAX_ID


class Base(DeclarativeBase):
    pass


def _enable_sqlite_fks(dbapi_conn, _record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on per connection
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.close()


class Database:
    """
    Persistence gateway: owns the engine and the session factory.

    Built once by the app factory and kept on ``app.state.db``; handlers reach
    it through :func:`get_db`, never through a module global.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        self.available = True
        self.engine = self._make_engine(echo)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)

    def _make_engine(self, echo: bool) -> Engine:
        if self.url.get_backend_name() != "sqlite":
            return create_engine(self.url, echo=echo, pool_pre_ping=True)

        kwargs = {"connect_args": {"check_same_thread": False}}
        if self.url.database in (None, "", ":memory:"):
            # one shared connection so every session sees the same in-memory DB
            kwargs["poolclass"] = StaticPool
        engine = create_engine(self.url, echo=echo, **kwargs)
        event.listen(engine, "connect", _enable_sqlite_fks)
        return engine

    def init_schema(self) -> bool:
        # import models so they register with Base.metadata
        from docmanager.auth import models as auth_models  # noqa: F401
        from docmanager.folders import models as folders_models  # noqa: F401
        from docmanager.documents import models as documents_models  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
        except OperationalError as e:
            logger.warning("database unavailable: %s", e.orig)
            self.available = False
        else:
            self.available = True
        return self.available

    def session(self) -> Session:
        # retry the schema step so a database that comes up after boot is picked up
        if not self.available and not self.init_schema():
            raise StorageError("Database connection failed")
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


# FastAPI dep
def get_db(request: Request):
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
