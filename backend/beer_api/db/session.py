import logging
from typing import Dict, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from beer_api.core.config import get_database_url, mask_url_password

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()

# Internal lazy caches, keyed by database URL
_engines: Dict[str, Engine] = {}
_sessionmakers: Dict[str, sessionmaker] = {}


def _build_engine(database_url: str):
    url = make_url(database_url)
    if url.drivername.startswith("postgres"):
        return create_engine(
            database_url,
            pool_size=20,
            max_overflow=40,
            pool_pre_ping=True,  # Detects and refreshes stale connections
            pool_recycle=3600,
            connect_args={
                "application_name": "beer_api",  # Visible in pg_stat_activity
                "connect_timeout": 10,
            },
        )
    if url.drivername.startswith("sqlite"):
        if url.database in (None, "", ":memory:"):
            # One shared in-memory database across the process so DDL
            # persists across connections.
            return create_engine(
                database_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url)


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return the cached engine for ``database_url``, creating it on first use.

    Without an explicit URL the DATABASE_URL setting is read at call time,
    so tests can set it before any engine is constructed.
    """
    database_url = database_url or get_database_url()
    engine = _engines.get(database_url)
    if engine is None:
        engine = _build_engine(database_url)
        _engines[database_url] = engine
        logger.debug(
            "SQLAlchemy engine created",
            extra={
                "context": {
                    "url": mask_url_password(database_url),
                    "dialect": engine.dialect.name,
                }
            },
        )
    return engine


def get_sessionmaker(database_url: Optional[str] = None) -> sessionmaker:
    """Return a cached sessionmaker bound to the engine for ``database_url``."""
    database_url = database_url or get_database_url()
    factory = _sessionmakers.get(database_url)
    if factory is None:
        factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=get_engine(database_url),
        )
        _sessionmakers[database_url] = factory
    return factory


def create_tables(engine=None):
    """Create all tables in database using the lazy engine."""
    # Ensure models are imported so Base.metadata is populated
    from beer_api.db import base  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())


def drop_tables(engine=None):
    from beer_api.db import base  # noqa: F401

    Base.metadata.drop_all(bind=engine or get_engine())
