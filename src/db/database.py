"""Generate database session"""

import logging
from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Settings
from src.db.schema import Base

logger = logging.getLogger(__name__)


@lru_cache
def get_engine(settings: Settings | None = None) -> Engine:
    """One engine per settings. Tables are created the first time the engine is built."""
    settings = settings or Settings.from_env()
    connect_args = (
        {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
    )
    engine = create_engine(
        settings.database_url, echo=settings.echo_sql, connect_args=connect_args
    )
    # Ensure all tables are created
    Base.metadata.create_all(bind=engine)
    logger.info("Connected to database %s", engine.url.render_as_string(hide_password=True))
    return engine


def get_db(settings: Settings | None = None) -> Generator[Session, None, None]:
    session_local = sessionmaker(bind=get_engine(settings))
    db = session_local()
    try:
        yield db
    finally:
        db.close()
