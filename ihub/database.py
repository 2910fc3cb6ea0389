# ihub/database.py
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .utils.logging import db_logger

Base = declarative_base()


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_valid_identifier(value) -> bool:
    """True for ids in the canonical UUID form the store hands out"""
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value
    except ValueError:
        return False


@dataclass
class Store:
    """Engine plus session factory for one process"""
    engine: Engine
    session_factory: sessionmaker

    def init_schema(self) -> None:
        # Models must be imported so their tables are registered on Base
        from . import models  # noqa: F401
        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        db_logger.info("Disposing database engine")
        self.engine.dispose()


def create_store(database_url: str, echo: bool = False) -> Store:
    db_logger.info(f"Connecting to database: {database_url}")

    connect_args = {}
    engine_kwargs = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if ":memory:" in database_url:
            # Keep a single connection so the in-memory database survives
            engine_kwargs["poolclass"] = StaticPool

    engine = create_engine(
        database_url,
        connect_args=connect_args,
        echo=echo,
        **engine_kwargs
    )
    session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return Store(engine=engine, session_factory=session_factory)


def get_db(request: Request):
    db = request.app.state.store.session_factory()
    try:
        yield db
    finally:
        db.close()
