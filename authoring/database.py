"""Database engine, sessions and declarative base for lesson items."""
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from authoring.config import DATABASE_URL


def build_engine(url: str) -> Engine:
    """Engine for ``url``; SQLite connections are shared with request threads."""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def build_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


engine = build_engine(DATABASE_URL)
SessionLocal = build_session_factory(engine)


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create the lesson item tables if they are missing."""
    # Register models on Base.metadata
    import authoring.models.db  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
