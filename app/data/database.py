# app/data/database.py
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.utils.settings import DATABASE_URL, DB_ECHO, SQLITE_BUSY_TIMEOUT


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def build_engine(url: str = DATABASE_URL, echo: bool = DB_ECHO) -> Engine:
    if url.startswith("sqlite"):
        # sqlite serializuje zapisy, czekamy na lock zamiast od razu "database is locked"
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": SQLITE_BUSY_TIMEOUT},
        )
    return create_engine(url, echo=echo, pool_pre_ping=True)


engine = build_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine = engine) -> None:
    # rejestracja wszystkich modeli w Base.metadata przed create_all
    import app.data.models  # noqa: F401

    Base.metadata.create_all(bind=bind)
