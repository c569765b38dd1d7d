"""Engine and session factory for the word list and learner progress tables."""
from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import QueuePool

from app.config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    # SQLite is used for local experiments and cannot share pooled connections across threads.
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "poolclass": QueuePool,
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
        "pool_recycle": 3600,
    }


DATABASE_URL = str(settings.DATABASE_URL)

engine = create_engine(DATABASE_URL, echo=settings.DEBUG, **_engine_options(DATABASE_URL))

# Request handlers return ORM rows after committing; keep them readable.
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)
