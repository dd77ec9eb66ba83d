"""
Database engine, session factory and the positional query helper.

Store modules write SQL with PostgreSQL-style ``$1..$n`` placeholders and
execute it through ``query``, which binds the values through SQLAlchemy.
"""

import logging
import re
from typing import Any, Dict, List, Sequence

from sqlalchemy import bindparam, create_engine, text
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# Create SQLAlchemy engine
if settings.DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        settings.DATABASE_URL,
        connect_args={"check_same_thread": False}
    )
else:
    engine = create_engine(
        settings.DATABASE_URL,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=10,  # Connection pool size
        max_overflow=20  # Allow up to 20 connections beyond pool_size
    )

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

_POSITIONAL_PARAM = re.compile(r"\$(\d+)")
_ILIKE = re.compile(r"\bILIKE\b")


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """
    Initialize database.

    Alembic owns table creation, so this only imports the models to
    register them on Base.metadata.

    Use "alembic upgrade head" to create/update database schema.
    """
    from app.models import company, job, user  # noqa: F401


def query(db: Session, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
    """
    Execute a statement written with ``$1..$n`` positional placeholders.

    ``$n`` is bound to ``params[n - 1]``. Bind types are inferred from the
    Python values, so ``Decimal`` values are adapted for drivers without a
    native decimal type.

    Args:
        db: Database session
        sql: Statement text
        params: Positional values

    Returns:
        Result rows as dicts (empty list for statements without rows)
    """
    statement_sql = _POSITIONAL_PARAM.sub(lambda m: f":p{m.group(1)}", sql)

    # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII
    if db.get_bind().dialect.name == "sqlite":
        statement_sql = _ILIKE.sub("LIKE", statement_sql)

    statement = text(statement_sql)
    if params:
        statement = statement.bindparams(
            *[bindparam(f"p{idx}", value) for idx, value in enumerate(params, start=1)]
        )

    logger.debug("Executing SQL: %s | params=%s", " ".join(sql.split()), list(params))
    result = db.execute(statement)

    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
