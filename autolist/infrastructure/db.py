"""Database engine and sessions for the SQL car and price stores."""

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker

from autolist.infrastructure.config.settings import settings

# Built on first use; in_memory stores never need a DATABASE_URL
_engine = None
_SessionLocal = None


def _get_engine():
    """Get or create the engine shared by the SQL stores."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError(
                "DATABASE_URL is required when CAR_REPOSITORY=sql or PRICE_REPOSITORY=sql"
            )
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,
            echo=settings.debug_mode,
        )
    return _engine


def get_db_session() -> Session:
    """
    Open a session for one store operation.

    Objects stay readable after commit so repositories can map them to
    entities once the session is closed.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=_get_engine()
        )
    return _SessionLocal()


def sync_id_sequence(db: Session, table: str) -> None:
    """
    Move the serial id sequence of a table past its highest stored id.

    PostgreSQL does not advance a SERIAL sequence when a row is inserted with an
    explicit id, so the next insert without an id would collide with it. Other
    dialects derive new ids from the stored rows and need nothing.

    Args:
        db: Session holding the flushed insert
        table: Table name with an integer ``id`` primary key
    """
    if db.get_bind().dialect.name != "postgresql":
        return
    db.execute(
        text(
            f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
            f"(SELECT MAX(id) FROM {table}))"
        )
    )
