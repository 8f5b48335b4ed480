from typing import Generator
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
from .config import Settings, settings
import logging

logger = logging.getLogger(__name__)

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================


def build_engine(config: Settings = settings) -> Engine:
    """
    Create the SQLAlchemy engine for the configured DATABASE_URL.

    PostgreSQL (the default) gets a QueuePool sized from settings.
    SQLite is accepted for local runs and tests; the in-memory form
    ("sqlite://") shares a single connection so every session sees
    the same tables.
    """
    if config.is_sqlite:
        in_memory = config.DATABASE_URL in ("sqlite://", "sqlite:///:memory:")
        return create_engine(
            config.DATABASE_URL,
            poolclass=StaticPool if in_memory else None,
            connect_args={"check_same_thread": False},
            echo=config.DB_ECHO_SQL,
        )

    return create_engine(
        config.DATABASE_URL,

        # Connection pool settings
        poolclass=QueuePool,
        pool_size=config.DB_POOL_SIZE,  # Number of connections to keep open
        max_overflow=config.DB_MAX_OVERFLOW,  # Max connections beyond pool_size
        pool_timeout=config.DB_POOL_TIMEOUT,  # Seconds to wait for connection
        pool_recycle=config.DB_POOL_RECYCLE,  # Recycle connections after N seconds

        # Test connection before using (detect disconnects)
        pool_pre_ping=True,

        echo=config.DB_ECHO_SQL,

        connect_args={
            "connect_timeout": 10,
        }
    )


engine = build_engine()


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False  # Don't expire objects after commit
)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE SESSION DEPENDENCY
# =============================================================================

def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI endpoints.

    Creates a session, yields it to the endpoint and closes it after the
    request, even if an error occurs.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables():
    """
    Create all database tables defined in models.

    Development and tests only; production schemas come from Alembic.
    """
    # Register models on Base.metadata
    from student_api.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


def drop_database_tables():
    """
    Drop all database tables. Deletes all data.
    """
    from student_api.models import student  # noqa: F401

    logger.warning("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database tables dropped")


def check_database_connection() -> bool:
    """
    Check if database connection is working.

    Returns:
        bool: True if connection successful, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


# =============================================================================
# EVENT LISTENERS
# =============================================================================

@event.listens_for(engine, "checkout")
def receive_checkout(dbapi_conn, connection_record, connection_proxy):
    if settings.DEBUG:
        logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def init_db():
    """
    Initialize database.
    Run this when starting the application.
    """
    logger.info(f"Initializing database at {settings.masked_database_url()}")

    if not check_database_connection():
        raise RuntimeError("Cannot connect to database!")

    if settings.AUTO_CREATE_TABLES:
        create_database_tables()

    logger.info("Database initialized")
