import logging
import time
from typing import Generator
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool

from .config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _engine_options() -> dict:
    """Pool options for the configured database URL"""
    if settings.is_sqlite:
        # Sessions are used from FastAPI's threadpool
        return {"connect_args": {"check_same_thread": False}}
    return {
        "poolclass": QueuePool,
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": settings.db_pool_recycle,
    }


# Create SQLAlchemy engine with proper configuration
engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options()
)

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    Database dependency for FastAPI

    Yields:
        Session: Database session
    """
    db = SessionLocal()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database session error: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(max_retries: int = 1, delay: float = 0) -> bool:
    """
    Create database tables, waiting for the database to come up.

    Args:
        max_retries: Number of connection attempts
        delay: Seconds to sleep between attempts

    Returns:
        bool: True if successful, False otherwise
    """
    # Register models on Base.metadata
    from ..models import task  # noqa: F401

    for attempt in range(max_retries):
        try:
            logger.info(f"Creating database tables (attempt {attempt + 1}/{max_retries})")
            Base.metadata.create_all(bind=engine)
            logger.info("Database tables created successfully")
            return True
        except OperationalError as e:
            logger.warning(f"Database connection failed (attempt {attempt + 1}): {e}")
            if attempt < max_retries - 1:
                logger.info(f"Retrying in {delay} seconds...")
                time.sleep(delay)
        except SQLAlchemyError as e:
            logger.error(f"Failed to initialize database: {e}")
            return False

    logger.error("Failed to connect to database after all retries")
    return False


def check_db_connection() -> bool:
    """
    Check database connectivity

    Returns:
        bool: True if connected, False otherwise
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.debug("Database connection check successful")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection check failed: {e}")
        return False
