"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from catalog_api.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    """Owns the engine and its connection pool for the lifetime of the app."""

    def __init__(self, db_config: DatabaseConfig):
        """Initialize the shared database engine and session factory."""

        logger.info("Setting up database engine and session factory")
        self._config = db_config

        engine_kwargs: dict[str, Any] = {
            "echo": False,
            "echo_pool": False,
            "connect_args": self._get_connect_args(db_config),
        }

        if db_config.is_in_memory:
            # Every connection to an in-memory SQLite database is a new database
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,
                }
            )

        self._engine = create_engine(db_config.connection_string, **engine_kwargs)
        logger.info(
            "Database engine initialized",
            backend=self._engine.url.get_backend_name(),
            host=self._engine.url.host,
            database=self._engine.url.database,
        )

    @property
    def engine(self):
        return self._engine

    def _get_connect_args(self, db_config: DatabaseConfig) -> dict:
        """Get database-specific connection arguments."""
        connect_args = {}

        if db_config.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # Sessions cross the worker threadpool
                    "timeout": 20,  # Lock timeout
                }
            )
        elif db_config.driver.startswith("mysql"):
            connect_args.update({"connect_timeout": 30, "charset": "utf8mb4"})

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for scripts and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(
                "Database transaction failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            db.close()

    def create_all(self) -> None:
        """Create the ``products`` and ``users`` tables if they are missing."""
        from catalog_api.entities.product import ProductTable  # noqa: F401
        from catalog_api.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("Disposing database engine")
        self._engine.dispose()
