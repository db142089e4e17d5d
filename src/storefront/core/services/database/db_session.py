"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, create_engine

from src.storefront.runtime.config.config_data import ConfigData, DatabaseConfig
from src.storefront.runtime.context import get_config


class DbSessionService:
    def __init__(self, config: ConfigData | None = None, engine: Engine | None = None):
        """Initialize the shared database engine and session factory."""
        main_config = config or get_config()
        self._db_config = main_config.database

        if engine is not None:
            self._engine = engine
            return

        logger.info("Configuring database engine for environment: {}", main_config.app.environment)
        engine_kwargs = self._get_engine_kwargs(self._db_config)
        self._engine = create_engine(self._db_config.connection_string, **engine_kwargs)

        if main_config.app.environment == "production":
            if self._db_config.is_sqlite:
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
            logger.info(
                "Database engine initialized",
                pool_size=self._db_config.pool_size,
                max_overflow=self._db_config.max_overflow,
                pool_timeout=self._db_config.pool_timeout,
                pool_recycle=self._db_config.pool_recycle,
            )

    @property
    def engine(self) -> Engine:
        return self._engine

    def _get_engine_kwargs(self, db_config: DatabaseConfig) -> dict[str, Any]:
        """Engine options for the configured backend."""
        if db_config.is_sqlite:
            # One shared connection keeps an in-memory database alive across sessions.
            kwargs: dict[str, Any] = {
                "echo": db_config.echo,
                "connect_args": {"check_same_thread": False, "timeout": 20},
            }
            if db_config.is_in_memory:
                kwargs["poolclass"] = StaticPool
            return kwargs

        return {
            "pool_size": db_config.pool_size,
            "max_overflow": db_config.max_overflow,
            "pool_timeout": db_config.pool_timeout,
            "pool_recycle": db_config.pool_recycle,
            "pool_pre_ping": True,
            "echo": db_config.echo,
            "echo_pool": False,
        }

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on any exception."""
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

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def dispose(self) -> None:
        self._engine.dispose()
