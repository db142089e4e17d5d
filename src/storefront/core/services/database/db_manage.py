"""Schema management for the storefront tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        from src.storefront.entities.address import AddressTable  # noqa: F401
        from src.storefront.entities.product import ProductTable  # noqa: F401
        from src.storefront.entities.user import UserTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")
