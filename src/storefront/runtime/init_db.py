"""Database initialization script."""

from src.storefront.core.services.database import DbManageService, DbSessionService
from src.storefront.runtime.context import get_config
from src.storefront.runtime.seed import seed_sample_data


def init_db(seed: bool | None = None) -> None:
    """Create all database tables, then load sample data if enabled."""
    config = get_config()
    database_service = DbSessionService(config)
    DbManageService(database_service.engine).create_all()

    if config.seed.enabled if seed is None else seed:
        with database_service.session_scope() as session:
            seed_sample_data(session)

    database_service.dispose()


if __name__ == "__main__":
    init_db()
