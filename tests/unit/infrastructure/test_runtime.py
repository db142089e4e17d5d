"""Tests for the database runtime helpers and sample data loading."""

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlmodel import Session

from src.storefront.core.services import DbSessionService, build_services
from src.storefront.core.services.database import DbManageService
from src.storefront.runtime.config import ConfigData, DatabaseConfig
from src.storefront.runtime.seed import seed_sample_data


class TestDbServices:
    def test_create_and_drop_tables(self, engine: Engine):
        assert {"users", "products", "addresses"} <= set(inspect(engine).get_table_names())

        DbManageService(engine).drop_all()

        assert inspect(engine).get_table_names() == []

    def test_in_memory_sessions_share_one_database(self):
        config = ConfigData(database=DatabaseConfig(url="sqlite:///:memory:"))
        database_service = DbSessionService(config)
        DbManageService(database_service.engine).create_all()

        with database_service.session_scope() as session:
            build_services(session).users.count_users().unwrap()

        assert database_service.health_check()
        database_service.dispose()


class TestSeed:
    def test_seed_loads_sample_data_once(self, session: Session):
        assert seed_sample_data(session) is True
        assert seed_sample_data(session) is False

        services = build_services(session)
        assert services.users.count_users().unwrap() == 3
        assert services.addresses.count_addresses().unwrap() == 4
        assert services.products.count_products().unwrap() == 3

        john = services.users.get_user_by_email("john.doe@example.com").unwrap()
        default = services.addresses.get_default_for_user(john.id).unwrap()
        assert default.street == "123 Main Street"
