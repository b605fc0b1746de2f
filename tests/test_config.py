import pytest

from config import get_settings_module
from src.hr_analytics.hr_analytics.container import build_container
from src.hr_analytics.hr_analytics.core.enums import DataSource
from src.hr_analytics.hr_analytics.hr.memory_repository import InMemoryHRRepository


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_memory_container_uses_sample_repository():
    container = build_container()

    assert container.data_source == DataSource.MEMORY
    assert isinstance(container.hr_repo, InMemoryHRRepository)
    assert container.conn is None


def test_mysql_container_requires_db_config():
    with pytest.raises(ValueError):
        build_container(data_source="mysql")


def test_mysql_container_uses_single_connection_factory():
    from src.hr_analytics.hr_analytics.database.connection import DatabaseConnection
    from src.hr_analytics.hr_analytics.hr.mysql_repository import MySQLHRRepository

    DatabaseConnection.reset_instance()
    try:
        container = build_container(data_source="mysql", db_config={"host": "db", "database": "hrsystem_test"})

        assert isinstance(container.hr_repo, MySQLHRRepository)
        assert container.conn is DatabaseConnection.get_instance(container.conn.config)
        assert container.conn.config.host == "db"
        assert container.conn.config.port == 3306
    finally:
        DatabaseConnection.reset_instance()
