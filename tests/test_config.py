"""
Tests for settings parsing and validation.
"""

import pytest

from datastore_api.config import Settings


def test_redis_url():
    settings = Settings(redis_host="cache", redis_port=6379)
    assert settings.redis_url == "redis://cache:6379"


def test_database_target_hides_password():
    """Log-friendly target never contains the password."""
    settings = Settings(
        db_host="db",
        db_port=5432,
        db_user="app",
        db_password="hunter2",
        db_name="appdb",
    )
    assert settings.database_target == "app@db:5432/appdb"
    assert "hunter2" not in settings.database_target


@pytest.mark.parametrize("field", ["db_port", "redis_port", "api_port"])
@pytest.mark.parametrize("port", [0, 70000])
def test_invalid_port_rejected(field, port):
    with pytest.raises(ValueError, match=field.upper()):
        Settings(**{field: port})


def test_invalid_log_level_rejected():
    with pytest.raises(ValueError, match="LOG_LEVEL"):
        Settings(log_level="CHATTY")