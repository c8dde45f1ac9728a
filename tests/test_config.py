import pytest
from pydantic import ValidationError

from app.core.config import Settings


@pytest.mark.parametrize("missing", ["SECRET_KEY", "ADMIN_PASSWORD"])
def test_secrets_have_no_defaults(monkeypatch, missing):
    monkeypatch.delenv(missing, raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_settings_load_from_environment(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "from-env")
    monkeypatch.setenv("ADMIN_PASSWORD", "from-env-too")
    loaded = Settings(_env_file=None)
    assert loaded.SECRET_KEY == "from-env"
    assert loaded.ADMIN_PASSWORD == "from-env-too"
