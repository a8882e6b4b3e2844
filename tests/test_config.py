import pytest

from app import create_app
from config import normalize_database_url, validate_environment


def test_postgres_scheme_is_rewritten():
    assert normalize_database_url("postgres://u:p@h/db") == "postgresql://u:p@h/db"
    assert normalize_database_url("sqlite:///local.db") == "sqlite:///local.db"
    assert normalize_database_url(None) is None


def test_missing_required_variables_are_reported(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="SECRET_KEY, DATABASE_URL"):
        validate_environment()

    with pytest.raises(RuntimeError):
        create_app()


def test_index(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "running" in response.get_json()["message"]
