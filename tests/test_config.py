from student_api.core.config import Settings


def test_database_url_built_from_components(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    s = Settings(
        _env_file=None,
        POSTGRES_USER="u",
        POSTGRES_PASSWORD="p",
        POSTGRES_HOST="db",
        POSTGRES_PORT="6543",
        POSTGRES_DB="school",
    )
    assert s.DATABASE_URL == "postgresql://u:p@db:6543/school"
    assert s.masked_database_url() == "postgresql://u:***@db:6543/school"
    assert not s.is_sqlite


def test_explicit_database_url_wins():
    s = Settings(_env_file=None, DATABASE_URL="sqlite:///./students.db")
    assert s.DATABASE_URL == "sqlite:///./students.db"
    assert s.is_sqlite


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", '["http://a.test", "http://b.test"]')
    assert Settings(_env_file=None).BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_comma_separated():
    s = Settings(_env_file=None, BACKEND_CORS_ORIGINS="http://a.test, http://b.test")
    assert s.BACKEND_CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_defaults():
    s = Settings(_env_file=None)
    assert s.BACKEND_CORS_ORIGINS == ["http://localhost:3000"]
    assert s.STRICT_NOT_FOUND is False
    assert s.API_PREFIX == ""
