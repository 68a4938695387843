"""Unit tests for settings loading and database URL handling."""

from pathlib import Path

import pytest

from splice_reports.config import Settings
from splice_reports.infrastructure.database import to_async_url


def test_dotenv_in_working_directory_is_read(tmp_path: Path, monkeypatch):
    (tmp_path / ".env").write_text(
        "DATABASE_URL=sqlite:///./field-reports.db\nDATABASE_ECHO=true\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DATABASE_ECHO", raising=False)

    settings = Settings()

    assert settings.database_url == "sqlite:///./field-reports.db"
    assert settings.database_echo is True


def test_backend_dotenv_is_a_source_regardless_of_cwd():
    sources = {str(Path(item)) for item in Settings.model_config["env_file"]}
    assert str(Path(__file__).resolve().parents[2] / ".env") in sources


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://reports:secret@db:5432/splicing")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    monkeypatch.setenv("LOG_LEVEL_REPORTS", "DEBUG")

    settings = Settings()

    assert settings.database_url == "postgresql://reports:secret@db:5432/splicing"
    assert settings.seed_demo_data is False
    assert settings.log_level_reports == "DEBUG"


@pytest.mark.parametrize(
    ("configured", "expected"),
    [
        ("sqlite:///./splice_reports.db", "sqlite+aiosqlite:///./splice_reports.db"),
        ("sqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
        ("postgresql://u:p@db/splicing", "postgresql+asyncpg://u:p@db/splicing"),
        ("postgres://u:p@db/splicing", "postgresql+asyncpg://u:p@db/splicing"),
        ("sqlite+aiosqlite:///already.db", "sqlite+aiosqlite:///already.db"),
    ],
)
def test_database_url_moves_onto_async_driver(configured: str, expected: str):
    assert to_async_url(configured) == expected
