"""Unit tests for application settings configuration."""

from pathlib import Path

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_defaults_point_at_viacep():
    settings = Settings(_env_file=None)
    assert settings.viacep_base_url == "https://viacep.com.br/ws"
    assert settings.viacep_format == "json"
    assert settings.notification_dismiss_label == "OK"
    assert settings.notification_duration_ms == 2000


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("VIACEP_BASE_URL", "http://cep.local/ws")
    monkeypatch.setenv("NOTIFICATION_DURATION_MS", "3500")

    settings = Settings(_env_file=None)

    assert settings.viacep_base_url == "http://cep.local/ws"
    assert settings.notification_duration_ms == 3500
