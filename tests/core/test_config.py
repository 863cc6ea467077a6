from __future__ import annotations

import pytest
from pydantic import ValidationError

from forge_yourself.core.config import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ForgeSettings


def test_defaults() -> None:
    settings = ForgeSettings()

    assert settings.base_url == DEFAULT_BASE_URL == "https://forgeapi.puppet.com/v3/"
    assert settings.user_agent == DEFAULT_USER_AGENT == "go-forge-yourself/0.0.0"
    assert settings.bearer_token() is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORGE_BASE_URL", "https://forge.example.test/v3/")
    monkeypatch.setenv("FORGE_API_KEY", "from-env")

    settings = ForgeSettings()

    assert settings.base_url == "https://forge.example.test/v3/"
    assert settings.bearer_token() == "from-env"


def test_dotenv_file_is_read(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("FORGE_USER_AGENT=dotenv-agent/1.0\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert ForgeSettings().user_agent == "dotenv-agent/1.0"


def test_api_key_is_hidden_from_repr() -> None:
    settings = ForgeSettings(api_key="s3cr3t")

    assert "s3cr3t" not in repr(settings)


def test_empty_api_key_means_no_token() -> None:
    assert ForgeSettings(api_key="").bearer_token() is None


def test_settings_are_frozen() -> None:
    settings = ForgeSettings()

    with pytest.raises(ValidationError):
        settings.base_url = "https://elsewhere.test/"  # type: ignore[misc]
