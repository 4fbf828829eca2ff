from __future__ import annotations

import pytest
from pydantic import ValidationError

from create_livepeer_app.config import DEFAULT_APP_NAME, TEMPLATE_REPO_URL, RunConfig, ScaffoldSettings


def test_run_config_rejects_invalid_app_name():
    with pytest.raises(ValidationError):
        RunConfig(app_name="Not Kebab")


def test_run_config_is_immutable():
    config = RunConfig(app_name="my-app")
    with pytest.raises(ValidationError):
        config.app_name = "other"  # type: ignore[misc]


def test_env_context_is_empty_when_declined():
    config = RunConfig(app_name="my-app", configure_env=False, api_key="ignored", playback_id="ignored")
    assert config.env_context() == {"api_key": "", "playback_id": ""}


def test_env_context_uses_answers_when_accepted():
    config = RunConfig(app_name="my-app", configure_env=True, api_key="ABC123", playback_id="xyz789")
    assert config.env_context() == {"api_key": "ABC123", "playback_id": "xyz789"}


def test_settings_defaults():
    settings = ScaffoldSettings()
    assert settings.repo_url == TEMPLATE_REPO_URL
    assert settings.manifest_name == "package.json"
    assert settings.env_filename == ".env.local"
    assert settings.default_app_name == DEFAULT_APP_NAME == "livepeer-app"
