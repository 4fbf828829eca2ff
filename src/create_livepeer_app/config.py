"""Run configuration shared by the CLI and the project initializer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import APP_NAME_HINT, is_valid_app_name

__all__ = [
    "DEFAULT_APP_NAME",
    "TEMPLATE_REPO_URL",
    "RunConfig",
    "ScaffoldSettings",
]


TEMPLATE_REPO_URL = "https://github.com/dabit3/livepeer-boilerplate.git"
DEFAULT_APP_NAME = "livepeer-app"


class RunConfig(BaseModel):
    """Answers collected from the command line and the interactive prompts.

    The model is frozen so the values cannot drift once the pipeline starts.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    app_name: str = Field(..., description="Kebab-case folder and package name for the new app.")
    app_type: str | None = Field(None, description="Value of ``--type``. Accepted but not used.")
    configure_env: bool = Field(False, description="Whether the user supplied environment values.")
    api_key: str = Field("", description="Livepeer API key written to the env file.")
    playback_id: str = Field("", description="Playback ID written to the env file.")

    @field_validator("app_name")
    @classmethod
    def _check_app_name(cls, value: str) -> str:
        if not is_valid_app_name(value):
            raise ValueError(APP_NAME_HINT)
        return value

    def env_context(self) -> Mapping[str, str]:
        """Return the values exposed to the env file template.

        Both values are empty when environment configuration was skipped.
        """

        if not self.configure_env:
            return {"api_key": "", "playback_id": ""}
        return {"api_key": self.api_key, "playback_id": self.playback_id}


@dataclass(slots=True)
class ScaffoldSettings:
    """Fixed locations used by :class:`~create_livepeer_app.scaffold.ProjectInitializer`.

    Attributes
    ----------
    repo_url:
        The boilerplate repository cloned for every new app.
    manifest_name:
        The package manifest whose ``name`` field is rewritten.
    env_filename:
        The local environment file written into the new project.
    default_app_name:
        Default offered by the app name prompt.
    """

    repo_url: str = TEMPLATE_REPO_URL
    manifest_name: str = "package.json"
    env_filename: str = ".env.local"
    default_app_name: str = DEFAULT_APP_NAME
