"""Contents of the ``.env.local`` file written into new projects."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import RunConfig
from .template import TemplateRenderer

__all__ = ["ENV_TEMPLATE", "render_env_file", "write_env_file"]

logger = logging.getLogger(__name__)


ENV_TEMPLATE = """
# Livepeer API Key
LIVEPEER_API_KEY="{{ api_key }}"

# Livepeer Playback ID
NEXT_PUBLIC_PLAYBACK_ID="{{ playback_id }}"
"""


def render_env_file(config: RunConfig, renderer: TemplateRenderer | None = None) -> str:
    """Build the env file text for ``config``.

    When environment configuration was declined both keys are present with
    empty values.
    """

    renderer = renderer or TemplateRenderer(missing="error")
    return renderer.render_string(ENV_TEMPLATE, config.env_context())


def write_env_file(project_dir: Path, content: str, *, filename: str = ".env.local") -> Path:
    path = project_dir / filename
    path.write_text(content, encoding="utf-8")
    logger.debug("wrote %s", path)
    return path
