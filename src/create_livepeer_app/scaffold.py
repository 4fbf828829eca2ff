"""Create a new Livepeer app from the boilerplate repository."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from rich.console import Console

from .config import RunConfig, ScaffoldSettings
from .envfile import render_env_file, write_env_file
from .git import Runner, clone_template
from .manifest import rename_manifest
from .package_managers import (
    PackageManager,
    detect_package_manager,
    install_dependencies,
    is_installed,
)

__all__ = ["ProjectInitializer", "ScaffoldResult"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScaffoldResult:
    """Outcome of a successful :meth:`ProjectInitializer.create` call."""

    project_dir: Path
    package_manager: PackageManager


@dataclass(slots=True)
class ProjectInitializer:
    """Clone, patch and install a new app.

    Every step receives the project directory explicitly; the process working
    directory is never changed. Nothing is rolled back when a step fails.
    """

    settings: ScaffoldSettings = field(default_factory=ScaffoldSettings)
    console: Console = field(default_factory=Console)
    runner: Runner | None = None
    probe: Callable[[str], bool] = is_installed
    popen: Callable[..., subprocess.Popen[str]] = subprocess.Popen

    def _echo(self, line: str) -> None:
        self.console.print(line, markup=False, highlight=False)

    def create(self, config: RunConfig, parent_dir: str | Path) -> ScaffoldResult:
        """Create ``config.app_name`` inside ``parent_dir``."""

        project_dir = (Path(parent_dir) / config.app_name).resolve()
        env_text = render_env_file(config)

        self.console.print("\nInitializing new Livepeer app\n")
        with self.console.status("Creating codebase") as status:
            clone_template(self.settings.repo_url, project_dir, runner=self.runner)
            logger.debug("cloned %s into %s", self.settings.repo_url, project_dir)

            rename_manifest(project_dir / self.settings.manifest_name, config.app_name)
            write_env_file(project_dir, env_text, filename=self.settings.env_filename)

            manager = detect_package_manager(self.probe)
            status.update("Installing dependencies")
            install_dependencies(manager, project_dir, echo=self._echo, popen=self.popen)

        return ScaffoldResult(project_dir=project_dir, package_manager=manager)
