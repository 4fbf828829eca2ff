"""Create a new Livepeer app with a single command.

The package clones the Livepeer boilerplate repository, renames the generated
``package.json``, writes a ``.env.local`` file, installs dependencies with
whichever of bun, yarn or npm is available, and exposes the whole workflow
both programmatically and via the ``create-livepeer-app`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import RunConfig, ScaffoldSettings
from .errors import (
    CloneError,
    DestinationExistsError,
    InstallError,
    ManifestError,
    ScaffoldError,
)
from .naming import is_valid_app_name, validate_app_name
from .package_managers import PackageManager, detect_package_manager, select_package_manager
from .scaffold import ProjectInitializer, ScaffoldResult

__all__ = [
    "CloneError",
    "DestinationExistsError",
    "InstallError",
    "ManifestError",
    "PackageManager",
    "ProjectInitializer",
    "RunConfig",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldSettings",
    "detect_package_manager",
    "is_valid_app_name",
    "select_package_manager",
    "validate_app_name",
]
