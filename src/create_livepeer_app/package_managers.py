"""Package manager detection and dependency installation.

Detection is a capability probe: a tool counts as installed when
``<tool> --version`` can be spawned and exits successfully. The selection
policy itself is a pure function of the probe results so it can be tested
without touching the system.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from .errors import InstallError

__all__ = [
    "BUN",
    "NPM",
    "PREFERENCE_ORDER",
    "YARN",
    "PackageManager",
    "detect_package_manager",
    "install_dependencies",
    "is_installed",
    "select_package_manager",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PackageManager:
    """Commands used to install dependencies and start the dev server."""

    name: str
    install_command: tuple[str, ...]
    dev_command: tuple[str, ...]

    @property
    def dev_command_text(self) -> str:
        return " ".join(self.dev_command)


BUN = PackageManager("bun", ("bun", "install"), ("bun", "dev"))
YARN = PackageManager("yarn", ("yarn",), ("yarn", "dev"))
NPM = PackageManager("npm", ("npm", "install", "--verbose"), ("npm", "run", "dev"))

PREFERENCE_ORDER: tuple[PackageManager, ...] = (BUN, YARN, NPM)


def is_installed(tool: str) -> bool:
    """Return ``True`` when ``tool --version`` runs and exits with status 0."""

    try:
        result = subprocess.run(
            [tool, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0


def select_package_manager(
    bun_available: bool,
    yarn_available: bool,
    npm_available: bool = True,
) -> PackageManager:
    """Pick the first available package manager in preference order.

    npm is the universal fallback and is returned even when
    ``npm_available`` is false.
    """

    if bun_available:
        return BUN
    if yarn_available:
        return YARN
    if not npm_available:
        logger.warning("no package manager detected, falling back to npm")
    return NPM


def detect_package_manager(probe: Callable[[str], bool] = is_installed) -> PackageManager:
    """Probe for bun, then yarn, and select the package manager to use.

    Probing stops at the first tool found; npm is never probed.
    """

    bun = probe(BUN.name)
    yarn = not bun and probe(YARN.name)
    manager = select_package_manager(bun, yarn)
    logger.debug("selected package manager %s", manager.name)
    return manager


def install_dependencies(
    manager: PackageManager,
    project_dir: Path,
    *,
    echo: Callable[[str], None] = print,
    popen: Callable[..., subprocess.Popen[str]] = subprocess.Popen,
) -> None:
    """Run the install command inside ``project_dir``, streaming its output.

    Each line of output is passed to ``echo`` as it arrives. The call blocks
    until the package manager exits.
    """

    command: Sequence[str] = manager.install_command
    logger.debug("running %s in %s", " ".join(command), project_dir)
    try:
        process = popen(
            list(command),
            cwd=project_dir,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
        )
    except OSError as exc:
        raise InstallError(command, 127) from exc

    with process:
        if process.stdout is not None:
            for line in process.stdout:
                echo(line.rstrip("\n"))
        returncode = process.wait()

    if returncode != 0:
        raise InstallError(command, returncode)
