"""Clone the boilerplate repository with the ``git`` command line client."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Sequence

from .errors import CloneError, DestinationExistsError

__all__ = ["GIT_FATAL_EXIT_CODE", "Runner", "clone_template"]

logger = logging.getLogger(__name__)

GIT_FATAL_EXIT_CODE = 128

Runner = Callable[[Sequence[str]], "subprocess.CompletedProcess[str]"]


def _run(command: Sequence[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(list(command), capture_output=True, text=True, check=False)


def clone_template(url: str, destination: Path, *, runner: Runner | None = None) -> Path:
    """Clone ``url`` into ``destination`` and return the destination path.

    Raises
    ------
    DestinationExistsError
        When git exits with its fatal status and ``destination`` is already
        present.
    CloneError
        For any other failure, including a missing ``git`` executable.
    """

    runner = runner or _run
    command = ["git", "clone", url, str(destination)]
    existed = destination.exists()
    logger.debug("running %s", " ".join(command))

    try:
        result = runner(command)
    except OSError as exc:
        raise CloneError(f"could not run git: {exc}", exit_code=127) from exc

    if result.returncode == 0:
        return destination

    stderr = (result.stderr or "").strip()
    if result.returncode == GIT_FATAL_EXIT_CODE and existed:
        raise DestinationExistsError(destination, exit_code=result.returncode, stderr=stderr)
    raise CloneError(
        stderr or f"git clone exited with status {result.returncode}",
        exit_code=result.returncode,
        stderr=stderr,
    )
