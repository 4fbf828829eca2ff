"""Rewrite the ``name`` field of a cloned project's ``package.json``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ManifestError

__all__ = ["rename_manifest"]

logger = logging.getLogger(__name__)


def rename_manifest(path: str | Path, name: str) -> dict[str, Any]:
    """Set the ``name`` field of the manifest at ``path`` to ``name``.

    Every other field is preserved in its original order and the file is
    re-serialized with two space indentation.
    """

    manifest_path = Path(path)
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"{manifest_path} does not exist") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"cannot read {manifest_path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{manifest_path} is not valid JSON: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{manifest_path} must contain a JSON object")

    data["name"] = name
    try:
        manifest_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        raise ManifestError(f"cannot write {manifest_path}: {exc}") from exc
    logger.debug("renamed package in %s to %s", manifest_path, name)
    return data
