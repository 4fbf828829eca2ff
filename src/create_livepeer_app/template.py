"""Minimal ``{{ placeholder }}`` substitution for generated text files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

__all__ = [
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<key>[A-Za-z_][A-Za-z0-9_]*)\s*}}")
_MISSING_POLICIES = frozenset({"keep", "empty", "error"})


class TemplateRenderingError(RuntimeError):
    """Raised when a placeholder has no value in the rendering context."""


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates containing ``{{ name }}`` placeholders.

    Parameters
    ----------
    missing:
        Controls what happens when a placeholder cannot be resolved. The
        supported policies are ``"keep"`` (leave the placeholder unchanged),
        ``"empty"`` (replace with an empty string) and ``"error"`` (raise
        :class:`TemplateRenderingError`).
    """

    missing: str = "error"

    def __post_init__(self) -> None:
        if self.missing not in _MISSING_POLICIES:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using values from ``context``."""

        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key in context:
                return str(context[key])
            if self.missing == "keep":
                return match.group(0)
            if self.missing == "empty":
                return ""
            raise TemplateRenderingError(f"missing value for '{key}'")

        return _PLACEHOLDER_PATTERN.sub(substitute, template)
