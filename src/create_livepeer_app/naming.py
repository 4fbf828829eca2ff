"""App name validation."""

from __future__ import annotations

import re

__all__ = ["APP_NAME_HINT", "KEBAB_CASE", "is_valid_app_name", "validate_app_name"]


KEBAB_CASE = re.compile(r"[a-z]+(?:-[a-z0-9]+)*")

APP_NAME_HINT = "please enter your app name in the format of my-app-name"


def is_valid_app_name(value: str | None) -> bool:
    """Return ``True`` when ``value`` is a kebab-case name such as ``my-app-name``.

    The name must start with lowercase letters and may be followed by any number
    of ``-segment`` groups, where each segment holds lowercase letters or digits.
    """

    if not value:
        return False
    return KEBAB_CASE.fullmatch(value) is not None


def validate_app_name(value: str) -> bool | str:
    """Prompt validator: ``True`` for valid names, otherwise the rejection message."""

    if is_valid_app_name(value):
        return True
    return APP_NAME_HINT
