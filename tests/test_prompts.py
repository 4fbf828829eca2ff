from __future__ import annotations

import io

from create_livepeer_app.naming import APP_NAME_HINT
from create_livepeer_app.prompts import API_KEY_HINT, PLAYBACK_ID_HINT, Prompter


def _prompter(console, answers: str) -> Prompter:
    return Prompter(console=console, stream=io.StringIO(answers))


def test_app_name_retries_until_valid(console, read_output):
    prompter = _prompter(console, "Bad Name\nmy-app\n")
    assert prompter.app_name() == "my-app"
    assert APP_NAME_HINT in read_output(console)


def test_app_name_uses_default_on_empty_answer(console):
    prompter = _prompter(console, "\n")
    assert prompter.app_name() == "livepeer-app"


def test_configure_env_choices(console):
    assert _prompter(console, "Yes\n").configure_env() is True
    assert _prompter(console, "No\n").configure_env() is False
    assert _prompter(console, "\n").configure_env() is True


def test_env_value_prompts_print_hints(console, read_output):
    prompter = _prompter(console, "ABC123\nxyz789\n")
    assert prompter.api_key() == "ABC123"
    assert prompter.playback_id() == "xyz789"
    output = read_output(console)
    assert API_KEY_HINT in output
    assert PLAYBACK_ID_HINT in output


def test_env_values_may_be_empty(console):
    assert _prompter(console, "\n").api_key() == ""


def test_app_name_rejects_padded_answer(console, read_output):
    prompter = _prompter(console, " my-app \nmy-app\n")
    assert prompter.app_name() == "my-app"
    assert APP_NAME_HINT in read_output(console)


def test_configure_env_ignores_case(console):
    assert _prompter(console, "yes\n").configure_env() is True
    assert _prompter(console, "no\n").configure_env() is False
