"""Interactive questions asked when the command line leaves something open."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt

from .config import DEFAULT_APP_NAME
from .naming import validate_app_name

__all__ = ["API_KEY_HINT", "PLAYBACK_ID_HINT", "Prompter", "VerbatimPrompt"]


API_KEY_HINT = "Get Livepeer API Key at https://livepeer.studio/dashboard"
PLAYBACK_ID_HINT = "Create stream and get Playback ID at https://livepeer.studio/dashboard/streams"


class VerbatimPrompt(Prompt):
    """Text prompt that keeps surrounding whitespace so it can be validated."""

    def process_response(self, value: str) -> str:
        return value.rstrip("\r\n")


@dataclass(slots=True)
class Prompter:
    """Ask the user for missing run configuration values.

    ``stream`` is forwarded to :meth:`rich.prompt.Prompt.ask`; when set,
    answers are read from it instead of the terminal.
    """

    console: Console = field(default_factory=Console)
    stream: TextIO | None = None

    def _ask(self, message: str, **kwargs) -> str:
        return Prompt.ask(message, console=self.console, stream=self.stream, **kwargs)

    def app_name(self, default: str = DEFAULT_APP_NAME) -> str:
        """Ask for the app name until a kebab-case value is entered."""

        while True:
            answer = VerbatimPrompt.ask(
                "Enter your app name",
                console=self.console,
                stream=self.stream,
                default=default,
            )
            if answer == "":
                answer = default
            verdict = validate_app_name(answer)
            if verdict is True:
                return answer
            self.console.print(f"[red]{verdict}[/red]")

    def configure_env(self) -> bool:
        answer = self._ask(
            "Configure environment variables now?",
            choices=["Yes", "No"],
            default="Yes",
            case_sensitive=False,
        )
        return answer.lower() == "yes"

    def api_key(self) -> str:
        self.console.print(API_KEY_HINT)
        return self._ask("Livepeer API Key", default="", show_default=False)

    def playback_id(self) -> str:
        self.console.print(PLAYBACK_ID_HINT)
        return self._ask("Playback ID", default="", show_default=False)
