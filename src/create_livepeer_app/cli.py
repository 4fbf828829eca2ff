"""Command line interface for creating a new Livepeer app."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import RunConfig, ScaffoldSettings
from .errors import DestinationExistsError, ScaffoldError
from .naming import is_valid_app_name
from .prompts import Prompter
from .scaffold import ProjectInitializer, ScaffoldResult

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DIRECTORY_EXISTS_MESSAGE = "Error: directory already exists."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-livepeer-app",
        description="Create a new social app with a single command.",
    )
    parser.add_argument(
        "app_name",
        nargs="?",
        metavar="appName",
        help="Folder and package name in kebab-case, e.g. my-app-name",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="app_type",
        metavar="<type of app>",
        help="Set the app type as basic or PWA",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every step to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def resolve_config(
    args: argparse.Namespace,
    prompter: Prompter,
    settings: ScaffoldSettings | None = None,
) -> RunConfig:
    """Merge command line arguments with answers to the interactive prompts.

    The app name prompt is only shown when the positional argument is missing
    or not kebab-case.
    """

    settings = settings or ScaffoldSettings()
    app_name = args.app_name
    if not is_valid_app_name(app_name):
        app_name = prompter.app_name(settings.default_app_name)

    configure_env = prompter.configure_env()
    api_key = playback_id = ""
    if configure_env:
        api_key = prompter.api_key()
        playback_id = prompter.playback_id()

    return RunConfig(
        app_name=app_name,
        app_type=args.app_type,
        configure_env=configure_env,
        api_key=api_key,
        playback_id=playback_id,
    )


def report_success(console: Console, config: RunConfig, result: ScaffoldResult) -> None:
    console.print(
        f"[bold green]Success![/bold green] Created {config.app_name} at {result.project_dir}\n",
        soft_wrap=True,
    )
    console.print(
        "To get started, change into the new directory and run "
        f"[cyan]{result.package_manager.dev_command_text}[/cyan]",
        soft_wrap=True,
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    prompter: Prompter | None = None,
    initializer: ProjectInitializer | None = None,
    parent_dir: Path | None = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    console = console or Console()
    prompter = prompter or Prompter(console=console)
    initializer = initializer or ProjectInitializer(console=console)

    try:
        config = resolve_config(args, prompter, initializer.settings)
    except (KeyboardInterrupt, EOFError):
        console.print("\nAborted.")
        return 130

    try:
        result = initializer.create(config, Path.cwd() if parent_dir is None else parent_dir)
    except DestinationExistsError as exc:
        logger.debug("clone failed: %s", exc.stderr)
        console.print(f"\n{DIRECTORY_EXISTS_MESSAGE}")
        return 1
    except (ScaffoldError, OSError) as exc:
        logger.debug("creating %s failed", config.app_name, exc_info=True)
        console.print(f"\nError: failed to create {config.app_name}: {escape(str(exc))}", soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        console.print("\nAborted.")
        return 130

    report_success(console, config, result)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
