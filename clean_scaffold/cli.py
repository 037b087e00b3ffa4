"""Command-line entry point for clean-scaffold.

The selected folder is the positional argument; the feature name comes from
``--name`` or from an interactive prompt.

Usage::

    clean-scaffold lib/features --name user_profile
    clean-scaffold lib/features            # prompts for the name
    python -m clean_scaffold.cli lib/features --name cart --dry-run
"""

from __future__ import annotations

import sys
from pathlib import Path

from jinja2 import TemplateError
from pydantic import ValidationError
from rich.markup import escape
from rich.prompt import Prompt

from clean_scaffold.config import Config, PromptConfig
from clean_scaffold.scaffolder import FOLDER_LAYOUT, ScaffoldError, Scaffolder
from clean_scaffold.utils import (
    console,
    is_snake_case,
    print_error,
    print_info,
    print_success,
    print_summary_table,
    print_warning,
)

MSG_NO_FOLDER = "Please select a folder first."
MSG_NO_NAME = "No feature name provided."
MSG_SUCCESS = "Clean architecture structure created successfully!"
MSG_FAILURE = "Failed to create project structure"


def prompt_feature_name(prompt: PromptConfig) -> str | None:
    """Ask for a feature name; ``None`` when the prompt is cancelled or left empty."""
    try:
        value = Prompt.ask(
            f"{escape(prompt.message)} [dim](e.g. {escape(prompt.placeholder)})[/dim]",
            console=console,
            default="",
            show_default=False,
        )
    except (KeyboardInterrupt, EOFError):
        console.print()
        return None
    return value or None


def _load_config(config_path: str | None) -> Config:
    if config_path:
        return Config.load(Path(config_path))
    return Config.from_env()


def _print_plan(scaffolder: Scaffolder, feature_name: str) -> None:
    name = escape(feature_name)
    rows = [("folder", f"{name}/{folder}") for folder in FOLDER_LAYOUT]
    rows.extend(
        ("file", f"{name}/{escape(planned.relative_path)}")
        for planned in scaffolder.plan(feature_name)
    )
    print_summary_table(rows, title="Planned structure")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="clean-scaffold",
        description="Create a clean-architecture feature skeleton (data/domain/presentation)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  clean-scaffold lib/features --name user_profile\n"
            "  clean-scaffold lib/features --dry-run\n"
        ),
    )
    parser.add_argument(
        "folder",
        nargs="?",
        default=None,
        help="Selected folder the feature is created in",
    )
    parser.add_argument(
        "--name", "-n",
        default=None,
        help="Feature name in snake_case (prompted for if omitted)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON config file (default: CLEAN_SCAFFOLD_* environment variables)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the folders and files that would be created, write nothing",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print a summary of created and skipped paths",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``clean-scaffold``."""
    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args.config)
    except (OSError, ValidationError) as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(1)
    if args.verbose:
        config = config.model_copy(update={"verbose": True})

    if not args.folder or not Path(args.folder).is_dir():
        print_warning(MSG_NO_FOLDER)
        return

    feature_name = args.name if args.name is not None else prompt_feature_name(config.prompt)
    if not feature_name:
        print_warning(MSG_NO_NAME)
        return

    if not is_snake_case(feature_name):
        print_warning(f"'{escape(feature_name)}' is not snake_case; using it as given.")

    scaffolder = Scaffolder(config)

    try:
        if args.dry_run:
            _print_plan(scaffolder, feature_name)
            return
        result = scaffolder.generate(args.folder, feature_name)
    except (ScaffoldError, TemplateError) as exc:
        print_error(MSG_FAILURE)
        if config.verbose:
            print_error(escape(str(exc)))
        sys.exit(1)

    print_success(MSG_SUCCESS)
    if config.verbose:
        if not result.changed:
            print_info("Everything already existed; nothing was written.")
        print_summary_table(
            [(status, escape(path)) for status, path in result.rows()],
            title=escape(str(result.root)),
        )


if __name__ == "__main__":
    main()
