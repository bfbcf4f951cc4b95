"""Command line interface for make-ca.

``main`` returns the process exit code instead of exiting, so the commands
can be driven from tests; the console script and ``python -m make_ca`` pass
it to ``sys.exit``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
import traceback
from pathlib import Path
from typing import Sequence

from rich.markup import escape

from . import __version__
from .config import Config
from .errors import ProjectAlreadyInitializedError, ProjectNotInitializedError, UserError
from .scaffolder.generator import EntityGenerator
from .scaffolder.layers import GenerateOptions
from .scaffolder.naming import validate_entity_name
from .scaffolder.project import ProjectInitializer, is_project_initialized
from .utils import (
    console,
    ensure_dir,
    is_directory_empty,
    print_command_hint,
    print_error,
    print_info,
    print_step,
    print_success,
    print_warning,
)

COMMANDS = frozenset({"init", "generate", "g"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="make-ca",
        description="Scaffold clean architecture layers for NestJS projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  make-ca init --path ./my-api\n"
            "  make-ca generate user-profile\n"
            "  make-ca g order --only-domain\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print tracebacks for unexpected errors",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init", help="Initialize a new clean architecture project"
    )
    init_parser.add_argument(
        "-p", "--path",
        type=Path,
        default=None,
        help="Path where the project should be initialized (default: ./my-clean-project)",
    )

    generate_parser = subparsers.add_parser(
        "generate",
        aliases=["g"],
        help="Generate entity layers (e.g. make-ca generate user)",
    )
    generate_parser.add_argument("entity", help="Entity name in kebab-case")
    for layer in ("domain", "infrastructure", "application"):
        generate_parser.add_argument(
            f"--skip-{layer}",
            action="store_true",
            help=f"Skip generating the {layer} layer",
        )
    for layer in ("domain", "infrastructure", "application"):
        generate_parser.add_argument(
            f"--only-{layer}",
            action="store_true",
            help=f"Generate only the {layer} layer",
        )

    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _report_unexpected(prefix: str, exc: BaseException, verbose: bool) -> None:
    print_error(f"{prefix}: {exc}")
    if verbose:
        console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")


def _report_user_error(exc: UserError) -> None:
    print_error(str(exc))
    if exc.hint:
        print_command_hint("Run", exc.hint)


async def _handle_init(args: argparse.Namespace, config: Config) -> int:
    project_path = (args.path or Path.cwd() / config.default_project_dir).resolve()

    try:
        ensure_dir(project_path)
    except OSError as exc:
        print_error(f"Failed to create directory: {project_path}")
        print_error(str(exc))
        return 1
    print_step(f"Using directory: {project_path}")

    try:
        if not is_directory_empty(project_path):
            print_warning(f"Warning: The directory {project_path} is not empty.")
            print_warning("Some files might be overwritten.")

        initializer = ProjectInitializer(config)
        with console.status(f"Initializing a new clean architecture project in {escape(str(project_path))}..."):
            await initializer.initialize(project_path)
    except ProjectAlreadyInitializedError as exc:
        print_warning(str(exc))
        print_command_hint("You can now use", exc.hint)
        return 0
    except Exception as exc:
        _report_unexpected("Error initializing project", exc, args.verbose)
        return 1

    print_success("Project initialized successfully!")
    print_command_hint("You can now use", "make-ca generate <entity>")
    return 0


async def _handle_generate(args: argparse.Namespace, config: Config) -> int:
    entity_name = args.entity.strip().lower()
    project_root = Path.cwd()

    try:
        validate_entity_name(entity_name)
        if not is_project_initialized(project_root):
            raise ProjectNotInitializedError(str(project_root))

        options = GenerateOptions(
            skip_domain=args.skip_domain,
            skip_infrastructure=args.skip_infrastructure,
            skip_application=args.skip_application,
            only_domain=args.only_domain,
            only_infrastructure=args.only_infrastructure,
            only_application=args.only_application,
        )
        print_step(f"Generating entity: {entity_name} in {project_root}")
        report = await EntityGenerator(project_root, config).generate(entity_name, options)
    except UserError as exc:
        _report_user_error(exc)
        return 1
    except Exception as exc:
        _report_unexpected("Error generating entity", exc, args.verbose)
        return 1

    print_success(f"Entity '{entity_name}' generated successfully!")
    print_info(f"{len(report.files)} files written")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``make-ca``."""
    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not arguments:
        parser.print_help()
        return 0

    command = next((arg for arg in arguments if not arg.startswith("-")), None)
    if command is not None and command not in COMMANDS:
        print_error(f"Invalid command: {' '.join(arguments)}")
        console.print("See [blue]--help[/blue] for a list of available commands.")
        return 1

    args = parser.parse_args(arguments)
    config = Config.from_env()

    if args.command == "init":
        return asyncio.run(_handle_init(args, config))
    return asyncio.run(_handle_generate(args, config))


if __name__ == "__main__":
    sys.exit(main())
