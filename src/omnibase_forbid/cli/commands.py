# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""
Forbidden Identifier Linter CLI Commands.

Usage:
    omnibase-forbid check [OPTIONS] [PATTERN ...] -- [PATH ...]
    omnibase-forbid check [OPTIONS] [PATH ...]
    omnibase-forbid defaults

Positional arguments before ``--`` are patterns, those after it are paths.
Without ``--`` every positional argument is a path and the patterns come
from the configuration file, or the built-in defaults.

Exit codes:
    0: No issues, or issues without ``--set-exit-status``
    1: Issues found and ``--set-exit-status`` given
    2: Configuration or pattern error
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from omnibase_forbid.errors import ForbidError
from omnibase_forbid.models.model_issue import Issue
from omnibase_forbid.models.model_linter_config import ModelLinterConfig
from omnibase_forbid.runtime.config_loader import (
    load_linter_config,
    resolve_config_path,
)
from omnibase_forbid.runtime.source_loader import load_sources
from omnibase_forbid.validation.default_patterns import DEFAULT_PATTERNS
from omnibase_forbid.validation.forbidden_identifier_linter import (
    ForbiddenIdentifierLinter,
)

console = Console()

EXIT_ISSUES = 1
EXIT_ERROR = 2

_PATHS_META_KEY = "omnibase_forbid.paths"


class CommandWithPathSeparator(click.Command):
    """Command splitting its positional arguments at ``--``.

    Arguments after the separator are stashed in ``ctx.meta`` before click
    parses the rest, since click drops the separator itself.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if "--" in args:
            index = args.index("--")
            ctx.meta[_PATHS_META_KEY] = tuple(args[index + 1 :])
            args = args[:index]
        return super().parse_args(ctx, args)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Forbidden identifier linter."""
    if verbose:
        logging.getLogger("omnibase_forbid").setLevel(logging.DEBUG)


@cli.command("check", cls=CommandWithPathSeparator)
@click.argument("arguments", nargs=-1)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Configuration file (default: OMNIBASE_FORBID_CONFIG or .forbid.yaml)",
)
@click.option(
    "--set-exit-status",
    is_flag=True,
    help="Exit with status 1 when issues are found",
)
@click.option(
    "--tests/--no-tests",
    "include_tests",
    default=None,
    help="Analyze test modules (default: from config, else yes)",
)
@click.option(
    "--exclude-examples/--no-exclude-examples",
    "exclude_doc_examples",
    default=None,
    help="Skip documentation example functions (default: from config, else yes)",
)
@click.option(
    "--analyze-types/--no-analyze-types",
    "analyze_types",
    default=None,
    help="Resolve imports to canonical paths (default: from config, else yes)",
)
@click.option(
    "--ignore-allow-directives",
    is_flag=True,
    default=None,
    help="Report matches even when an '# allow:' comment names them",
)
@click.option("--json", "as_json", is_flag=True, help="Emit issues as JSON")
@click.pass_context
def check_cmd(
    ctx: click.Context,
    arguments: tuple[str, ...],
    config_path: Path | None,
    set_exit_status: bool,
    include_tests: bool | None,
    exclude_doc_examples: bool | None,
    analyze_types: bool | None,
    ignore_allow_directives: bool | None,
    as_json: bool,
) -> None:
    """Report uses of forbidden identifiers."""
    separated: tuple[str, ...] | None = ctx.meta.get(_PATHS_META_KEY)
    if separated is None:
        patterns: tuple[str, ...] = ()
        paths = arguments
    else:
        patterns = arguments
        paths = separated

    try:
        config = _effective_config(
            config_path,
            include_tests=include_tests,
            exclude_doc_examples=exclude_doc_examples,
            analyze_types=analyze_types,
            ignore_allow_directives=ignore_allow_directives or None,
        )
        linter = ForbiddenIdentifierLinter(patterns, config=config)
    except ForbidError as e:
        click.echo(f"Error: {e.message}", err=True)
        raise SystemExit(EXIT_ERROR) from e

    units = load_sources(
        [Path(path) for path in paths or (".",)],
        include_tests=config.include_tests,
    )
    issues = linter.run(units)

    if as_json:
        click.echo(json.dumps([issue.to_dict() for issue in issues], indent=2))
    else:
        _print_issues(issues)

    if issues and set_exit_status:
        raise SystemExit(EXIT_ISSUES)
    raise SystemExit(0)


@cli.command("defaults")
def defaults_cmd() -> None:
    """Print the built-in pattern set."""
    for pattern in DEFAULT_PATTERNS:
        console.print(escape(pattern), soft_wrap=True, highlight=False)


def _effective_config(
    config_path: Path | None, **overrides: bool | None
) -> ModelLinterConfig:
    """Load the configuration file, then apply command-line overrides."""
    resolved = resolve_config_path(config_path)
    config = (
        load_linter_config(resolved) if resolved is not None else ModelLinterConfig()
    )
    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        config = config.model_copy(update=updates)
    return config


def _print_issues(issues: list[Issue]) -> None:
    """Print issues one per line with rich formatting."""
    for issue in issues:
        console.print(
            f"[red]{escape(str(issue))}[/red]", soft_wrap=True, highlight=False
        )
    if issues:
        console.print(f"[bold red]{len(issues)} issue(s) found[/bold red]")
    else:
        console.print("[bold green]No forbidden identifiers found[/bold green]")


def main() -> None:
    """Console script entry point."""
    logging.basicConfig(level=logging.WARNING)
    cli()


__all__: list[str] = ["CommandWithPathSeparator", "cli", "main"]


if __name__ == "__main__":
    main()
