"""Post CLI commands - thin wrappers orchestrating params, validation, display, and service."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from prismo.core.types import Failure
from prismo.platforms import PLATFORM_CONSTRAINTS

from ..core.console import console, print_failure
from .display import show_constraints_table, show_validation_config, show_validation_report
from .params import PostValidationParams
from .service import PostValidationService
from .validators import validate_post_validation_params

# Exit codes
EXIT_VALID = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def validate_post(
    post_file: Path = typer.Argument(..., help="JSON file with post content or a create-post request"),
    platform: Optional[List[str]] = typer.Option(
        None, "--platform", "-p", help="Target platform (repeatable or comma-separated)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print outcomes as JSON"),
) -> None:
    """Validate a post against each target platform's content rules.

    Exits 0 when the post is valid everywhere, 1 when any platform rejects
    it, and 2 when the file or the platform list cannot be used.
    """
    # Build immutable params from CLI args
    params = PostValidationParams.from_cli(
        post_file=post_file,
        platforms=platform,
        as_json=as_json,
    )

    # Validate params
    validation = validate_post_validation_params(params)
    if isinstance(validation, Failure):
        print_failure(validation, as_json=params.as_json)
        raise typer.Exit(EXIT_ERROR)

    if not params.as_json:
        show_validation_config(console, params)

    service = PostValidationService()
    result = service.validate(params.post_file, params.platforms)

    if isinstance(result, Failure):
        print_failure(result, as_json=params.as_json)
        raise typer.Exit(EXIT_ERROR)

    report = result.value
    if params.as_json:
        typer.echo(json.dumps([o.to_dict() for o in report.outcomes], indent=2))
    else:
        show_validation_report(console, report)

    if not report.is_valid:
        raise typer.Exit(EXIT_VIOLATIONS)


def show_constraints() -> None:
    """Show text, media and feature limits for every platform."""
    show_constraints_table(console, PLATFORM_CONSTRAINTS)
