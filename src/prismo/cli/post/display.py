"""Display functions for post commands - pure functions for Rich output."""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from prismo.constants.status import SocialPlatform
from prismo.platforms import PlatformConstraints

from .params import PostValidationParams
from .service import ValidationReport


def show_constraints_table(
    console: Console,
    constraints: Mapping[SocialPlatform, PlatformConstraints],
) -> None:
    """Display the platform constraint table."""
    table = Table(title="Platform Constraints")
    table.add_column("Platform", style="cyan")
    table.add_column("Max text", style="yellow", justify="right")
    table.add_column("Max media", style="yellow", justify="right")
    table.add_column("Media types", style="white")
    table.add_column("Media required", style="white")
    table.add_column("Polls", style="dim")
    table.add_column("Links", style="dim")

    for limits in constraints.values():
        table.add_row(
            limits.display_name,
            f"{limits.max_text_length:,}",
            str(limits.max_media_count),
            ", ".join(sorted(t.value for t in limits.supported_media_types)),
            "yes" if limits.requires_media else "no",
            "yes" if limits.supports_polls else "no",
            "yes" if limits.supports_links else "no",
        )

    console.print(table)


def show_validation_config(console: Console, params: PostValidationParams) -> None:
    """Display what is being validated."""
    platforms = ", ".join(params.platforms) if params.platforms else "from post file"
    console.print(Panel(
        f"File: [cyan]{params.post_file}[/cyan]\n"
        f"Platforms: [yellow]{platforms}[/yellow]",
        title="Post Validation",
    ))


def show_validation_report(console: Console, report: ValidationReport) -> None:
    """Display violations per platform, or a success panel."""
    if report.is_valid:
        console.print(Panel(
            f"[bold green]Valid for {len(report.platforms)} platform(s)[/bold green]",
            border_style="green",
        ))
        return

    table = Table(title="Violations")
    table.add_column("Platform", style="cyan")
    table.add_column("Code", style="yellow")
    table.add_column("Message", style="white")

    for outcome in report.outcomes:
        for violation in outcome.violations:
            table.add_row(outcome.platform.value, violation.code.value, violation.message)

    console.print(table)
    console.print(Panel(
        f"[red]{len(report.outcomes)} of {len(report.platforms)} platform(s) rejected the post[/red]",
        border_style="red",
    ))

