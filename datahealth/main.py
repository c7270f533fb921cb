"""Entry point for the data health results service."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone

import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from datahealth.checks import CheckRegistry
from datahealth.config import settings
from datahealth.results import (
    ConsolidatedResult,
    ResultsError,
    ResultStore,
    clear_check_results,
)

console = Console()
logger = logging.getLogger(__name__)


def run_server() -> None:
    """Start the FastAPI server."""
    console.print(Panel.fit(
        f"[bold]Data Health API[/bold]\n"
        f"Bind:    {settings.api_host}:{settings.api_port}\n"
        f"Results: {settings.data_healthcheck_results_folder}\n"
        f"Checks:  {settings.data_healthcheck_checks_file}",
        border_style="green",
    ))
    uvicorn.run(
        "datahealth.api.server:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )


def show_latest(store: ResultStore, registry: CheckRegistry) -> int:
    """Print the latest consolidated report. Returns the exit code."""
    consolidated = ConsolidatedResult.load_latest(store, registry.check_ids())
    if consolidated is None:
        console.print("[yellow]No data health check results found[/yellow]")
        return 1

    ended = datetime.fromtimestamp(consolidated.run_end_time / 1000, tz=timezone.utc)
    style = "bold green" if consolidated.overall_success else "bold red"
    console.print(Panel(
        f"Overall: {'PASS' if consolidated.overall_success else 'FAIL'}\n"
        f"Run ended: {ended.isoformat()}",
        title="Data Health", style=style,
    ))

    table = Table("Check", "Result", "Failure")
    for check_id, result in sorted(consolidated.checks.items()):
        table.add_row(
            check_id,
            "[green]pass[/green]" if result.success else "[red]fail[/red]",
            result.failure_message,
        )
    console.print(table)
    return 0 if consolidated.overall_success else 2


def main() -> None:
    parser = argparse.ArgumentParser(description="Data health check results")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Start the API server")
    sub.add_parser("show", help="Show the latest consolidated results")
    clear_parser = sub.add_parser("clear", help="Delete the stored results of one check")
    clear_parser.add_argument("check_id", help="Id of the check to clear")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    if args.command == "serve":
        run_server()
        return
    if args.command not in ("show", "clear"):
        parser.print_help()
        sys.exit(1)

    try:
        store = ResultStore(settings.results_dir())
        if args.command == "show":
            sys.exit(show_latest(store, CheckRegistry(settings.checks_file())))
        clear_check_results(store, args.check_id)
        console.print(f"Cleared results for [bold]{args.check_id}[/bold]")
    except ResultsError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
