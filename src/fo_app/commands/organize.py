# src/fo_app/commands/organize.py
"""
`fo organize`: copy the files of one folder into category sub-folders.

Missing inputs are prompted for. The plan is always shown first; a plan-only
run offers to apply it straight away.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from fo_app.commands.common import (
    parse_categories,
    prompt_existing_dir,
    resolve_dry_run,
)
from fo_app.core.config import get_settings
from fo_app.core.rich_progress import make_phase_progress
from fo_app.modules.organize.schemas import (
    MethodKind,
    OrganizeConfiguration,
    OrganizeReport,
    build_method,
)
from fo_app.modules.organize.service import Organizer

__all__ = ["OrganizeRunner", "register"]


class OrganizeRunner:
    def __init__(
        self,
        root: Path,
        configuration: OrganizeConfiguration,
        dry_run: bool,
        console: Console | None = None,
    ) -> None:
        self.root = root
        self.configuration = configuration
        self.dry_run = dry_run
        self.console = console or Console()
        self.organizer = Organizer(str(root), configuration)

    def _print_plan(self, report: OrganizeReport) -> None:
        typer.echo(
            f"[PLAN] method={report.method.value} copies={len(report.placed)} "
            f"skipped={len(report.skipped)}"
        )
        if not report.placed:
            self.console.print("Nothing to organize.", style="dim")
            return
        table = Table("File", "Category", "Destination")
        for it in report.placed:
            table.add_row(Path(it.src).name, it.category, it.dst)
        self.console.print(table)

    def _print_failures(self, report: OrganizeReport) -> None:
        if report.ok:
            return
        self.console.print("[bold yellow]Skipped/failed copies:[/bold yellow]")
        for it in report.failures:
            self.console.print(f"{it.src} -> {it.dst}  [yellow]SKIP[/yellow] ({it.reason})")

    def _apply(self) -> OrganizeReport:
        progress, reporter = make_phase_progress(self.console)
        with progress:
            report = self.organizer.execute(reporter=reporter)
        typer.echo(
            f"[APPLY] method={report.method.value} copied={len(report.placed)} "
            f"failed={len(report.failures)}"
        )
        self._print_failures(report)
        return report

    def run(self) -> OrganizeReport:
        planned = self.organizer.execute(dry_run=True)
        self._print_plan(planned)

        if not self.dry_run:
            return self._apply()
        if planned.placed and typer.confirm("Apply these copies now?", default=False):
            return self._apply()
        return planned


def organize_cmd(
    root: Path | None = typer.Argument(
        None, exists=False, file_okay=False, dir_okay=True
    ),
    method: MethodKind | None = typer.Option(
        None, "--method", "-m", help="extension, date, alphabetical or size"
    ),
    category: list[str] = typer.Option(
        [],
        "--category",
        "-c",
        help="NAME=ext1,ext2 (extension method). Repeat flag. Default: built-in table.",
    ),
    parallel: bool | None = typer.Option(
        None, "--parallel/--sequential", help="One worker per category"
    ),
    apply: bool = typer.Option(False, "--apply", help="Execute copies"),
    plan: bool = typer.Option(False, "--plan", help="Plan only (dry-run)"),
):
    settings = get_settings()

    root = prompt_existing_dir(root, "root")

    if method is None and (category or apply or plan):
        method = MethodKind.extension
    elif method is None:
        choice = (
            typer.prompt(
                "method (extension/date/alphabetical/size)", default="extension"
            )
            .strip()
            .lower()
        )
        try:
            method = MethodKind(choice)
        except ValueError:
            raise typer.BadParameter(
                "method must be one of: extension, date, alphabetical, size"
            ) from None

    if category and method != MethodKind.extension:
        raise typer.BadParameter("--category only applies to --method extension")

    if parallel is None:
        parallel = settings.PARALLEL_DEFAULT

    if not apply and not plan:
        mode = typer.prompt("option (plan/apply)", default="plan").strip().lower()
        if mode not in {"plan", "apply"}:
            raise typer.BadParameter("option must be 'plan' or 'apply'")
        plan = mode == "plan"
        apply = mode == "apply"

    dry_run = resolve_dry_run(apply, plan)
    configuration = OrganizeConfiguration.custom(
        build_method(method, parse_categories(category) or None),
        run_in_parallel=parallel,
    )
    OrganizeRunner(root, configuration, dry_run).run()


def register(app: typer.Typer) -> None:
    """Attach the organize command to the given Typer app."""
    app.command(
        "organize", help="Copy a folder's files into category sub-folders."
    )(organize_cmd)
