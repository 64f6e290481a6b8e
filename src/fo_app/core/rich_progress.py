# src/fo_app/core/rich_progress.py
from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

from fo_app.core.progress import Phase, ProgressReporter


class RichPhaseProgressReporter(ProgressReporter):
    """Maps organizer phases (scan/classify/copy) to Rich tasks."""

    labels = {
        "scan": "Scanning",
        "classify": "Classifying",
        "copy": "Copying",
    }

    def __init__(self, progress: Progress) -> None:
        self.progress = progress
        self.tasks: dict[str, int] = {}
        self.totals: dict[str, int | None] = {}

    def start(
        self, phase: Phase, total: int | None = None, text: str | None = None
    ) -> None:
        label = self.labels.get(phase, str(phase).title())
        task_id = self.progress.add_task(label, total=total, detail=(text or ""))
        self.tasks[str(phase)] = task_id
        self.totals[str(phase)] = total

    def update(self, phase: Phase, advance: int = 1, text: str | None = None) -> None:
        task_id = self.tasks.get(str(phase))
        if task_id is None:
            return
        if text is not None:
            self.progress.update(task_id, advance=advance, detail=text)
        else:
            self.progress.update(task_id, advance=advance)

    def end(self, phase: Phase) -> None:
        task_id = self.tasks.get(str(phase))
        if task_id is None:
            return
        total = self.totals.get(str(phase))
        if total is None:
            self.progress.update(task_id, visible=False, detail="")
        else:
            self.progress.update(task_id, completed=total, detail="")


def make_phase_progress(console: Console) -> tuple[Progress, RichPhaseProgressReporter]:
    """Standardized Rich progress layout + reporter instance."""
    progress = Progress(
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TextColumn("•"),
        TimeRemainingColumn(),
        TextColumn("• {task.fields[detail]}"),
        console=console,
    )
    return progress, RichPhaseProgressReporter(progress)
