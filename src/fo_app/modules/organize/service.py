# src/fo_app/modules/organize/service.py
from __future__ import annotations

import os
import shutil
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from fo_app.core.config import Settings, get_settings
from fo_app.core.errors import InvalidInput
from fo_app.core.logging import get_logger
from fo_app.core.paths import CategoryIsRoot, category_dir
from fo_app.core.progress import ProgressReporter

from .schemas import (
    ByAlphabeticalInitial,
    ByDate,
    ByExtension,
    BySize,
    FailedItem,
    MethodKind,
    OrganizeConfiguration,
    OrganizeReport,
    OrganizeRequest,
    PlacedItem,
    SkippedItem,
)
from .strategies.base import ClassifyStrategyBase
from .strategies.by_date import ClassifyByDateStrategy
from .strategies.by_extension import ClassifyByExtensionStrategy
from .strategies.by_initial import ClassifyByInitialStrategy
from .strategies.by_size import ClassifyBySizeStrategy

log = get_logger(__name__)

GroupResult = tuple[list[PlacedItem], list[SkippedItem], list[FailedItem]]


class Organizer:
    """
    Copies the direct files of `path` into `path/<category>/` folders.

    Only an empty path is fatal. Every per-file problem (unreadable or vanished source,
    folder creation, copy) is logged, recorded in the report and skipped.
    `execute` may be called repeatedly; each call re-scans the directory.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        configuration: OrganizeConfiguration | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.path = path
        self.configuration = (
            configuration or OrganizeConfiguration.default()
        ).model_copy(deep=True)
        self.settings = settings or get_settings()

    def set_path(self, path: str | os.PathLike[str]) -> None:
        self.path = path

    def set_configuration(self, configuration: OrganizeConfiguration) -> None:
        self.configuration = configuration.model_copy(deep=True)

    # ---- helpers ----------------------------------------------------------------

    def _root(self) -> Path:
        if not self.path or not os.fspath(self.path):
            raise InvalidInput("path must not be empty")
        return Path(self.path).expanduser().resolve()

    @staticmethod
    def _select(
        method: ByExtension | ByDate | ByAlphabeticalInitial | BySize,
    ) -> ClassifyStrategyBase:
        if isinstance(method, ByExtension):
            return ClassifyByExtensionStrategy(method.categories)
        if isinstance(method, ByDate):
            return ClassifyByDateStrategy()
        if isinstance(method, ByAlphabeticalInitial):
            return ClassifyByInitialStrategy()
        if isinstance(method, BySize):
            return ClassifyBySizeStrategy()
        raise TypeError(f"unsupported classification method: {method!r}")

    def _classify(
        self, root: Path, reporter: ProgressReporter | None = None
    ) -> tuple[dict[str, list[Path]], list[SkippedItem]]:
        strategy = self._select(self.configuration.method)
        files = strategy.iter_candidates(root, reporter=reporter)

        groups: dict[str, list[Path]] = {}
        skipped: list[SkippedItem] = []
        if reporter:
            reporter.start("classify", total=len(files), text="Classifying…")
        for src in files:
            category = strategy.classify(src)
            if category is None:
                skipped.append(SkippedItem(src=str(src), reason=strategy.why_skipped(src)))
            else:
                groups.setdefault(category, []).append(src)
            if reporter:
                reporter.update("classify", 1, text=src.name)
        if reporter:
            reporter.end("classify")
        return groups, skipped

    @staticmethod
    def _destination(root: Path, category: str) -> tuple[Path | None, str | None]:
        """Destination folder, or None and the skip reason."""
        try:
            return category_dir(root, category), None
        except CategoryIsRoot as e:
            log.warning("Refusing category %r: %s", category, e)
            return None, "invalid_category"
        except ValueError as e:
            log.warning("Refusing category %r: %s", category, e)
            return None, "outside_root"

    def _plan_group(self, root: Path, category: str, files: list[Path]) -> GroupResult:
        dst_dir, reason = self._destination(root, category)
        if dst_dir is None:
            return [], [SkippedItem(src=str(p), reason=reason) for p in files], []
        placed = [
            PlacedItem(src=str(src), dst=str(dst_dir / src.name), category=category)
            for src in files
        ]
        return placed, [], []

    def _place_group(
        self,
        root: Path,
        category: str,
        files: list[Path],
        reporter: ProgressReporter | None = None,
    ) -> GroupResult:
        dst_dir, reason = self._destination(root, category)
        if dst_dir is None:
            if reporter:
                reporter.update("copy", len(files), text=category)
            return [], [SkippedItem(src=str(p), reason=reason) for p in files], []

        placed: list[PlacedItem] = []
        skipped: list[SkippedItem] = []
        failures: list[FailedItem] = []
        for src in files:
            dst = dst_dir / src.name
            if reporter:
                reporter.update("copy", 1, text=f"{src.name} -> {category}")
            try:
                dst_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                log.warning("Could not create %s for %s: %s", dst_dir, src.name, e)
                failures.append(
                    FailedItem(
                        src=str(src), dst=str(dst), reason=f"mkdir_error:{e.__class__.__name__}"
                    )
                )
                continue

            try:
                present = src.exists()
            except OSError as e:
                log.warning("Could not stat %s before copying: %s", src, e)
                failures.append(
                    FailedItem(
                        src=str(src), dst=str(dst), reason=f"stat_error:{e.__class__.__name__}"
                    )
                )
                continue
            if not present:
                log.warning("%s disappeared before it could be copied; skipping", src)
                skipped.append(SkippedItem(src=str(src), reason="missing"))
                continue

            try:
                shutil.copy2(src, dst)
            except OSError as e:
                log.warning("Could not copy %s -> %s: %s", src, dst, e)
                failures.append(
                    FailedItem(
                        src=str(src), dst=str(dst), reason=f"copy_error:{e.__class__.__name__}"
                    )
                )
                continue
            placed.append(PlacedItem(src=str(src), dst=str(dst), category=category))
        return placed, skipped, failures

    def _place_all(
        self,
        root: Path,
        groups: dict[str, list[Path]],
        reporter: ProgressReporter | None = None,
    ) -> list[GroupResult]:
        if not (self.configuration.run_in_parallel and len(groups) > 1):
            return [
                self._place_group(root, category, files, reporter)
                for category, files in groups.items()
            ]

        # one task per category; each task owns its own file list
        results: list[GroupResult] = []
        workers = min(len(groups), self.settings.worker_count())
        with ThreadPoolExecutor(max_workers=workers) as ex:
            futs = {
                ex.submit(self._place_group, root, category, files, reporter): category
                for category, files in groups.items()
            }
            for fut in as_completed(futs):
                results.append(fut.result())
        return results

    # ---- public API -------------------------------------------------------------

    def plan(self, reporter: ProgressReporter | None = None) -> list[PlacedItem]:
        """Placements `execute` would perform, without creating or copying anything."""
        root = self._root()
        groups, _ = self._classify(root, reporter=reporter)
        placed: list[PlacedItem] = []
        for category, files in groups.items():
            placed.extend(self._plan_group(root, category, files)[0])
        return sorted(placed, key=lambda it: it.src)

    def execute(
        self, reporter: ProgressReporter | None = None, dry_run: bool = False
    ) -> OrganizeReport:
        root = self._root()
        groups, skipped = self._classify(root, reporter=reporter)

        if dry_run:
            results = [
                self._plan_group(root, category, files)
                for category, files in groups.items()
            ]
        else:
            if reporter:
                total = sum(len(files) for files in groups.values())
                reporter.start("copy", total=total, text="Copying…")
            results = self._place_all(root, groups, reporter=reporter)
            if reporter:
                reporter.end("copy")

        placed: list[PlacedItem] = []
        failures: list[FailedItem] = []
        for group_placed, group_skipped, group_failures in results:
            placed.extend(group_placed)
            skipped.extend(group_skipped)
            failures.extend(group_failures)

        report = OrganizeReport(
            path=str(root),
            method=MethodKind(self.configuration.method.kind),
            dry_run=dry_run,
            placed=sorted(placed, key=lambda it: it.src),
            skipped=sorted(skipped, key=lambda it: it.src),
            failures=sorted(failures, key=lambda it: it.src),
        )
        log.info(
            "Organized %s by %s: %d copied, %d skipped, %d failed%s",
            root,
            report.method.value,
            len(report.placed),
            len(report.skipped),
            len(report.failures),
            " (dry run)" if dry_run else "",
        )
        return report


def organize(req: OrganizeRequest, settings: Settings | None = None) -> OrganizeReport:
    """Request-level entry point shared by the router."""
    settings = settings or get_settings()
    configuration = req.configuration or OrganizeConfiguration.default()
    dry_run = settings.DRY_RUN_DEFAULT if req.dry_run is None else req.dry_run
    return Organizer(req.path, configuration, settings=settings).execute(dry_run=dry_run)
