# src/fo_app/modules/organize/strategies/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from fo_app.core.logging import get_logger
from fo_app.core.progress import ProgressReporter

log = get_logger(__name__)


class ClassifyStrategyBase(ABC):
    """Shared scan for classification strategies: direct files only, best effort."""

    def iter_candidates(
        self, root: Path, reporter: ProgressReporter | None = None
    ) -> list[Path]:
        if reporter:
            reporter.start("scan", total=None, text="Listing files…")
        try:
            entries = sorted(root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            log.warning("Cannot read directory %s (%s); nothing to organize", root, e)
            entries = []

        files: list[Path] = []
        for p in entries:
            # sub-directories (including category folders) are never candidates
            try:
                is_file = p.is_file()
            except OSError as e:
                log.warning("Cannot stat %s (%s); skipping", p, e)
                continue
            if is_file:
                files.append(p)
                if reporter:
                    reporter.update("scan", 1, text=p.name)
        if reporter:
            reporter.end("scan")
        return files

    @abstractmethod
    def classify(self, path: Path) -> str | None:
        """Return the category (folder name relative to root) or None."""
        raise NotImplementedError

    def why_skipped(self, path: Path) -> str:
        return "unclassified"
