# src/fo_app/modules/organize/strategies/by_date.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .base import ClassifyStrategyBase


class ClassifyByDateStrategy(ClassifyStrategyBase):
    """Classify into YYYY/MM based on the file's last-modified time."""

    def classify(self, path: Path) -> str | None:
        dt = self._fs_datetime(path)
        if dt is None:
            return None
        return f"{dt.year:04d}/{dt.month:02d}"

    @staticmethod
    def _fs_datetime(p: Path) -> datetime | None:
        try:
            return datetime.fromtimestamp(p.stat().st_mtime)
        except OSError:
            return None

    def why_skipped(self, path: Path) -> str:
        return "missing"
