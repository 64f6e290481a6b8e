# src/fo_app/modules/organize/strategies/by_size.py
from __future__ import annotations

from pathlib import Path

from fo_app.core.categories import SIZE_BUCKETS

from .base import ClassifyStrategyBase


class ClassifyBySizeStrategy(ClassifyStrategyBase):
    """Bucket files by byte size, see SIZE_BUCKETS."""

    buckets = SIZE_BUCKETS

    def classify(self, path: Path) -> str | None:
        try:
            size = path.stat().st_size
        except OSError:
            return None
        return self.bucket_for(size)

    @classmethod
    def bucket_for(cls, size: int) -> str:
        for limit, name in cls.buckets:
            if limit is None or size < limit:
                return name
        return cls.buckets[-1][1]

    def why_skipped(self, path: Path) -> str:
        return "missing"
