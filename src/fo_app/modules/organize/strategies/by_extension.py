# src/fo_app/modules/organize/strategies/by_extension.py
from __future__ import annotations

from pathlib import Path

from .base import ClassifyStrategyBase


class ClassifyByExtensionStrategy(ClassifyStrategyBase):
    """First category (in table order) listing the file's extension wins."""

    def __init__(self, categories: dict[str, list[str]]) -> None:
        self.categories = categories

    @staticmethod
    def extension_of(name: str) -> str | None:
        # text after the last '.'; no dot means no extension
        if "." not in name:
            return None
        return name.rsplit(".", 1)[1]

    def classify(self, path: Path) -> str | None:
        ext = self.extension_of(path.name)
        if ext is None:
            return None
        for category, exts in self.categories.items():
            if ext in exts:
                return category
        return None

    def why_skipped(self, path: Path) -> str:
        return "no_extension" if self.extension_of(path.name) is None else "unmatched"
