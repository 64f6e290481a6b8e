# src/fo_app/modules/organize/strategies/by_initial.py
from __future__ import annotations

from pathlib import Path

from fo_app.core.categories import DIGITS_FOLDER, OTHER_INITIAL_FOLDER

from .base import ClassifyStrategyBase


class ClassifyByInitialStrategy(ClassifyStrategyBase):
    def classify(self, path: Path) -> str | None:
        name = path.name
        if not name:
            return None
        first = name[0]
        if first.isdigit():
            return DIGITS_FOLDER
        if first.isalpha():
            return first.upper()
        return OTHER_INITIAL_FOLDER
