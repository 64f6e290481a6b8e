# src/fo_app/core/categories.py
from __future__ import annotations

# Bare extensions, no leading dot. Matching is case-sensitive.
DEFAULT_EXTENSION_TABLE: dict[str, tuple[str, ...]] = {
    "Documents": ("pdf", "txt", "docs"),
    "Images": ("png", "jpg", "jpeg"),
    "Audios": ("mp3", "wav", "flac"),
    "Videos": ("mp4", "mov", "avi"),
    "Sheets": ("csv", "xlsx", "ods"),
}

KIB = 1024
MIB = 1024 * KIB
GIB = 1024 * MIB

# (upper bound exclusive, folder); the last bucket catches everything else
SIZE_BUCKETS: tuple[tuple[int | None, str], ...] = (
    (MIB, "Small"),
    (100 * MIB, "Medium"),
    (GIB, "Large"),
    (None, "Huge"),
)

DIGITS_FOLDER = "0-9"
OTHER_INITIAL_FOLDER = "#"


def default_extension_table() -> dict[str, list[str]]:
    """Fresh, caller-owned copy of the default category table."""
    return {name: list(exts) for name, exts in DEFAULT_EXTENSION_TABLE.items()}
