from __future__ import annotations

from pathlib import Path


class CategoryIsRoot(ValueError):
    """The category names the root folder itself (e.g. "." or "")."""


def ensure_within_root(candidate: Path, root: Path) -> Path:
    """
    Guardrail: resolve and ensure `candidate` is under `root`.
    """
    candidate = candidate.resolve()
    root = root.resolve()
    if root not in candidate.parents and candidate != root:
        raise ValueError(f"{candidate} is outside of root {root}")
    return candidate


def category_dir(root: Path, category: str) -> Path:
    """
    Destination folder for `category` directly under `root`. Nested names
    such as "2024/05" are allowed; anything escaping `root` is refused.
    """
    target = ensure_within_root(root / category, root)
    if target == root.resolve():
        raise CategoryIsRoot(f"category {category!r} resolves to the root itself")
    return target
