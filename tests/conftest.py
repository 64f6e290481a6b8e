from __future__ import annotations

from pathlib import Path

import pytest

from fo_app.core.config import Settings, get_settings


def write(path: Path, content: str | bytes = b"data") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        path.write_text(content)
    else:
        path.write_bytes(content)
    return path


def tree(root: Path) -> list[str]:
    """Relative paths of everything under root, for structure comparisons."""
    return sorted(str(p.relative_to(root)) for p in root.rglob("*"))


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(MAX_WORKERS=4, DRY_RUN_DEFAULT=True, PARALLEL_DEFAULT=True)


@pytest.fixture
def inbox(tmp_path: Path) -> Path:
    """a.pdf, b.png, c.xyz at the top level."""
    root = tmp_path / "inbox"
    root.mkdir()
    write(root / "a.pdf", b"%PDF-1.7 fake pdf bytes")
    write(root / "b.png", b"\x89PNG fake png bytes")
    write(root / "c.xyz", b"unknown")
    return root
