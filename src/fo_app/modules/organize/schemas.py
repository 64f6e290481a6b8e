# src/fo_app/modules/organize/schemas.py
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fo_app.core.categories import default_extension_table


class MethodKind(str, Enum):
    extension = "extension"
    date = "date"
    alphabetical = "alphabetical"
    size = "size"


# ----------------------
# Classification methods
# ----------------------
class ByExtension(BaseModel):
    kind: Literal["extension"] = "extension"
    categories: dict[str, list[str]] = Field(
        default_factory=default_extension_table,
        description=(
            "Category name -> extensions, without the leading dot. Categories are "
            "tried in order and the first one listing the extension wins."
        ),
        examples=[{"Documents": ["pdf", "txt"], "Images": ["png", "jpg"]}],
    )

    @field_validator("categories")
    @classmethod
    def _normalize_extensions(cls, table: dict[str, list[str]]) -> dict[str, list[str]]:
        normalized: dict[str, list[str]] = {}
        for name, exts in table.items():
            ordered: list[str] = []
            for ext in exts:
                ext = ext[1:] if ext.startswith(".") else ext
                if ext not in ordered:
                    ordered.append(ext)
            normalized[name] = ordered
        return normalized


class ByDate(BaseModel):
    """Folders YYYY/MM from the last-modified time."""

    kind: Literal["date"] = "date"


class ByAlphabeticalInitial(BaseModel):
    """One folder per upper-cased initial; digits share '0-9', the rest '#'."""

    kind: Literal["alphabetical"] = "alphabetical"


class BySize(BaseModel):
    """Small / Medium / Large / Huge buckets."""

    kind: Literal["size"] = "size"


ClassificationMethod = Annotated[
    ByExtension | ByDate | ByAlphabeticalInitial | BySize,
    Field(discriminator="kind"),
]


def build_method(
    kind: MethodKind, categories: dict[str, list[str]] | None = None
) -> ByExtension | ByDate | ByAlphabeticalInitial | BySize:
    """Build a method from its kind; `categories` only applies to extension."""
    if kind == MethodKind.extension:
        return ByExtension(categories=categories) if categories else ByExtension()
    if kind == MethodKind.date:
        return ByDate()
    if kind == MethodKind.alphabetical:
        return ByAlphabeticalInitial()
    return BySize()


# ----------------------
# Configuration
# ----------------------
class OrganizeConfiguration(BaseModel):
    method: ClassificationMethod = Field(default_factory=ByExtension)
    run_in_parallel: bool = Field(
        True,
        description="Place each category on its own worker thread.",
    )

    model_config = ConfigDict(validate_assignment=True)

    @classmethod
    def default(cls) -> OrganizeConfiguration:
        return cls(method=ByExtension(categories=default_extension_table()))

    @classmethod
    def custom(
        cls,
        method: ByExtension | ByDate | ByAlphabeticalInitial | BySize,
        run_in_parallel: bool = True,
    ) -> OrganizeConfiguration:
        return cls(method=method, run_in_parallel=run_in_parallel)

    def set_method(
        self, method: ByExtension | ByDate | ByAlphabeticalInitial | BySize
    ) -> None:
        self.method = method

    def set_parallel(self, parallel: bool) -> None:
        self.run_in_parallel = parallel


# ----------------------
# Requests / reports
# ----------------------
class PlacedItem(BaseModel):
    src: str = Field(..., examples=["/data/inbox/report.pdf"])
    dst: str = Field(..., examples=["/data/inbox/Documents/report.pdf"])
    category: str = Field(..., examples=["Documents"])


class SkippedItem(BaseModel):
    src: str = Field(..., examples=["/data/inbox/README"])
    reason: str = Field(..., examples=["no_extension"])


class FailedItem(BaseModel):
    src: str = Field(..., examples=["/data/inbox/locked.pdf"])
    dst: str = Field(..., examples=["/data/inbox/Documents/locked.pdf"])
    reason: str = Field(..., examples=["copy_error:PermissionError"])


class OrganizeRequest(BaseModel):
    path: str = Field(
        ...,
        description="Directory whose direct files are organized (not recursive).",
        examples=["/data/inbox"],
    )
    configuration: OrganizeConfiguration | None = Field(
        None,
        description="Defaults to the built-in extension table, parallel on.",
    )
    dry_run: bool | None = Field(
        None,
        description="If true, only report planned copies. Defaults to server settings.",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "path": "/data/inbox",
                    "configuration": {
                        "method": {
                            "kind": "extension",
                            "categories": {"Documents": ["pdf"], "Images": ["png"]},
                        },
                        "run_in_parallel": True,
                    },
                    "dry_run": True,
                }
            ]
        }
    )


class OrganizeReport(BaseModel):
    path: str
    method: MethodKind
    dry_run: bool
    placed: list[PlacedItem] = Field(default_factory=list)
    skipped: list[SkippedItem] = Field(default_factory=list)
    failures: list[FailedItem] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
