# src/fo_app/modules/organize/router.py
from __future__ import annotations

from fastapi import APIRouter

from fo_app.api.deps import SettingsDep
from fo_app.core.errors import to_http

from . import service
from .schemas import OrganizeReport, OrganizeRequest

router = APIRouter(prefix="/organize", tags=["organize"])


@router.post(
    "/plan",
    response_model=OrganizeReport,
    summary="Plan copies into category folders",
    description="Scan the directory (non-recursive) and report where each file would be copied.",
)
def plan_endpoint(req: OrganizeRequest, settings: SettingsDep):
    try:
        return service.organize(req.model_copy(update={"dry_run": True}), settings)
    except Exception as err:
        raise to_http(err) from err


@router.post(
    "/apply",
    response_model=OrganizeReport,
    summary="Copy files into category folders",
    description=(
        "Organize the directory. Per-file failures are listed in the report; "
        "only an empty path is rejected. Respects dry_run when given."
    ),
)
def apply_endpoint(req: OrganizeRequest, settings: SettingsDep):
    try:
        if req.dry_run is None:
            req = req.model_copy(update={"dry_run": False})
        return service.organize(req, settings)
    except Exception as err:
        raise to_http(err) from err
