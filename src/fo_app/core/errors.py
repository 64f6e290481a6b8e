from __future__ import annotations

from fastapi import HTTPException, status


class FoAppError(Exception):
    """Base application exception."""

    pass


class BadRequest(FoAppError):
    pass


class InvalidInput(BadRequest):
    """A top-level argument is unusable (e.g. an empty target path)."""


def to_http(exc: Exception) -> HTTPException:
    """
    Convert our exceptions to HTTPException with sensible defaults.
    """
    if isinstance(exc, BadRequest):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, FoAppError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
    )
