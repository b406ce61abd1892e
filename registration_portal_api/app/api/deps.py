"""
Shared FastAPI dependencies and helpers for the route layer.
"""

from typing import Optional

from fastapi import HTTPException, Request, status

from registration_portal_api.app.schemas.registration import RegistrationStatus, StatusUpdate
from registration_portal_api.app.services.storage import IStorage


def get_storage(request: Request) -> IStorage:
    """Return the storage repository owned by the running application."""
    return request.app.state.storage


def parse_status(payload: Optional[StatusUpdate]) -> RegistrationStatus:
    """Turn a status update body into a ``RegistrationStatus``.

    Raises HTTP 400 when the body is missing or the label is not one
    of ``pending``, ``confirmed`` or ``cancelled``.
    """
    raw = payload.status if payload is not None else None
    try:
        return RegistrationStatus(raw)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid status")
