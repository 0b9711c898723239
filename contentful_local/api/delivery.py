from __future__ import annotations

from typing import Any, Dict, Optional
import logging

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from contentful_local.client import LocalClient
from contentful_local.core.dependencies import get_client
from contentful_local.domain.errors import (
    InvalidPathError,
    ReadFailureError,
    UnknownLinkTypeError,
    UnknownLocaleError,
)

logger = logging.getLogger(__name__)
router = APIRouter()


class DeliveryError(Exception):
    """An error answered with a delivery-API style error body."""

    def __init__(self, status_code: int, error_id: str, message: str):
        self.status_code = status_code
        self.error_id = error_id
        self.message = message
        super().__init__(message)


def error_response(exc: DeliveryError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "sys": {"type": "Error", "id": exc.error_id},
            "message": exc.message,
        },
    )


def _query_params(
    content_type: Optional[str] = None,
    locale: Optional[str] = None,
    order: Optional[str] = None,
    include: Optional[int] = None,
    resolve_links: Optional[bool] = Query(default=None, alias="resolveLinks"),
    select: Optional[str] = None,
    skip: Optional[int] = Query(default=None, ge=0),
    limit: Optional[int] = Query(default=None, ge=0),
) -> Dict[str, Any]:
    params = {
        "content_type": content_type,
        "locale": locale,
        "order": order,
        "include": include,
        "resolveLinks": resolve_links,
        "select": select,
        "skip": skip,
        "limit": limit,
    }
    return {key: value for key, value in params.items() if value is not None}


def _check_space(space_id: str, client: LocalClient) -> None:
    if space_id != client.config.space:
        raise DeliveryError(
            status.HTTP_404_NOT_FOUND,
            "NotFound",
            f"The resource could not be found: space {space_id}",
        )


async def _answer(call) -> Any:
    """Await a client call, turning content errors into delivery errors."""
    try:
        return await call
    except (InvalidPathError, UnknownLocaleError, UnknownLinkTypeError) as e:
        raise DeliveryError(status.HTTP_400_BAD_REQUEST, "BadRequest", str(e)) from e
    except ReadFailureError as e:
        logger.error(f"Failed to read snapshot: {e}", exc_info=True)
        raise DeliveryError(status.HTTP_500_INTERNAL_SERVER_ERROR, "ServerError", str(e)) from e


def _not_found(kind: str, record_id: str) -> DeliveryError:
    return DeliveryError(
        status.HTTP_404_NOT_FOUND,
        "NotFound",
        f"The resource could not be found: {kind} {record_id}",
    )


# ---------------------------------------------------------------------------
# 1. GET /spaces/{space_id}
# ---------------------------------------------------------------------------

@router.get("/spaces/{space_id}")
async def get_space(space_id: str, client: LocalClient = Depends(get_client)) -> dict:
    _check_space(space_id, client)
    return await _answer(client.get_space())


# ---------------------------------------------------------------------------
# 2. Entries
# ---------------------------------------------------------------------------

@router.get("/spaces/{space_id}/entries")
async def get_entries(
    space_id: str,
    params: Dict[str, Any] = Depends(_query_params),
    client: LocalClient = Depends(get_client),
) -> dict:
    _check_space(space_id, client)
    return await _answer(client.get_entries(params))


@router.get("/spaces/{space_id}/entries/{entry_id}")
async def get_entry(
    space_id: str,
    entry_id: str,
    params: Dict[str, Any] = Depends(_query_params),
    client: LocalClient = Depends(get_client),
) -> dict:
    _check_space(space_id, client)
    entry = await _answer(client.get_entry(entry_id, params))
    if entry is None:
        raise _not_found("Entry", entry_id)
    return entry


# ---------------------------------------------------------------------------
# 3. Assets
# ---------------------------------------------------------------------------

@router.get("/spaces/{space_id}/assets")
async def get_assets(
    space_id: str,
    params: Dict[str, Any] = Depends(_query_params),
    client: LocalClient = Depends(get_client),
) -> dict:
    _check_space(space_id, client)
    return await _answer(client.get_assets(params))


@router.get("/spaces/{space_id}/assets/{asset_id}")
async def get_asset(
    space_id: str,
    asset_id: str,
    params: Dict[str, Any] = Depends(_query_params),
    client: LocalClient = Depends(get_client),
) -> dict:
    _check_space(space_id, client)
    asset = await _answer(client.get_asset(asset_id, params))
    if asset is None:
        raise _not_found("Asset", asset_id)
    return asset
