"""Rutas de la bandeja de notificaciones renderizada como HTML."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import HTMLResponse

from inbox.application.use_cases.notifications import (
    MalformedRequestError,
    fetch_repo_groups,
    mark_all_read,
    mark_read,
    project_groups,
)
from inbox.domain.entities import InboxPage, ListOptions
from inbox.infrastructure.context import AppContext
from inbox.infrastructure.stores import NotificationStore, StoreError
from inbox.interfaces.api.dependencies import get_context, get_notification_store
from inbox.interfaces.api.schemas import MarkAllReadPayload, MarkReadPayload

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _store_unavailable(exc: StoreError) -> HTTPException:
    logger.error("%s", exc)
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail="El servicio de notificaciones no está disponible",
    )


@router.get("/", response_class=HTMLResponse)
def notifications_page(
    include_all: bool = Query(False, alias="all"),
    store: NotificationStore = Depends(get_notification_store),
    context: AppContext = Depends(get_context),
) -> HTMLResponse:
    """Renderiza las notificaciones del usuario agrupadas por repositorio."""

    try:
        groups = fetch_repo_groups(store, ListOptions(include_all=include_all))
    except StoreError as exc:
        raise _store_unavailable(exc) from exc

    views = project_groups(groups, tz=context.timezone)
    html = context.renderer.render_page(InboxPage(groups=views, include_all=include_all))
    return HTMLResponse(content=html)


@router.post("/mark-read", status_code=status.HTTP_204_NO_CONTENT)
def post_mark_read(
    payload: MarkReadPayload,
    store: NotificationStore = Depends(get_notification_store),
) -> Response:
    """Marca una notificación como leída."""

    try:
        mark_read(store, payload.to_request())
    except MalformedRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/mark-all-read", status_code=status.HTTP_204_NO_CONTENT)
def post_mark_all_read(
    payload: MarkAllReadPayload,
    store: NotificationStore = Depends(get_notification_store),
) -> Response:
    """Marca como leídas todas las notificaciones de un repositorio."""

    try:
        mark_all_read(store, payload.to_request())
    except MalformedRequestError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
