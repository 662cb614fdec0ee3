"""API JSON consumida por los clientes remotos de notificaciones."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from inbox.application.use_cases.notifications import (
    MalformedRequestError,
    count_unread,
    mark_all_read,
    mark_read,
)
from inbox.domain.entities import ListOptions, MarkAllReadRequest, MarkReadRequest
from inbox.infrastructure.stores import NotificationStore, StoreError
from inbox.interfaces.api.dependencies import get_notification_store
from inbox.interfaces.api.schemas import NotificationRead

router = APIRouter(prefix="/api/notifications", tags=["notifications-api"])
logger = logging.getLogger(__name__)


def _bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def _store_unavailable(exc: StoreError) -> HTTPException:
    logger.error("%s", exc)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))


def _parse_thread_id(raw: str) -> int:
    try:
        thread_id = int(raw)
    except ValueError as exc:
        raise _bad_request(f"parsing ThreadID query parameter: {raw!r}") from exc
    if thread_id < 0:
        raise _bad_request("ThreadID must be an unsigned integer")
    return thread_id


@router.get("/list", response_model=list[NotificationRead])
def list_notifications(
    request: Request,
    include_all: bool = Query(False, alias="All"),
    store: NotificationStore = Depends(get_notification_store),
) -> list[NotificationRead]:
    """Devuelve las notificaciones del usuario autenticado."""

    repo_uris = request.query_params.getlist("RepoURI")
    if len(repo_uris) > 1:
        raise _bad_request(
            f"only one RepoURI parameter expected, but got {len(repo_uris)}"
        )
    options = ListOptions(repo_uri=repo_uris[0] if repo_uris else None, include_all=include_all)
    try:
        notifications = store.list(options)
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
    return [NotificationRead.from_entity(notification) for notification in notifications]


@router.get("/count", response_model=int)
def count_notifications(store: NotificationStore = Depends(get_notification_store)) -> int:
    """Devuelve la cantidad de notificaciones sin leer."""

    try:
        return count_unread(store)
    except StoreError as exc:
        raise _store_unavailable(exc) from exc


@router.post("/mark-read", status_code=status.HTTP_204_NO_CONTENT)
def api_mark_read(
    app_id: str = Query("", alias="AppID"),
    repo_uri: str = Query("", alias="RepoURI"),
    thread_id: str = Query("", alias="ThreadID"),
    store: NotificationStore = Depends(get_notification_store),
) -> Response:
    """Marca un hilo como leído."""

    request = MarkReadRequest(app_id, repo_uri, _parse_thread_id(thread_id))
    try:
        mark_read(store, request)
    except MalformedRequestError as exc:
        raise _bad_request(str(exc)) from exc
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/mark-all-read", status_code=status.HTTP_204_NO_CONTENT)
def api_mark_all_read(
    repo_uri: str = Query("", alias="RepoURI"),
    store: NotificationStore = Depends(get_notification_store),
) -> Response:
    """Marca como leídos todos los hilos de un repositorio."""

    try:
        mark_all_read(store, MarkAllReadRequest(repo_uri))
    except MalformedRequestError as exc:
        raise _bad_request(str(exc)) from exc
    except StoreError as exc:
        raise _store_unavailable(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
