"""FastAPI dependency utilities."""

from collections.abc import Generator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from inbox.domain.entities import Viewer
from inbox.infrastructure.context import AppContext
from inbox.infrastructure.security import decode_access_token, viewer_from_claims
from inbox.infrastructure.stores import NotificationStore

ACCESS_TOKEN_COOKIE = "accessToken"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_context(request: Request) -> AppContext:
    """Return the :class:`AppContext` built by ``create_app``."""

    return request.app.state.context


def get_access_token(
    request: Request, token: str | None = Depends(oauth2_scheme)
) -> str | None:
    """Return the bearer token from the header or the ``accessToken`` cookie."""

    return token or request.cookies.get(ACCESS_TOKEN_COOKIE)


def get_current_viewer(
    token: str | None = Depends(get_access_token),
    context: AppContext = Depends(get_context),
) -> Viewer:
    """Return the authenticated viewer or reject the request with 401."""

    if not token:
        raise _unauthorized("Esta página requiere un usuario autenticado")
    try:
        claims = decode_access_token(token, context.settings.secret_key)
        return viewer_from_claims(claims)
    except ValueError as exc:
        raise _unauthorized("Credenciales inválidas") from exc


def get_db(context: AppContext = Depends(get_context)) -> Generator[Session | None, None, None]:
    """Yield a database session (when the store needs one) and close it afterwards."""

    db = context.open_session()
    try:
        yield db
    finally:
        if db is not None:
            db.close()


def get_notification_store(
    viewer: Viewer = Depends(get_current_viewer),
    db: Session | None = Depends(get_db),
    token: str | None = Depends(get_access_token),
    context: AppContext = Depends(get_context),
) -> Generator[NotificationStore, None, None]:
    """Yield the configured notification store bound to the current viewer."""

    store = context.store_for(viewer, session=db, access_token=token)
    try:
        yield store
    finally:
        close = getattr(store, "close", None)
        if callable(close):
            close()


__all__ = [
    "ACCESS_TOKEN_COOKIE",
    "get_access_token",
    "get_context",
    "get_current_viewer",
    "get_db",
    "get_notification_store",
    "oauth2_scheme",
]
