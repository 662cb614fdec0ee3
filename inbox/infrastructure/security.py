"""Token helpers for identifying the viewer.

Tokens are issued by the embedding application and signed with the shared
``SECRET_KEY``. ``create_access_token`` exists for development tooling and
tests.
"""

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from inbox.domain.entities import Viewer

ALGORITHM = "HS256"


def create_access_token(
    viewer: Viewer, secret_key: str, expires_delta: timedelta | None = None
) -> str:
    expire = datetime.now(tz=timezone.utc) + (expires_delta or timedelta(hours=12))
    claims = {
        "sub": str(viewer.id),
        "login": viewer.login,
        "name": viewer.name,
        "avatar_url": viewer.avatar_url,
        "exp": expire,
    }
    return jwt.encode(claims, secret_key, algorithm=ALGORITHM)


def decode_access_token(token: str, secret_key: str) -> dict:
    try:
        return jwt.decode(token, secret_key, algorithms=[ALGORITHM])
    except JWTError as exc:
        raise ValueError("Could not validate credentials") from exc


def viewer_from_claims(claims: dict) -> Viewer:
    """Build the :class:`Viewer` described by decoded token ``claims``."""

    try:
        viewer_id = int(claims["sub"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError("Token does not identify a user") from exc
    if viewer_id <= 0:
        raise ValueError("Token does not identify a user")
    return Viewer(
        id=viewer_id,
        login=str(claims.get("login") or ""),
        name=str(claims.get("name") or ""),
        avatar_url=str(claims.get("avatar_url") or ""),
    )


__all__ = ["create_access_token", "decode_access_token", "viewer_from_claims"]
