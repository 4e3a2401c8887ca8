from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import HTTPException, Request, Response, status
from pydantic import BaseModel

from quiz_service.core.config import settings
from quiz_service.core.errors import Unauthorized


class AdminIdentity(BaseModel):
    admin_id: str
    email: str


def create_token(admin_id: str, email: str, ttl_days: Optional[int] = None) -> str:
    now = datetime.now(timezone.utc)
    ttl = timedelta(days=ttl_days if ttl_days is not None else settings.ADMIN_TOKEN_TTL_DAYS)
    payload = {
        "adminId": admin_id,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> AdminIdentity:
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM]
        )
        return AdminIdentity(admin_id=str(payload["adminId"]), email=payload["email"])
    except (jwt.PyJWTError, KeyError):
        raise Unauthorized("Unauthorized")


def _token_from_request(request: Request) -> Optional[str]:
    token = request.cookies.get(settings.ADMIN_COOKIE_NAME)
    if token:
        return token

    header = request.headers.get("Authorization", "")
    scheme, _, credentials = header.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials
    return None


def authorize(request: Request) -> AdminIdentity:
    """Resolve the admin behind a request or raise Unauthorized"""
    token = _token_from_request(request)
    if not token:
        raise Unauthorized("Unauthorized")
    return verify_token(token)


def require_admin(request: Request) -> AdminIdentity:
    """FastAPI dependency guarding every admin mutation and report"""
    try:
        return authorize(request)
    except Unauthorized as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)


def set_admin_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.ADMIN_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.is_production(),
        samesite="lax",
        max_age=60 * 60 * 24 * settings.ADMIN_TOKEN_TTL_DAYS,
        path="/",
    )


def remove_admin_cookie(response: Response) -> None:
    response.delete_cookie(key=settings.ADMIN_COOKIE_NAME, path="/")
