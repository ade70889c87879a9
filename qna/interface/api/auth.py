"""Caller identity for API routes.

The identity provider issues a JWT that arrives either as the
``auth_token`` cookie or as an ``Authorization: Bearer`` header. Routes
that need a caller declare ``CurrentActor``; read routes are anonymous.
"""

from typing import Annotated, Optional

from fastapi import Cookie, Depends, Header, HTTPException, Request, status

from qna.domain.service import JWTService
from qna.domain.value import Actor
from qna.util.jwt import JWTError


def _extract_token(
    auth_token: Optional[str], authorization: Optional[str]
) -> Optional[str]:
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return auth_token or None


async def _jwt_service(request: Request) -> JWTService:
    # Request-scoped container opened by the dishka middleware
    return await request.state.dishka_container.get(JWTService)


async def require_actor(
    request: Request,
    auth_token: Optional[str] = Cookie(default=None),
    authorization: Optional[str] = Header(default=None),
) -> Actor:
    """Resolve the caller or answer 401."""
    token = _extract_token(auth_token, authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    jwt_service = await _jwt_service(request)
    try:
        return jwt_service.get_actor(token)
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


CurrentActor = Annotated[Actor, Depends(require_actor)]
