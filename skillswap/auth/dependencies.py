# skillswap/auth/dependencies.py

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt.exceptions import InvalidTokenError
import jwt

from skillswap.common.config import settings
from skillswap.common.utils.global_messages import GlobalMessages

bearer_scheme = HTTPBearer()

@dataclass(frozen=True)
class CurrentUser:
    id: str
    email: Optional[str] = None
    name: Optional[str] = None

def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        settings.SUPABASE_JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
    )

async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:
    """
    Dependency resolving the caller from the hosted auth provider's JWT.
    The user is passed explicitly into every service call from here on.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=GlobalMessages.INVALID_CREDENTIALS,
        headers={"WWW-Authenticate": "Bearer"}
    )
    try:
        payload = decode_access_token(credentials.credentials)
    except InvalidTokenError:
        raise credentials_exception

    user_id = payload.get("sub")
    if user_id is None:
        raise credentials_exception
    try:
        user_id = UUID(str(user_id))
    except ValueError:
        raise credentials_exception

    metadata = payload.get("user_metadata") or {}
    return CurrentUser(
        id=str(user_id),
        email=payload.get("email"),
        name=metadata.get("name") or metadata.get("full_name"),
    )
