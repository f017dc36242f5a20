"""
FastAPI dependencies for authentication.

``get_current_user`` guards protected routes with a Bearer access token.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.errors import AuthenticationError
from auth.schemas import AuthenticatedUser
from auth.tokens import TokenIssuer
from config.constants import Messages

# yields None for a missing or non-Bearer Authorization header
_bearer_scheme = HTTPBearer(auto_error=False)


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthenticatedUser:
    if credentials is None:
        raise AuthenticationError(Messages.TOKEN_REQUIRED, Messages.NO_TOKEN)

    claims = issuer.verify_access(credentials.credentials)
    if claims is None:
        raise AuthenticationError(Messages.INVALID_TOKEN, Messages.INVALID_TOKEN)

    try:
        return AuthenticatedUser(
            user_id=claims["userId"],
            email=claims["email"],
            name=claims["name"],
        )
    except (KeyError, ValueError):
        raise AuthenticationError(Messages.INVALID_TOKEN, Messages.INVALID_TOKEN) from None
