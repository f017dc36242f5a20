"""
Auth API routes — signup, login, me.

Route prefix: /api/v1/auth
"""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import db_session
from api.errors import (
    ApiError,
    ConflictError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
)
from api.responses import respond_success
from api.validation import ValidatedRequest, validate
from auth.dependencies import get_current_user, get_token_issuer
from auth.password import hash_password, verify_password
from auth.schemas import AuthenticatedUser, LoginRequest, SignupRequest
from auth.service import UserService
from auth.tokens import TokenIssuer
from config.constants import Messages

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/signup", status_code=status.HTTP_201_CREATED)
async def signup(
    req: ValidatedRequest = Depends(validate(body=SignupRequest)),
    session: AsyncSession = Depends(db_session),
):
    """Register a new user."""
    body: SignupRequest = req.body
    users = UserService(session)
    try:
        if await users.find_user_by_email(body.email) is not None:
            raise ConflictError(Messages.USER_EXISTS, Messages.ALREADY_EXISTS)

        password_hash = await asyncio.to_thread(hash_password, body.password)
        user = await users.create_user(
            name=body.name,
            email=body.email,
            password_hash=password_hash,
        )
    except ApiError:
        raise
    except Exception:
        logger.exception("Signup failed for %s", body.email)
        raise InternalError(Messages.SIGNUP_FAILED) from None

    logger.info("Registered user %s (%s)", user.name, user.user_id)
    return respond_success(user, Messages.REGISTER_SUCCESS, status.HTTP_201_CREATED)


@router.post("/login")
async def login(
    req: ValidatedRequest = Depends(validate(body=LoginRequest)),
    session: AsyncSession = Depends(db_session),
    issuer: TokenIssuer = Depends(get_token_issuer),
):
    """Login with email + password; answers with an access token."""
    body: LoginRequest = req.body
    if not body.email or not body.password:
        raise InvalidCredentialsError(Messages.MISSING_CREDENTIALS, Messages.MISSING_REQUIRED_FIELDS)

    try:
        user = await UserService(session).find_user_by_email(body.email)
        if user is None:
            raise NotFoundError(Messages.USER_NOT_FOUND, Messages.EMAIL_NOT_FOUND)

        matches = await asyncio.to_thread(verify_password, body.password, user.password)
        if not matches:
            raise InvalidCredentialsError(Messages.INVALID_PASSWORD, Messages.WRONG_PASSWORD)

        access_token = issuer.issue_access(
            {"name": user.name, "userId": user.user_id, "email": user.email}
        )
    except ApiError:
        raise
    except Exception:
        logger.exception("Login failed for %s", body.email)
        raise InternalError(Messages.LOGIN_FAILED) from None

    logger.info("Login: %s (%s)", user.name, user.user_id)
    return respond_success(
        {
            "userData": {
                "name": user.name,
                "email": user.email,
                "created_at": user.created_at,
                "updated_at": user.updated_at,
            },
            "accessToken": access_token,
        },
        Messages.LOGIN_SUCCESS,
    )


@router.get("/me")
async def me(current: AuthenticatedUser = Depends(get_current_user)):
    """Identity of the caller, read from their access token."""
    return respond_success(current.model_dump())
