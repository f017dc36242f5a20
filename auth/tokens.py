"""
JWT issuance and verification.

Two HS256 tokens are minted per login from the same claims: an access token
and a refresh token, each with its own secret and lifetime.  A token only
verifies against the secret of its own kind.

Verification never raises: ``None`` is the only failure signal, and the
reason is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping, Optional

import jwt

from config.settings import Settings

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


class TokenIssuer:
    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = timedelta(days=7),
        refresh_ttl: timedelta = timedelta(days=30),
    ) -> None:
        if not access_secret or not refresh_secret:
            raise ValueError("Token secrets must be configured")
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self.access_ttl = access_ttl
        self.refresh_ttl = refresh_ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenIssuer":
        return cls(
            access_secret=settings.jwt_secret,
            refresh_secret=settings.jwt_refresh_secret,
            access_ttl=settings.access_token_ttl,
            refresh_ttl=settings.refresh_token_ttl,
        )

    def _sign(self, claims: Mapping[str, Any], secret: str, ttl: timedelta) -> str:
        now = datetime.now(timezone.utc)
        payload = {**claims, "iat": now, "exp": now + ttl}
        return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)

    def _verify(self, token: str, secret: str, kind: str) -> Optional[Dict[str, Any]]:
        try:
            return jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected %s token: expired", kind)
        except jwt.InvalidTokenError as exc:
            logger.info("Rejected %s token: %s", kind, exc)
        return None

    def issue_pair(self, claims: Mapping[str, Any]) -> TokenPair:
        return TokenPair(
            access_token=self._sign(claims, self._access_secret, self.access_ttl),
            refresh_token=self._sign(claims, self._refresh_secret, self.refresh_ttl),
        )

    def issue_access(self, claims: Mapping[str, Any]) -> str:
        return self._sign(claims, self._access_secret, self.access_ttl)

    def verify_access(self, token: str) -> Optional[Dict[str, Any]]:
        return self._verify(token, self._access_secret, "access")

    def verify_refresh(self, token: str) -> Optional[Dict[str, Any]]:
        return self._verify(token, self._refresh_secret, "refresh")

    @staticmethod
    def decode_unsafe(token: str) -> Optional[Dict[str, Any]]:
        """
        Read the payload WITHOUT checking the signature or expiry.

        Diagnostics only; never use the result to make an access decision.
        """
        try:
            return jwt.decode(
                token,
                options={"verify_signature": False, "verify_exp": False},
                algorithms=[JWT_ALGORITHM],
            )
        except jwt.InvalidTokenError:
            return None
