"""Signed, opaque continuation tokens for cursor pagination."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jose import JWTError, jwt

__all__ = ["TokenCodec"]

logger = logging.getLogger(__name__)

# Cursor state is arbitrary; keys such as ``exp`` or ``sub`` are data, not claims.
_DECODE_OPTIONS = {
    "verify_aud": False,
    "verify_iat": False,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "verify_at_hash": False,
}


class TokenCodec:
    """Sign and verify cursor state with a shared HMAC secret.

    Tokens carry no time claims, so identical state always encodes to the
    same string. Decoding is fail-open: anything that cannot be verified is
    treated as "no cursor" rather than an error.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256") -> None:
        """Initialize the codec with the signing key and JWT algorithm."""
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm

    def encode(self, state: Mapping[str, Any]) -> str:
        """Return a signed token embedding ``state``."""
        token = jwt.encode(dict(state), self.secret_key, algorithm=self.algorithm)
        logger.debug("Generated continuation token for keys %s", sorted(state))
        return token

    def decode(self, token: str | None) -> dict[str, Any]:
        """Return the mapping embedded in ``token`` or ``{}`` when unusable."""
        if not token:
            return {}
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options=_DECODE_OPTIONS,
            )
        except JWTError as err:
            logger.warning("Ignoring invalid continuation token: %s", err)
            return {}
        if not isinstance(payload, dict):
            return {}
        return payload
