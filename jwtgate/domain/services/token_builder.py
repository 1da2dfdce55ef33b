import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Sequence

from jwt import PyJWTError
from jwt import decode as jwt_decode
from jwt import encode as jwt_encode
from structlog import get_logger

from jwtgate.core.exceptions import ConfigurationError, UnauthorizedError
from jwtgate.domain.entities import Person, User
from jwtgate.domain.value_objects import AuthToken

logger = get_logger(__name__)

ROLES_CLAIM = "roles"


class TokenBuilder:
    """Builds signed JWTs for authenticated users.

    Signing key, issuer, audience and validity window are fixed at
    construction and never change afterwards, so a single builder can be
    shared by concurrent requests. Every token carries the standard ``iss``,
    ``aud``, ``sub``, ``iat``, ``exp`` and ``jti`` fields plus the user's
    profile attributes; authorization claims are added under ``roles`` only
    when the caller supplies some (full tokens).

    Attributes:
        issuer (str): Value of the ``iss`` claim.
        audience (str): Value of the ``aud`` claim.
        validity (timedelta): Lifetime of every issued token.
    """

    def __init__(
        self,
        signing_key: str,
        issuer: str,
        audience: str,
        validity: timedelta = timedelta(minutes=60),
        algorithm: str = "HS256",
    ):
        missing = [
            name
            for name, value in (
                ("signing_key", signing_key),
                ("issuer", issuer),
                ("audience", audience),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(missing)
        if validity <= timedelta(0):
            raise ConfigurationError(["validity"])

        self._signing_key = signing_key
        self._algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.validity = validity

    def build(
        self,
        user: User,
        person: Optional[Person],
        claims: Sequence[str] = (),
        issued_at: Optional[datetime] = None,
    ) -> AuthToken:
        """Create a signed token for ``user``.

        Args:
            user: The authenticated user; its id becomes the subject.
            person: Profile attributes to embed, if the user has a profile.
            claims: Authorization claims; empty for a lightweight token.
            issued_at: Issue time. Passing the same value to two calls yields
                tokens with identical expiry.

        Returns:
            AuthToken: The encoded token with its expiry and claims.
        """
        issued_at = (issued_at or datetime.now(timezone.utc)).replace(microsecond=0)
        expires_at = issued_at + self.validity
        claims = tuple(claims)

        payload: Dict[str, Any] = {
            "iss": self.issuer,
            "aud": self.audience,
            "sub": str(user.id),
            "iat": issued_at,
            "exp": expires_at,
            "jti": uuid.uuid4().hex,
            "email": user.email,
        }
        if person is not None:
            payload["given_name"] = person.first_name
            payload["family_name"] = person.last_name
        if claims:
            payload[ROLES_CLAIM] = list(claims)

        token = AuthToken(
            value=jwt_encode(payload, self._signing_key, algorithm=self._algorithm),
            subject=str(user.id),
            expires_at=expires_at,
            claims=claims,
        )
        logger.debug(
            "Token built",
            user_id=user.id,
            lightweight=token.is_lightweight,
            expires_at=expires_at.isoformat(),
        )
        return token

    def decode(self, token: str) -> Dict[str, Any]:
        """Verify a token's signature, issuer, audience and expiry.

        Raises:
            UnauthorizedError: If the token fails any of these checks.
        """
        try:
            return jwt_decode(
                token,
                self._signing_key,
                algorithms=[self._algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except PyJWTError as e:
            logger.warning("Token verification failed", error=str(e))
            raise UnauthorizedError("Invalid or expired token", code="invalid_token") from e
