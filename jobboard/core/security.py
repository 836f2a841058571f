"""Password hashing and signed access tokens (issue/verify) for authentication."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt

from jobboard.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 12

PASSWORD_MAX_LEN = 128
EMAIL_MAX_LEN = 255
NAME_MAX_LEN = 255

# Used only when JWT_SECRET is unset outside prod. Never valid in prod.
INSECURE_DEV_SECRET = "jobboard-insecure-dev-secret"


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class TokenConfigError(Exception):
    """Raised when the token codec cannot be configured (no signing secret in prod)."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TokenError(Exception):
    """Base for token verification failures."""

    reason = "invalid"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TokenMalformedError(TokenError):
    """Token does not parse as a signed credential, or lacks required claims."""

    reason = "malformed"


class TokenExpiredError(TokenError):
    """Current time is at or past the token's exp claim."""

    reason = "expired"


class TokenSignatureError(TokenError):
    """Signature does not verify against the server secret."""

    reason = "signature"


@dataclass(frozen=True)
class TokenConfig:
    """Signing secret, algorithm and fixed lifetime for issued tokens."""

    secret: str | None
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(hours=24)

    def __post_init__(self) -> None:
        if self.lifetime <= timedelta(0):
            raise TokenConfigError("Token lifetime must be positive")

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        """
        Build the config from app settings.

        Without JWT_SECRET: prod raises TokenConfigError; dev/test use INSECURE_DEV_SECRET.
        """
        secret = settings.JWT_SECRET.get_secret_value() if settings.JWT_SECRET else None
        if not secret:
            if settings.APP_ENV == "prod":
                raise TokenConfigError("JWT_SECRET must be set when APP_ENV=prod")
            logger.warning(
                "JWT_SECRET is not set; using the insecure development secret",
                extra={"app_env": settings.APP_ENV},
            )
            secret = INSECURE_DEV_SECRET
        return cls(
            secret=secret,
            algorithm=settings.JWT_ALGORITHM,
            lifetime=timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
        )


class TokenCodec:
    """Issue and verify signed, time-bounded tokens that carry a user id."""

    def __init__(self, config: TokenConfig) -> None:
        if not config.secret:
            raise TokenConfigError("Token signing secret is not configured")
        self._config = config

    @property
    def lifetime(self) -> timedelta:
        return self._config.lifetime

    def issue(self, user_id: int, now: datetime | None = None) -> str:
        """Create a token with sub=user_id, iat=now and exp=now+lifetime."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "iat": issued_at,
            "exp": issued_at + self._config.lifetime,
        }
        return jwt.encode(payload, self._config.secret, algorithm=self._config.algorithm)

    def verify(self, token: str) -> int:
        """
        Decode and validate a token; return the embedded user id.

        Raises TokenExpiredError, TokenSignatureError or TokenMalformedError.
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token expired") from e
        except jwt.InvalidSignatureError as e:
            raise TokenSignatureError("Token signature is invalid") from e
        except jwt.PyJWTError as e:
            raise TokenMalformedError(f"Token is malformed: {e}") from e

        try:
            return int(payload["sub"])
        except (TypeError, ValueError) as e:
            raise TokenMalformedError("Token subject is not a user id") from e


@lru_cache
def get_token_codec() -> TokenCodec:
    """Dependency: codec built once from settings."""
    return TokenCodec(TokenConfig.from_settings(get_settings()))
