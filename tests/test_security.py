"""Unit tests for jobboard.core.security: password hashing, token config and the token codec."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from jobboard.core.config import Settings
from jobboard.core.security import (
    INSECURE_DEV_SECRET,
    TokenCodec,
    TokenConfig,
    TokenConfigError,
    TokenExpiredError,
    TokenMalformedError,
    TokenSignatureError,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret"


def _codec(secret: str = SECRET, lifetime: timedelta = timedelta(hours=24)) -> TokenCodec:
    return TokenCodec(TokenConfig(secret=secret, lifetime=lifetime))


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("p1")
        self.assertNotEqual(hashed, "p1")
        self.assertTrue(verify_password("p1", hashed))

    def test_wrong_password_fails(self) -> None:
        hashed = hash_password("correctpassword")
        self.assertFalse(verify_password("wrongpassword", hashed))

    def test_malformed_hash_fails_closed(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestTokenConfig(unittest.TestCase):
    def test_lifetime_must_be_positive(self) -> None:
        with self.assertRaises(TokenConfigError):
            TokenConfig(secret=SECRET, lifetime=timedelta(0))

    def test_codec_refuses_missing_secret(self) -> None:
        with self.assertRaises(TokenConfigError):
            TokenCodec(TokenConfig(secret=None))

    def test_prod_without_secret_fails_closed(self) -> None:
        settings = Settings(_env_file=None, APP_ENV="prod", JWT_SECRET=None)
        with self.assertRaises(TokenConfigError):
            TokenConfig.from_settings(settings)

    def test_blank_secret_counts_as_unset(self) -> None:
        settings = Settings(_env_file=None, APP_ENV="prod", JWT_SECRET="   ")
        with self.assertRaises(TokenConfigError):
            TokenConfig.from_settings(settings)

    def test_dev_without_secret_uses_fallback_and_warns(self) -> None:
        settings = Settings(_env_file=None, APP_ENV="dev", JWT_SECRET=None)
        with self.assertLogs("jobboard.core.security", level="WARNING"):
            config = TokenConfig.from_settings(settings)
        self.assertEqual(config.secret, INSECURE_DEV_SECRET)

    def test_settings_secret_and_lifetime_are_used(self) -> None:
        settings = Settings(
            _env_file=None, APP_ENV="prod", JWT_SECRET="real-secret", JWT_EXPIRE_MINUTES=90
        )
        config = TokenConfig.from_settings(settings)
        self.assertEqual(config.secret, "real-secret")
        self.assertEqual(config.lifetime, timedelta(minutes=90))


class TestTokenIssueAndVerify(unittest.TestCase):
    def test_verify_returns_embedded_user_id(self) -> None:
        codec = _codec()
        self.assertEqual(codec.verify(codec.issue(123)), 123)

    def test_token_carries_iat_and_later_exp(self) -> None:
        token = _codec().issue(1)
        claims = jwt.decode(token, SECRET, algorithms=["HS256"])
        self.assertEqual(claims["sub"], "1")
        self.assertGreater(claims["exp"], claims["iat"])
        self.assertEqual(claims["exp"] - claims["iat"], 24 * 3600)

    def test_different_users_get_different_tokens(self) -> None:
        codec = _codec()
        self.assertNotEqual(codec.issue(1), codec.issue(2))

    def test_expired_token(self) -> None:
        codec = _codec()
        token = codec.issue(1, now=datetime.now(UTC) - timedelta(hours=25))
        with self.assertRaises(TokenExpiredError):
            codec.verify(token)

    def test_token_signed_with_other_secret(self) -> None:
        token = _codec(secret="someone-elses-secret").issue(1)
        with self.assertRaises(TokenSignatureError):
            _codec().verify(token)

    def test_malformed_token(self) -> None:
        codec = _codec()
        for token in ("malformed.token.here", "not-a-token", ""):
            with self.subTest(token=token), self.assertRaises(TokenMalformedError):
                codec.verify(token)

    def test_missing_subject_is_malformed(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode({"iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256")
        with self.assertRaises(TokenMalformedError):
            _codec().verify(token)

    def test_non_numeric_subject_is_malformed(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "abc", "iat": now, "exp": now + timedelta(hours=1)}, SECRET, algorithm="HS256"
        )
        with self.assertRaises(TokenMalformedError):
            _codec().verify(token)

    def test_failure_kinds_are_distinguishable(self) -> None:
        self.assertEqual(TokenExpiredError.reason, "expired")
        self.assertEqual(TokenSignatureError.reason, "signature")
        self.assertEqual(TokenMalformedError.reason, "malformed")


if __name__ == "__main__":
    unittest.main()
