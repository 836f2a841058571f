"""Unit tests for jobboard.api.deps: session resolution and role guards without a database."""

import unittest
from datetime import UTC, datetime, timedelta
from types import SimpleNamespace
from unittest.mock import MagicMock

from fastapi.security import HTTPAuthorizationCredentials

from jobboard.api.deps import (
    check_role,
    get_current_user,
    require_admin,
    require_member,
    resolve_user,
)
from jobboard.core.errors import AuthenticationError, AuthorizationError
from jobboard.core.security import TokenCodec, TokenConfig
from jobboard.models import Role

SECRET = "deps-test-secret"


def _codec(secret: str = SECRET) -> TokenCodec:
    return TokenCodec(TokenConfig(secret=secret))


def _db_returning(user: object) -> MagicMock:
    db = MagicMock()
    db.query.return_value.filter.return_value.first.return_value = user
    return db


def _request() -> SimpleNamespace:
    return SimpleNamespace(state=SimpleNamespace())


class TestResolveUser(unittest.TestCase):
    def test_missing_token(self) -> None:
        db = MagicMock()
        with self.assertRaises(AuthenticationError) as ctx:
            resolve_user(None, db, _codec())
        self.assertEqual(ctx.exception.message, "Access token required")
        self.assertEqual(ctx.exception.status_code, 401)
        db.query.assert_not_called()

    def test_malformed_token(self) -> None:
        with self.assertRaises(AuthenticationError) as ctx:
            resolve_user("malformed.token.here", MagicMock(), _codec())
        self.assertEqual(ctx.exception.message, "Invalid token")

    def test_forged_token(self) -> None:
        token = _codec(secret="attacker").issue(1)
        with self.assertRaises(AuthenticationError) as ctx:
            resolve_user(token, MagicMock(), _codec())
        self.assertEqual(ctx.exception.message, "Invalid token")

    def test_expired_token(self) -> None:
        codec = _codec()
        token = codec.issue(1, now=datetime.now(UTC) - timedelta(days=2))
        db = MagicMock()
        with self.assertRaises(AuthenticationError) as ctx:
            resolve_user(token, db, codec)
        self.assertEqual(ctx.exception.message, "Token expired")
        db.query.assert_not_called()

    def test_deleted_user_looks_like_invalid_token(self) -> None:
        codec = _codec()
        with self.assertRaises(AuthenticationError) as ctx:
            resolve_user(codec.issue(999), _db_returning(None), codec)
        self.assertEqual(ctx.exception.message, "Invalid token")

    def test_valid_token_returns_store_record(self) -> None:
        codec = _codec()
        user = SimpleNamespace(id=1, email="test@test.com", role="MEMBER")
        self.assertIs(resolve_user(codec.issue(1), _db_returning(user), codec), user)


class TestGetCurrentUser(unittest.TestCase):
    def test_attaches_user_to_request_state(self) -> None:
        codec = _codec()
        user = SimpleNamespace(id=1, role="MEMBER")
        request = _request()
        creds = HTTPAuthorizationCredentials(scheme="Bearer", credentials=codec.issue(1))
        result = get_current_user(request, creds, _db_returning(user), codec)
        self.assertIs(result, user)
        self.assertIs(request.state.user, user)

    def test_failure_attaches_nothing(self) -> None:
        request = _request()
        creds = HTTPAuthorizationCredentials(scheme="Bearer", credentials="garbage")
        with self.assertRaises(AuthenticationError):
            get_current_user(request, creds, MagicMock(), _codec())
        self.assertFalse(hasattr(request.state, "user"))

    def test_no_credentials(self) -> None:
        request = _request()
        with self.assertRaises(AuthenticationError) as ctx:
            get_current_user(request, None, MagicMock(), _codec())
        self.assertEqual(ctx.exception.message, "Access token required")


class TestRoleGuard(unittest.TestCase):
    def test_matching_role_passes(self) -> None:
        for role in Role:
            user = SimpleNamespace(id=1, role=role.value)
            with self.subTest(role=role):
                self.assertIs(check_role(user, role), user)

    def test_admin_required(self) -> None:
        with self.assertRaises(AuthorizationError) as ctx:
            check_role(SimpleNamespace(id=1, role="MEMBER"), Role.ADMIN)
        self.assertEqual(ctx.exception.message, "Admin access required")
        self.assertEqual(ctx.exception.status_code, 403)

    def test_member_required(self) -> None:
        with self.assertRaises(AuthorizationError) as ctx:
            check_role(SimpleNamespace(id=1, role="ADMIN"), Role.MEMBER)
        self.assertEqual(ctx.exception.message, "Member access required")

    def test_no_identity_is_forbidden(self) -> None:
        for role in Role:
            with self.subTest(role=role), self.assertRaises(AuthorizationError):
                check_role(None, role)

    def test_guard_reads_identity_from_request_state(self) -> None:
        admin = SimpleNamespace(id=1, role="ADMIN")
        request = _request()
        request.state.user = admin
        self.assertIs(require_admin(request, admin), admin)
        with self.assertRaises(AuthorizationError):
            require_member(request, admin)

    def test_guard_without_attached_identity_rejects(self) -> None:
        member = SimpleNamespace(id=2, role="MEMBER")
        with self.assertRaises(AuthorizationError):
            require_member(_request(), member)


if __name__ == "__main__":
    unittest.main()
