"""Tests for the create_user bootstrap script."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from api_support import ApiTestCase

from jobboard.models import User
from jobboard.scripts import create_user


class TestCreateUserScript(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        session_patch = patch.object(create_user, "SessionLocal", self.Session)
        session_patch.start()
        self.addCleanup(session_patch.stop)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_bootstraps_an_admin(self) -> None:
        code, out, _ = self._run("root@test.com", "pw", "Root", "admin")
        self.assertEqual(code, 0)
        self.assertIn("ADMIN", out)
        with self.Session() as db:
            user = db.query(User).filter(User.email == "root@test.com").one()
            self.assertEqual(user.role, "ADMIN")
            self.assertNotEqual(user.password_hash, "pw")

    def test_role_defaults_to_member(self) -> None:
        code, _, _ = self._run("m@test.com", "pw", "M")
        self.assertEqual(code, 0)
        with self.Session() as db:
            self.assertEqual(db.query(User).one().role, "MEMBER")

    def test_duplicate_and_bad_role_fail(self) -> None:
        self.make_user("taken@test.com")
        code, _, err = self._run("taken@test.com", "pw", "T")
        self.assertEqual(code, 1)
        self.assertIn("already exists", err)

        code, _, err = self._run("x@test.com", "pw", "X", "owner")
        self.assertEqual(code, 1)
        self.assertIn("Role must be ADMIN or MEMBER", err)


if __name__ == "__main__":
    unittest.main()
