"""Unit tests for enum normalization, listing parameters and pagination metadata."""

import unittest

from jobboard.core.config import Settings
from jobboard.core.errors import ValidationError
from jobboard.models import ApplicationStatus, Role, VacancyStatus
from jobboard.schemas.pagination import ListParams, Pagination, list_params, parse_filter
from jobboard.services.accounts import check_lengths, parse_role


class TestRoleNormalization(unittest.TestCase):
    def test_case_insensitive(self) -> None:
        self.assertIs(Role.parse("admin"), Role.ADMIN)
        self.assertIs(Role.parse(" Member "), Role.MEMBER)
        self.assertIs(Role.parse("ADMIN"), Role.ADMIN)

    def test_unknown_value_rejected(self) -> None:
        for value in ("superuser", "", None, 1):
            with self.subTest(value=value), self.assertRaises(ValueError):
                Role.parse(value)

    def test_parse_role_defaults_to_member(self) -> None:
        self.assertIs(parse_role(None), Role.MEMBER)
        self.assertIs(parse_role(""), Role.MEMBER)

    def test_parse_role_without_default_rejects_blank(self) -> None:
        for value in (None, "", "  "):
            with self.subTest(value=value), self.assertRaises(ValidationError) as ctx:
                parse_role(value, default=None)
            self.assertEqual(ctx.exception.message, "Role must be ADMIN or MEMBER")
        self.assertIs(parse_role("member", default=None), Role.MEMBER)

    def test_check_lengths_skips_absent_fields(self) -> None:
        check_lengths()
        check_lengths(name="n" * 255)
        with self.assertRaises(ValidationError):
            check_lengths(email="e" * 256)

    def test_parse_role_rejects_unknown_with_400(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            parse_role("owner")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Role must be ADMIN or MEMBER")

    def test_status_enums(self) -> None:
        self.assertIs(VacancyStatus.parse("closed"), VacancyStatus.CLOSED)
        self.assertIs(ApplicationStatus.parse("accepted"), ApplicationStatus.ACCEPTED)
        with self.assertRaises(ValueError):
            ApplicationStatus.parse("INVALID_STATUS")


class TestFilters(unittest.TestCase):
    def test_absent_filter_is_none(self) -> None:
        self.assertIsNone(parse_filter(VacancyStatus, None, "status"))
        self.assertIsNone(parse_filter(VacancyStatus, "  ", "status"))

    def test_filter_normalized(self) -> None:
        self.assertIs(parse_filter(Role, "admin", "role"), Role.ADMIN)
        self.assertIs(parse_filter(ApplicationStatus, "pending", "status"), ApplicationStatus.PENDING)

    def test_unknown_filter(self) -> None:
        with self.assertRaises(ValidationError) as ctx:
            parse_filter(VacancyStatus, "archived", "status")
        self.assertEqual(ctx.exception.message, "Invalid status filter")


class TestListParams(unittest.TestCase):
    def setUp(self) -> None:
        self.settings = Settings(_env_file=None, PAGINATION_DEFAULT_LIMIT=10, PAGINATION_MAX_LIMIT=50)

    def test_defaults(self) -> None:
        params = list_params(self.settings)
        self.assertEqual((params.page, params.limit, params.offset), (1, 10, 0))

    def test_offset(self) -> None:
        params = list_params(self.settings, page=2, limit=5)
        self.assertEqual(params.offset, 5)

    def test_limit_above_max(self) -> None:
        with self.assertRaises(ValidationError):
            list_params(self.settings, page=1, limit=51)

    def test_pagination_block(self) -> None:
        self.assertEqual(
            Pagination.build(15, ListParams(page=2, limit=5)).model_dump(),
            {"total": 15, "page": 2, "limit": 5, "total_pages": 3},
        )
        self.assertEqual(Pagination.build(2, ListParams()).total_pages, 1)
        self.assertEqual(Pagination.build(0, ListParams()).total_pages, 0)

    def test_default_limit_cannot_exceed_max(self) -> None:
        with self.assertRaises(ValueError):
            Settings(_env_file=None, PAGINATION_DEFAULT_LIMIT=200, PAGINATION_MAX_LIMIT=100)


if __name__ == "__main__":
    unittest.main()
