"""Closed value sets stored as canonical uppercase strings."""

from enum import Enum


class CanonicalEnum(str, Enum):
    """String enum whose values are parsed case-insensitively into the canonical uppercase form."""

    @classmethod
    def parse(cls, value: object) -> "CanonicalEnum":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{cls.__name__} value must be a non-empty string")
        normalized = value.strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"{cls.__name__} must be one of {allowed}, got {value!r}") from None


class Role(CanonicalEnum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class VacancyStatus(CanonicalEnum):
    ACTIVE = "ACTIVE"
    CLOSED = "CLOSED"


class ApplicationStatus(CanonicalEnum):
    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
