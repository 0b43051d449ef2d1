"""Fixed enumerations stored as lowercase strings."""

from __future__ import annotations

from enum import Enum


class _LowercaseEnum(str, Enum):
    @classmethod
    def from_value(cls, value: str | _LowercaseEnum) -> _LowercaseEnum:
        """Parse a member from its value, ignoring case."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Invalid {cls.__name__.lower()} value: {value!r}")

    def __str__(self) -> str:
        return self.value


class Criticality(_LowercaseEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Severity(_LowercaseEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def enum_values(enum_cls: type[Enum]) -> list[str]:
    return [member.value for member in enum_cls]


def check_in(column: str, enum_cls: type[Enum]) -> str:
    """SQL text for ``column IN ('a', 'b', ...)``."""
    quoted = ", ".join(f"'{value}'" for value in enum_values(enum_cls))
    return f"{column} IN ({quoted})"
