"""Declarative base, shared mixins and field validation helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any, ClassVar, TypeVar

from sqlalchemy import DateTime, func, inspect
from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from threatmap.core.exceptions import ValidationError
from threatmap.core.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _reject(entity: Any, field: str, message: str) -> ValidationError:
    name = entity.__name__ if isinstance(entity, type) else type(entity).__name__
    logger.warning("Validation failed", entity=name, field=field, reason=message)
    return ValidationError(name, field, message)


def require_value(entity: Any, field: str, value: Any) -> Any:
    if value is None:
        raise _reject(entity, field, "must not be null")
    return value


def require_text(entity: Any, field: str, value: str | None) -> str:
    if value is None or not str(value).strip():
        raise _reject(entity, field, "must not be null or blank")
    return value


def coerce_enum(entity: Any, field: str, enum_cls: type[E], value: Any) -> E | None:
    if value is None:
        return None
    try:
        return enum_cls.from_value(value)  # type: ignore[attr-defined]
    except ValueError as exc:
        raise _reject(entity, field, str(exc)) from None


def to_decimal(entity: Any, field: str, value: Any) -> Decimal:
    """Convert an int, float, str or Decimal to a finite Decimal.

    ``entity`` may be a model instance or a model class; it only names the
    source in the raised ``ValidationError``.
    """
    require_value(entity, field, value)
    if isinstance(value, bool):
        raise _reject(entity, field, "must be numeric")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise _reject(entity, field, f"must be numeric, got {value!r}") from None
    if not number.is_finite():
        raise _reject(entity, field, "must be finite")
    return number


def coerce_decimal(
    entity: Any, field: str, value: Any, precision: int, scale: int
) -> Decimal:
    """Convert to Decimal rounded the way NUMERIC(precision, scale) stores it."""
    number = to_decimal(entity, field, value)
    limit = Decimal(10) ** (precision - scale)
    if abs(number) >= limit:
        raise _reject(entity, field, f"{number} exceeds NUMERIC({precision},{scale})")
    number = number.quantize(Decimal(1).scaleb(-scale), rounding=ROUND_HALF_UP)
    # 999.995 rounds up past the limit
    if abs(number) >= limit:
        raise _reject(entity, field, f"{number} exceeds NUMERIC({precision},{scale})")
    return number


class Base(AsyncAttrs, DeclarativeBase):
    """Shared declarative base for all models.

    Subclasses name their mandatory constructor arguments in ``__required__``.
    Construction without one of them raises ``ValidationError``; blank or
    ``None`` values are rejected by each model's ``@validates`` hooks, which
    also fire on later attribute assignment.

    Collections that are not eagerly loaded are read from async code with
    ``await entity.awaitable_attrs.<name>``.
    """

    __required__: ClassVar[tuple[str, ...]] = ()

    def __init__(self, **kwargs: Any) -> None:
        for field in self.__required__:
            require_value(self, field, kwargs.get(field))
        # columns first: a rejected value must not leave this object in a related collection
        relationships = self.__mapper__.relationships
        ordered = dict(sorted(kwargs.items(), key=lambda item: item[0] in relationships))
        self.registry.constructor(self, **ordered)

    def _identity(self) -> tuple[Any, ...] | None:
        state = inspect(self)
        if state.identity is not None:
            return state.identity
        # transient/pending: read the key straight from the instance dict, never load
        mapper = state.mapper
        values = tuple(
            state.dict.get(mapper.get_property_by_column(column).key)
            for column in mapper.primary_key
        )
        return None if None in values else values

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(self) is not type(other):
            return NotImplemented
        mine = self._identity()
        return mine is not None and mine == other._identity()  # type: ignore[union-attr]

    def __hash__(self) -> int:
        # fixed on first use: an entity hashed before it had a key keeps
        # hashing by object id after the flush assigns one
        cached = self.__dict__.get("_hash_value")
        if cached is None:
            identity = self._identity()
            cached = id(self) if identity is None else hash((type(self), identity))
            self.__dict__["_hash_value"] = cached
        return cached


class CreatedAtMixin:
    """Adds a created_at column stamped on first persistence."""

    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(),
        default=utcnow,
        server_default=func.now(),
        nullable=True,
    )


class TimestampMixin(CreatedAtMixin):
    """Adds created_at / updated_at columns to a model."""

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=True,
    )
