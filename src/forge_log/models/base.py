"""Shared pydantic plumbing for entity definitions.

Each entity is declared once as a canonical pydantic model. The insert and
update validators, along with the storage column layout, are derived from
that single definition by :class:`Resource`.
"""

import types
import typing
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, create_model


def to_camel(name: str) -> str:
    """snake_case to camelCase. Digits do not start a new word (``vitamin_d_25oh`` -> ``vitaminD25oh``)."""
    first, *rest = name.split("_")
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def parse_timestamp(value: Any) -> Any:
    """Normalize a date-like value to a naive UTC datetime.

    Accepts datetimes, dates and ISO-8601 strings (date-only, ``Z`` suffix
    and explicit offsets included). Anything else is handed back so the
    datetime validator can reject it with a proper message.
    """
    if value is None or value == "":
        return None

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError:
            return value

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    if isinstance(value, date):
        return datetime.combine(value, time.min)

    return value


Timestamp = Annotated[datetime, BeforeValidator(parse_timestamp)]


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the form every stored timestamp takes."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CamelModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python and SQL."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


def _plain(value: Any) -> Any:
    """Strip enum wrappers so storage only ever sees plain values."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def _unwrap(annotation: Any) -> Any:
    """Reduce Optional[...] / Annotated[...] to the underlying type."""
    origin = typing.get_origin(annotation)
    if origin is Annotated:
        return _unwrap(typing.get_args(annotation)[0])
    if origin in (Union, types.UnionType):
        args = [a for a in typing.get_args(annotation) if a is not type(None)]
        return _unwrap(args[0]) if len(args) == 1 else str
    return annotation


def column_kind(annotation: Any) -> str:
    """Map a field annotation to a storage kind."""
    base = _unwrap(annotation)
    origin = typing.get_origin(base) or base

    if origin in (list, dict):
        return "json"
    if isinstance(origin, type):
        if issubclass(origin, datetime):
            return "timestamp"
        if issubclass(origin, bool):
            return "integer"
        if issubclass(origin, Enum):
            return "text"
        if issubclass(origin, int):
            return "integer"
        if issubclass(origin, float):
            return "real"
    return "text"


def make_partial(model: type[CamelModel], name: str) -> type[CamelModel]:
    """Build an update model where every field may be omitted.

    Field types and constraints are kept, so an explicit ``null`` is still
    rejected for fields the canonical model does not allow to be null.
    """
    fields: dict[str, Any] = {}
    for field_name, info in model.model_fields.items():
        annotation = info.annotation
        if info.metadata:
            annotation = Annotated[(annotation, *info.metadata)]
        fields[field_name] = (annotation, Field(default=None))
    return create_model(name, __base__=CamelModel, **fields)


@dataclass(frozen=True)
class Resource:
    """A persisted entity type and everything storage needs to know about it."""

    name: str
    label: str
    table: str
    model: type[CamelModel]
    order_by: tuple[tuple[str, bool], ...] = (("created_at", True),)
    server_fields: tuple[str, ...] = ()
    now_fields: tuple[str, ...] = ()
    key_field: str | None = None
    update_model: type[CamelModel] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(
            self, "update_model", make_partial(self.model, f"Update{self.model.__name__}")
        )

    @property
    def fields(self) -> list[str]:
        """Client-writable fields, in declaration order."""
        return list(self.model.model_fields)

    @property
    def columns(self) -> dict[str, str]:
        """Every stored column mapped to its storage kind."""
        columns = {"id": "text"}
        for field_name, info in self.model.model_fields.items():
            columns[field_name] = column_kind(info.annotation)
        columns["created_at"] = "timestamp"
        for server_field in self.server_fields:
            columns[server_field] = "timestamp"
        return columns

    def validate_insert(self, payload: Any) -> dict:
        """Validate a full insert payload and return plain field values."""
        instance = self.model.model_validate(payload)
        return _plain(instance.model_dump())

    def validate_update(self, payload: Any) -> dict:
        """Validate a partial payload, keeping only the fields actually sent."""
        instance = self.update_model.model_validate(payload)
        return _plain(instance.model_dump(exclude_unset=True))


def to_json(record: dict | None) -> dict | None:
    """Serialize a stored record with camelCase keys and ISO timestamps."""
    if record is None:
        return None
    out = {}
    for key, value in record.items():
        if isinstance(value, datetime):
            value = value.isoformat()
        out[to_camel(key)] = value
    return out
