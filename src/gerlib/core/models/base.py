"""Shared pydantic base and field types for the REST entities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_timestamp(value: Any) -> Any:
    """Parse ``yyyy-mm-dd hh:mm:ss.fffffffff`` (UTC) into an aware datetime.

    The server sends nanosecond precision; digits beyond microseconds are
    dropped.  Values that are already ``datetime`` pass through so models
    can be built directly in Python.
    """
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str):
        return value

    base, _, fraction = value.partition(".")
    parsed = datetime.strptime(base, _TIMESTAMP_FORMAT)
    micros = int(fraction[:6].ljust(6, "0")) if fraction else 0
    return parsed.replace(microsecond=micros, tzinfo=timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render *value* in the server's nanosecond timestamp format."""
    utc = value.astimezone(timezone.utc) if value.tzinfo else value
    return f"{utc.strftime(_TIMESTAMP_FORMAT)}.{utc.microsecond:06d}000"


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]
"""Server timestamp: ``"2013-02-01 09:59:32.126000000"`` on the wire."""


class GerritModel(BaseModel):
    """Immutable record mirroring one documented JSON entity.

    Unknown fields are ignored so newer servers do not break decoding.
    Fields whose wire name is not a valid attribute (``_number``,
    ``ref``) carry an alias and accept either spelling on construction.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )

    def to_json(self) -> str:
        """Serialize by wire alias, omitting unset fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
