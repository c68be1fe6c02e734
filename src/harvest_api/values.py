"""
Wire value types for the Harvest API and helpers that build optional scalars.

Harvest sends calendar dates as ``YYYY-MM-DD`` and wall-clock times in
kitchen form (``3:04pm``). Both appear in JSON bodies and query strings
with the same textual form.
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import Annotated, Any, List, Optional, Tuple

from pydantic import GetCoreSchemaHandler, PlainSerializer
from pydantic_core import core_schema

from .errors import DateParseError, TimeParseError

DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
# 15:04, 7:34, 9:13am, 09:39PM
TIME_RE = re.compile(r"^([0-9]{1,2}):([0-9]{2})([AaPp][Mm])?$")

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


def _unquote(text: str) -> str:
    return text.strip().strip('"')


class Date(_dt.date):
    """A calendar date rendered as YYYY-MM-DD."""

    @classmethod
    def parse(cls, text: str) -> "Date":
        if not isinstance(text, str):
            raise DateParseError(
                'should be a string formatted as "2006-01-02", '
                f"got {type(text).__name__}"
            )
        match = DATE_RE.fullmatch(_unquote(text))
        if not match:
            raise DateParseError(
                f'should be a string formatted as "2006-01-02", got {text!r}'
            )
        try:
            return cls(*(int(part) for part in match.groups()))
        except ValueError as exc:
            raise DateParseError(f"{text!r} is not a calendar date: {exc}") from exc

    @classmethod
    def from_date(cls, value: _dt.date) -> "Date":
        if isinstance(value, cls):
            return value
        return cls(value.year, value.month, value.day)

    def encode_values(self, key: str, values: List[Tuple[str, str]]) -> None:
        values.append((key, str(self)))

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __repr__(self) -> str:
        return f"Date({self})"

    @classmethod
    def _validate(cls, value: Any) -> "Date":
        if isinstance(value, _dt.datetime):
            return cls.from_date(value.date())
        if isinstance(value, _dt.date):
            return cls.from_date(value)
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


class Time:
    """
    A wall-clock time of day (hour and minute).

    Parsed values are anchored to today's date in the local time zone; only
    the hour and minute are meaningful and equality compares just those.
    """

    __slots__ = ("_value",)

    def __init__(self, value: _dt.datetime):
        self._value = value.replace(second=0, microsecond=0)

    @classmethod
    def of(cls, hour: int, minute: int = 0) -> "Time":
        if not (0 <= hour <= 23 and 0 <= minute <= 59):
            raise TimeParseError(f"{hour}:{minute:02d} is not a time of day")
        today = _dt.datetime.now().astimezone()
        return cls(today.replace(hour=hour, minute=minute))

    @classmethod
    def from_time(cls, value: _dt.time) -> "Time":
        return cls.of(value.hour, value.minute)

    @classmethod
    def parse(cls, text: str) -> "Time":
        if not isinstance(text, str):
            raise TimeParseError(
                'should be a string formatted as "15:04", '
                f"got {type(text).__name__}"
            )
        match = TIME_RE.fullmatch(_unquote(text))
        if not match:
            raise TimeParseError(
                f'should be a string formatted as "15:04", got {text!r}'
            )

        hour, minute = int(match.group(1)), int(match.group(2))
        meridiem = (match.group(3) or "").lower()
        if minute > 59:
            raise TimeParseError(f"minute out of range in {text!r}")
        if meridiem:
            if hour > 12:
                raise TimeParseError(f"hour out of range for 12-hour clock in {text!r}")
            hour = hour % 12 + (12 if meridiem == "pm" else 0)
        elif hour > 23:
            raise TimeParseError(f"hour out of range in {text!r}")
        return cls.of(hour, minute)

    @property
    def value(self) -> _dt.datetime:
        return self._value

    @property
    def hour(self) -> int:
        return self._value.hour

    @property
    def minute(self) -> int:
        return self._value.minute

    def to_time(self) -> _dt.time:
        return _dt.time(self.hour, self.minute)

    def encode_values(self, key: str, values: List[Tuple[str, str]]) -> None:
        values.append((key, str(self)))

    def __str__(self) -> str:
        suffix = "am" if self.hour < 12 else "pm"
        return f"{self.hour % 12 or 12}:{self.minute:02d}{suffix}"

    def __repr__(self) -> str:
        return f"Time({self})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Time):
            return NotImplemented
        return (self.hour, self.minute) == (other.hour, other.minute)

    def __hash__(self) -> int:
        return hash((self.hour, self.minute))

    @classmethod
    def _validate(cls, value: Any) -> "Time":
        if isinstance(value, Time):
            return value
        if isinstance(value, (_dt.datetime, _dt.time)):
            return cls.of(value.hour, value.minute)
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def to_utc(value: _dt.datetime) -> _dt.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=_dt.timezone.utc)
    return value.astimezone(_dt.timezone.utc)


def format_timestamp(value: _dt.datetime) -> str:
    """RFC 3339 in UTC with a Z suffix; fractional seconds only when present."""
    utc = to_utc(value)
    text = utc.strftime("%Y-%m-%dT%H:%M:%S")
    if utc.microsecond:
        text += f".{utc.microsecond:06d}".rstrip("0")
    return text + "Z"


Timestamp = Annotated[
    _dt.datetime, PlainSerializer(format_timestamp, return_type=str, when_used="json")
]


# --- Optional scalar helpers ---


def as_bool(value: Optional[bool]) -> Optional[bool]:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise TypeError(f"expected bool, got {type(value).__name__}")
    return value


def _as_int(value: Optional[int], low: int, high: int) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if not low <= value <= high:
        raise ValueError(f"{value} out of range [{low}, {high}]")
    return value


def as_int32(value: Optional[int]) -> Optional[int]:
    return _as_int(value, INT32_MIN, INT32_MAX)


def as_int64(value: Optional[int]) -> Optional[int]:
    return _as_int(value, INT64_MIN, INT64_MAX)


def as_float(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected float, got {type(value).__name__}")
    return float(value)


def as_string(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


def as_date(value: Any) -> Optional[Date]:
    return None if value is None else Date._validate(value)


def as_time(value: Any) -> Optional[Time]:
    return None if value is None else Time._validate(value)


def as_timestamp(value: Optional[_dt.datetime]) -> Optional[_dt.datetime]:
    if value is None:
        return None
    if not isinstance(value, _dt.datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    return to_utc(value)


__all__ = [
    "Date",
    "Time",
    "Timestamp",
    "format_timestamp",
    "to_utc",
    "as_bool",
    "as_int32",
    "as_int64",
    "as_float",
    "as_string",
    "as_date",
    "as_time",
    "as_timestamp",
]
