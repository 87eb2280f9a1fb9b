import base64
import binascii
import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

DATE_FORMAT = "%d.%m.%Y"

_RU_DATE_RE = re.compile(r"^(0[1-9]|[12][0-9]|3[01])\.(0[1-9]|1[0-2])\.\d{4}$")


def parse_date(value: Any) -> Any:
    """Accept DD.MM.YYYY (and ISO YYYY-MM-DD) strings for date fields."""
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, str):
        return value

    text = value.strip()
    try:
        if _RU_DATE_RE.match(text):
            return datetime.strptime(text, DATE_FORMAT).date()
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError("Дата должна быть в формате ДД.ММ.ГГГГ")


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def to_utc(value: datetime) -> datetime:
    """Store every instant in UTC; naive values are taken as UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    return to_utc(value).isoformat()


def decode_photo(value: Any) -> Any:
    if value is None or isinstance(value, (bytes, bytearray)):
        return value
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError):
            raise ValueError("Фотография должна быть передана в кодировке base64")
    return value


def encode_photo(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


RuDate = Annotated[
    date,
    BeforeValidator(parse_date),
    PlainSerializer(format_date, return_type=str, when_used="json"),
]

Photo = Annotated[
    bytes,
    BeforeValidator(decode_photo),
    PlainSerializer(encode_photo, return_type=str, when_used="json"),
]

UtcDateTime = Annotated[
    datetime,
    AfterValidator(to_utc),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]

Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]
