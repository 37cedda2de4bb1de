"""
Conversions of the JSON values to/from the typed values of the entities.

The remote API sends the timestamps as ISO-8601 strings with the timezone
offsets (e.g. ``2024-05-01T12:34:56-07:00``), the sizes and counters as
numbers, and the ids as strings. The member parsers use these converters
to store the typed values in the entities; the entities use the formatters
to record the changes in the form the remote API expects.

Unlike the change tracking, which is total and never fails, the converters
do fail for the values they cannot interpret: it is the parsers' decision
whether to let it escalate or to ignore the member.
"""
import datetime
from typing import Any

import iso8601


class ConversionError(ValueError):
    """ A JSON value cannot be converted to the requested type. """


def parse_datetime(value: Any) -> datetime.datetime:
    if not isinstance(value, str):
        raise ConversionError(f"A timestamp must be a string. Got {value!r}")
    try:
        return iso8601.parse_date(value)  # always TZ-aware
    except iso8601.ParseError as e:
        raise ConversionError(f"Cannot parse the timestamp {value!r}: {e}") from e


def format_datetime(value: datetime.datetime) -> str:
    """
    Format a timestamp as the remote API expects: to seconds, with an offset.

    Naive timestamps are ambiguous (the local time of which machine?),
    so they are rejected instead of being silently shifted.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise ConversionError(f"A timestamp must be timezone-aware. Got {value!r}")
    return value.isoformat(timespec='seconds')


def parse_int(value: Any) -> int:
    if isinstance(value, bool):  # a subclass of int, but never meant as a number
        raise ConversionError(f"An integer cannot be a boolean. Got {value!r}")
    elif isinstance(value, int):
        return value
    elif isinstance(value, float) and value.is_integer():
        return int(value)
    elif isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise ConversionError(f"Cannot parse the integer {value!r}") from e
    else:
        raise ConversionError(f"An integer must be a number or a string. Got {value!r}")


def parse_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ConversionError(f"A number cannot be a boolean. Got {value!r}")
    elif isinstance(value, (int, float)):
        return float(value)
    elif isinstance(value, str):
        try:
            return float(value)
        except ValueError as e:
            raise ConversionError(f"Cannot parse the number {value!r}") from e
    else:
        raise ConversionError(f"A number must be a number or a string. Got {value!r}")


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    elif value == 'true':
        return True
    elif value == 'false':
        return False
    else:
        raise ConversionError(f"A boolean must be true/false. Got {value!r}")
