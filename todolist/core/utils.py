from typing import ContextManager
from abc import ABC, abstractmethod
import dateutil.parser
import datetime as dt
import re


class BaseStoreLock(ABC):
    """Serializes the access to a todo store shared by concurrent requests."""

    @abstractmethod
    def lock(self) -> "ContextManager":  # pragma: no cover
        """Returns a ContextManager that holds the lock while active.
        """


def get_now_utc() -> "dt.datetime":
    """Current time in UTC.

    Returns:
        dt.datetime: Current time in UTC.
    """
    return dt.datetime.now(tz=dt.timezone.utc)


regex = r'^(-?(?:[1-9][0-9]*)?[0-9]{4})-(1[0-2]|0[1-9])-(3[01]|0[1-9]|[12][0-9])T(2[0-3]|[01][0-9]):([0-5][0-9]):([0-5][0-9])(\.[0-9]+)?(Z|[+-](?:2[0-3]|[01][0-9]):[0-5][0-9])?$'
match_iso8601 = re.compile(regex).match


def parse_datetime(value: "str") -> "dt.datetime":
    """Converts a string to a dt.datetime object. Naive values are assumed to be UTC.

    Args:
        value (str): An ISO-8601 string.

    Returns:
        dt.datetime: The parsed dt.datetime
    """
    if not isinstance(value, str) or not match_iso8601(value):
        raise ValueError("Not an ISO-8601 string")

    parsed = dateutil.parser.isoparse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed


def parse_bool(value: "object") -> "bool":
    """Interprets form and environment values such as "on", "true" or "1" as True."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "on", "yes"}
