"""Wall clock in the configured timezone, truncated to the minute."""

from datetime import datetime

from pytz import timezone, utc


def current_time(tz_name: str = "UTC") -> datetime:
    """Local naive datetime for tz_name, seconds dropped.

    Every navigation and height computation receives this value explicitly.
    """
    local = datetime.now(utc).astimezone(timezone(tz_name))
    return local.replace(second=0, microsecond=0, tzinfo=None)
