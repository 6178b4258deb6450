"""
Calendar helpers for review gating.

Day arithmetic runs on local wall-clock time so day boundaries follow the
user's current time zone, including daylight-saving transitions.
"""

from datetime import UTC, datetime, timedelta


def utc_now() -> datetime:
    """Get current UTC timestamp."""
    return datetime.now(UTC)


def add_calendar_days(moment: datetime, days: int) -> datetime:
    """
    Add whole calendar days to a timestamp in the system's local time zone.

    The local zone is looked up on every call, so a change of zone on the
    host is picked up immediately.

    Args:
        moment: Timezone-aware timestamp (naive values are taken as UTC)
        days: Number of calendar days to add

    Returns:
        Timezone-aware timestamp at the same local wall-clock time `days` later
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    local_wall_clock = moment.astimezone().replace(tzinfo=None)
    # A naive datetime is interpreted as local time by astimezone()
    return (local_wall_clock + timedelta(days=days)).astimezone()
