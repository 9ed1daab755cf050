"""Creation timestamps for stored notifications."""

from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from forager_notifications.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def notification_timezone() -> tzinfo:
    """Return the zone named by ``APP_TIMEZONE``, or UTC when it is unknown."""

    name = get_settings().app_timezone.strip()
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown APP_TIMEZONE %r; stamping notifications in UTC", name)
        return timezone.utc


def notification_timestamp() -> datetime:
    return datetime.now(tz=notification_timezone())
