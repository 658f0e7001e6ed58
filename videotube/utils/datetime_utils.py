"""
Timestamps
==========

`createdAt`/`updatedAt` values for every document come from now(), in the
timezone named by the TIMEZONE setting.
"""
import logging
import zoneinfo
from datetime import datetime, timezone, tzinfo

from videotube.core.config import get_settings

logger = logging.getLogger(__name__)


def _configured_timezone() -> tzinfo:
    """Resolve TIMEZONE; unknown names fall back to UTC with a warning."""
    name = get_settings().timezone
    if name.upper() == "UTC":
        return timezone.utc

    try:
        return zoneinfo.ZoneInfo(name)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown TIMEZONE '{name}', using UTC")
        return timezone.utc


def now() -> datetime:
    """Timezone-aware current time."""
    return datetime.now(_configured_timezone())
