"""Timezone handling for timestamps stored by the CRM.

Every timestamp leaving the persistence layer is aware and expressed in the
configured ``APP_TIMEZONE``. Columns are plain ``DateTime`` on every backend:
values are written as naive local wall-clock times and re-localized on read.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from atelier_crm.config import Settings, get_settings

_FIXED_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)
_ZULU_SUFFIXES: Final[tuple[str, ...]] = ("Z", "z")


def _fixed_offset(name: str) -> tzinfo | None:
    match = _FIXED_OFFSET.match(name)
    if match is None:
        return None
    delta = timedelta(
        hours=int(match["hours"]), minutes=int(match["minutes"] or 0)
    )
    return timezone(-delta if match["sign"] == "-" else delta)


def _resolve_timezone(name: str) -> tzinfo:
    if not name or name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return _fixed_offset(name) or timezone.utc


_configured_timezone: str | None = None


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the application timezone.

    The name applied by ``configure_app_timezone`` wins; otherwise
    ``Settings.app_timezone`` from the environment is used. IANA names and
    ``UTC+HH:MM`` style offsets are understood; anything else means UTC.
    """

    name = _configured_timezone
    if name is None:
        name = get_settings().app_timezone
    return _resolve_timezone((name or "").strip())


def configure_app_timezone(settings: Settings) -> tzinfo:
    """Make ``settings.app_timezone`` the timezone used by every helper."""

    global _configured_timezone
    _configured_timezone = settings.app_timezone
    get_app_timezone.cache_clear()
    return get_app_timezone()


def reset_app_timezone() -> None:
    """Forget any configured timezone and fall back to the environment."""

    global _configured_timezone
    _configured_timezone = None
    get_app_timezone.cache_clear()


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Current local wall-clock time, the form every timestamp column stores."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Express ``value`` in the app timezone; naive values are taken as local."""

    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=get_app_timezone())
    return value.astimezone(get_app_timezone())


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Local wall-clock form of ``value`` suitable for an offset-less column."""

    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)


def parse_app_datetime(value: object) -> datetime | None:
    """Coerce ``value`` into an aware datetime, returning ``None`` when impossible.

    Accepts ``datetime`` and ``date`` instances as well as ISO-8601 strings,
    including the trailing ``Z`` form emitted by most JSON encoders. Instants
    that fall outside the representable range once moved into the app
    timezone also yield ``None``.
    """

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(_ZULU_SUFFIXES):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    try:
        return ensure_app_timezone(parsed)
    except OverflowError:
        return None
