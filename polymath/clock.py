"""Named time-zone offsets and conversion of aware datetimes between them."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

Ticks = int

# Offsets are written as signed hhmm values relative to GMT.
# A name defined more than once takes its last value.
_ZONE_DEFINITIONS: tuple[tuple[str, int], ...] = (
    ("GMT", 0),
    ("EAT", 300),
    ("CET", 100),
    ("WAT", 100),
    ("CAT", 200),
    ("SAST", 200),
    ("HST", -1000),
    ("AKST", -900),
    ("AST", -400),
    ("Othree", -300),
    ("EST", -500),
    ("HST", -1000),
    ("CST", -600),
    ("MST", -700),
    ("PST", -800),
    ("NST", -330),
    ("AEST", 1000),
    ("ATST", 500),
    ("NZST", 1200),
    ("Ofive", 500),
    ("Oseven", 700),
    ("Oeight", 800),
    ("IST", 530),
    ("EET", 200),
    ("Osix", 600),
    ("Oeight", 800),
    ("Onine", 900),
    ("CST", 800),
    ("GMTfivethirty", 530),
    ("HKT", 800),
    ("WIB", 700),
    ("WIT", 900),
    ("IsrealST", 200),
    ("GMTfourthirty", 430),
    ("GMTtwelve", 1200),
    ("PKT", 500),
    ("Ofivefourtyfive", 545),
    ("Oeleven", 1100),
    ("WITA", 800),
    ("PST", 800),
    ("EET", 200),
    ("WIB", 700),
    ("KST", 900),
    ("WITA", 800),
    ("Oten", 1000),
    ("Osixthirty", 630),
    ("Onegativeone", -100),
    ("ACST", 930),
    ("AWST", 800),
    ("MST", -700),
    ("NST", -330),
    ("CST", -600),
    ("MST", -700),
    ("CET", 100),
    ("EET", 200),
    ("MSK", 300),
    ("EAT", 300),
    ("EST", -500),
    ("JST", 900),
    ("Otwelve", 1200),
    ("PST", -800),
    ("ChST", 1000),
    ("HST", -1000),
    ("SST", -1100),
)

_ZONES: dict[str, int] = dict(_ZONE_DEFINITIONS)


def _hhmm_to_timedelta(value: int) -> timedelta:
    sign = -1 if value < 0 else 1
    hours, minutes = divmod(abs(value), 100)
    return sign * timedelta(hours=hours, minutes=minutes)


def utc_offset(name: str) -> timedelta:
    """Offset of the named zone from GMT."""
    try:
        value = _ZONES[name]
    except KeyError:
        raise KeyError(f"Unknown time zone: {name}") from None
    return _hhmm_to_timedelta(value)


def to_zone(moment: datetime, name: str) -> datetime:
    """The same instant as ``moment``, expressed in the named zone."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("moment must be timezone aware.")
    return moment.astimezone(timezone(utc_offset(name), name))


def zone_names() -> tuple[str, ...]:
    """Every known zone name, in order of first definition."""
    return tuple(_ZONES)