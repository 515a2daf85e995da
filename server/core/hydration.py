# server/core/hydration.py

from dataclasses import dataclass
from datetime import date, datetime, timezone

from models import WaterEntry


HYDRATION_XP_PER_CUP = 2


@dataclass
class HydrationResult:
    entries: list
    xp_bonus: int


def today_utc() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def _day_key(day) -> str:
    return day.isoformat() if isinstance(day, date) else str(day)


def hydration_bonus(cups: int) -> int:
    return round(cups * HYDRATION_XP_PER_CUP)


def find_entry(entries, day):
    key = _day_key(day)
    for entry in entries:
        if entry.date == key:
            return entry
    return None


def cups_for_day(entries, day) -> int:
    entry = find_entry(entries, day)
    return entry.cups if entry else 0


def log_water(entries, today, cups: int) -> HydrationResult:
    """
    Adds ``cups`` to the entry for ``today``, creating it on the first log
    of the day. The XP bonus depends only on the cups of this call.
    """
    entry = find_entry(entries, today)
    if entry:
        entry.cups += cups
    else:
        entries.append(WaterEntry(date=_day_key(today), cups=cups))

    return HydrationResult(entries=entries, xp_bonus=hydration_bonus(cups))
