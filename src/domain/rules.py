# domain/rules.py
import calendar
from datetime import date, datetime, timedelta

from domain.models import DateSpan, ZERO_SPAN, Keytag, yearly_milestone

def clamp(n, lo, hi):
    return max(lo, min(hi, n))

def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]

def _as_datetime(value) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")

def compute_date_span(from_dt, now) -> DateSpan:
    """
    Elapsed time from `from_dt` to `now`, as whole days and as a calendar
    breakdown (years, months, days). A `from_dt` at or after `now` gives the
    zero span.
    """
    start = _as_datetime(from_dt)
    end = _as_datetime(now)
    if end <= start:
        return ZERO_SPAN

    total_days = (end - start) // timedelta(days=1)

    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    if days < 0:
        # borrow the length of the start month
        months -= 1
        days += days_in_month(start.year, start.month)

    if months < 0:
        months += 12
        years -= 1

    return DateSpan(total_days=total_days, years=years, months=months, days=days)

def select_milestones(total_days: int, total_months: int, include_extended_tiers: bool) -> list[str]:
    tags: list[str] = []

    if total_days > 0:
        tags.append(Keytag.WHITE.value)
    if total_days > 29:
        tags.append(Keytag.ORANGE.value)
    if total_days > 59:
        tags.append(Keytag.GREEN.value)
    if total_days > 89:
        tags.append(Keytag.RED.value)

    if total_days <= 90:
        return tags

    if total_months > 5:
        tags.append(Keytag.SIX_MONTH.value)
    if total_months > 8:
        tags.append(Keytag.NINE_MONTH.value)
    if total_months > 11:
        tags.append(Keytag.ONE_YEAR.value)
    if total_months > 17:
        tags.append(Keytag.EIGHTEEN_MONTH.value)
    if total_months > 23:
        tags.append(Keytag.TWO_YEAR.value)

    # steps past the two year mark, one per whole year
    remaining = total_months - 12
    for i in range(24, remaining + 1, 12):
        special = None
        if include_extended_tiers:
            if i == 120:
                special = Keytag.DECADE
            elif i == 300:
                special = Keytag.TWENTY_FIVE_YEAR
            elif i % 360 == 0:
                special = Keytag.THIRTY_YEAR_MULTIPLE

        if special is None:
            tags.append(yearly_milestone(i // 12 + 1))
        else:
            tags.append(special.value)

        if include_extended_tiers and i == 324 and total_days > 9999:
            tags.append(Keytag.TEN_THOUSAND_DAY.value)

    return tags
