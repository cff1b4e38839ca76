# localization.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Tuple

from domain.models import DateSpan
from libuniversal import DEFAULT_LANG

_PLACEHOLDER_RE = re.compile(r"%(%|d|s)")

def format_message(template: str, *values) -> str:
    """
    printf-style substitution for the message tables.
    %d takes an int, %s any value, %% is a literal percent.
    """
    needed = sum(1 for m in _PLACEHOLDER_RE.finditer(template) if m.group(1) != "%")
    if needed != len(values):
        raise ValueError(f"Template {template!r} expects {needed} values, got {len(values)}")

    it = iter(values)

    def _sub(match: re.Match) -> str:
        kind = match.group(1)
        if kind == "%":
            return "%"
        value = next(it)
        if kind == "d":
            return str(int(value))
        return str(value)

    return _PLACEHOLDER_RE.sub(_sub, template)

@dataclass(frozen=True)
class MessageBundle:
    section_title: str
    prompt: str
    calculate_button_text: str
    months: Tuple[str, ...]

    result_invalid: str
    result_1_day: str
    result_days_format: str

    result_1_month: str
    result_1_month_and_1_day: str
    result_1_month_days_format: str
    result_months_format: str
    result_months_and_1_day_format: str
    result_months_and_days_format: str

    result_1_year: str
    result_1_year_and_1_day: str
    result_1_year_days_format: str
    result_1_year_and_1_month: str
    result_1_year_1_month_and_1_day: str
    result_1_year_1_month_and_days_format: str
    result_1_year_months_format: str
    result_1_year_months_and_1_day_format: str
    result_1_year_months_and_days_format: str

    result_years_format: str
    result_years_and_1_day_format: str
    result_years_and_days_format: str
    result_years_and_1_month_format: str
    result_years_1_month_and_1_day_format: str
    result_years_1_month_and_days_format: str
    result_years_months_format: str
    result_years_months_and_1_day_format: str
    result_years_months_and_days_format: str

    def month_name(self, month: int) -> str:
        return self.months[month - 1]

ENGLISH = MessageBundle(
    section_title="NA Cleantime Calculator",
    prompt="Please enter your Clean Date",
    calculate_button_text="Calculate",
    months=(
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),

    result_invalid="Please select a valid cleandate!",
    result_1_day="You have been clean for 1 day!",
    result_days_format="You have been clean for %d days!",

    result_1_month="This is 1 month.",
    result_1_month_and_1_day="This is 1 month and 1 day.",
    result_1_month_days_format="This is 1 month and %d days.",
    result_months_format="This is %d months.",
    result_months_and_1_day_format="This is %d months and 1 day.",
    result_months_and_days_format="This is %d months and %d days.",

    result_1_year="This is 1 year.",
    result_1_year_and_1_day="This is 1 year and 1 day.",
    result_1_year_days_format="This is 1 year and %d days.",
    result_1_year_and_1_month="This is 1 year and 1 month.",
    result_1_year_1_month_and_1_day="This is 1 year, 1 month and 1 day.",
    result_1_year_1_month_and_days_format="This is 1 year, 1 month and %d days.",
    result_1_year_months_format="This is 1 year and %d months.",
    result_1_year_months_and_1_day_format="This is 1 year, %d months and 1 day.",
    result_1_year_months_and_days_format="This is 1 year, %d months and %d days.",

    result_years_format="This is %d years.",
    result_years_and_1_day_format="This is %d years and 1 day.",
    result_years_and_days_format="This is %d years and %d days.",
    result_years_and_1_month_format="This is %d years and 1 month.",
    result_years_1_month_and_1_day_format="This is %d years, 1 month and 1 day.",
    result_years_1_month_and_days_format="This is %d years, 1 month and %d days.",
    result_years_months_format="This is %d years and %d months.",
    result_years_months_and_1_day_format="This is %d years, %d months and 1 day.",
    result_years_months_and_days_format="This is %d years, %d months and %d days.",
)

BUNDLES: dict[str, MessageBundle] = {
    "en": ENGLISH,
}

def get_bundle(lang: str | None) -> MessageBundle:
    bundle = BUNDLES.get(lang or DEFAULT_LANG)
    if bundle is None:
        print(f"No messages for language '{lang}', using '{DEFAULT_LANG}'")
        return BUNDLES[DEFAULT_LANG]
    return bundle

# Each count is classed as "0", "1" or "n"; only "n" counts are passed to the template.
_MAIN_TEMPLATES = {
    ("0", "1", "0"): "result_1_month",
    ("0", "1", "1"): "result_1_month_and_1_day",
    ("0", "1", "n"): "result_1_month_days_format",
    ("0", "n", "0"): "result_months_format",
    ("0", "n", "1"): "result_months_and_1_day_format",
    ("0", "n", "n"): "result_months_and_days_format",

    ("1", "0", "0"): "result_1_year",
    ("1", "0", "1"): "result_1_year_and_1_day",
    ("1", "0", "n"): "result_1_year_days_format",
    ("1", "1", "0"): "result_1_year_and_1_month",
    ("1", "1", "1"): "result_1_year_1_month_and_1_day",
    ("1", "1", "n"): "result_1_year_1_month_and_days_format",
    ("1", "n", "0"): "result_1_year_months_format",
    ("1", "n", "1"): "result_1_year_months_and_1_day_format",
    ("1", "n", "n"): "result_1_year_months_and_days_format",

    ("n", "0", "0"): "result_years_format",
    ("n", "0", "1"): "result_years_and_1_day_format",
    ("n", "0", "n"): "result_years_and_days_format",
    ("n", "1", "0"): "result_years_and_1_month_format",
    ("n", "1", "1"): "result_years_1_month_and_1_day_format",
    ("n", "1", "n"): "result_years_1_month_and_days_format",
    ("n", "n", "0"): "result_years_months_format",
    ("n", "n", "1"): "result_years_months_and_1_day_format",
    ("n", "n", "n"): "result_years_months_and_days_format",
}

def _count_class(n: int) -> str:
    if n <= 0:
        return "0"
    if n == 1:
        return "1"
    return "n"

def describe_cleantime(span: DateSpan, bundle: MessageBundle) -> tuple[str, str]:
    """
    Returns (days_blurb, main_blurb). The years/months/days blurb is only
    given once more than 90 days have passed; before that it is empty.
    """
    if span.total_days <= 0:
        return bundle.result_invalid, ""

    if span.total_days == 1:
        days_blurb = bundle.result_1_day
    else:
        days_blurb = format_message(bundle.result_days_format, span.total_days)

    if span.total_days <= 90:
        return days_blurb, ""

    counts = (span.years, span.months, span.days)
    key = tuple(_count_class(n) for n in counts)
    name = _MAIN_TEMPLATES.get(key)
    if name is None:
        return days_blurb, ""

    values = [n for cls, n in zip(key, counts) if cls == "n"]
    return days_blurb, format_message(getattr(bundle, name), *values)
