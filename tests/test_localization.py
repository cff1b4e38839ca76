import re

import pytest

from domain.models import DateSpan, ZERO_SPAN
from localization import BUNDLES, ENGLISH, _MAIN_TEMPLATES, describe_cleantime, format_message, get_bundle


def test_format_message_substitutes_in_order():
    assert format_message("This is %d years and %d months.", 3, 4) == "This is 3 years and 4 months."
    assert format_message("%s: %d%%", "done", 75) == "done: 75%"
    assert format_message("No placeholders") == "No placeholders"


def test_format_message_rejects_wrong_value_count():
    with pytest.raises(ValueError):
        format_message("This is %d years.")
    with pytest.raises(ValueError):
        format_message("This is %d years.", 1, 2)


def test_unknown_language_falls_back_to_english(capsys):
    assert get_bundle("xx") is ENGLISH
    assert "xx" in capsys.readouterr().out
    assert get_bundle(None) is ENGLISH
    assert get_bundle("en") is BUNDLES["en"]


def test_month_names():
    assert ENGLISH.month_name(1) == "January"
    assert ENGLISH.month_name(12) == "December"
    assert len(ENGLISH.months) == 12


def test_every_main_template_matches_its_counts():
    for key, name in _MAIN_TEMPLATES.items():
        template = getattr(ENGLISH, name)
        placeholders = len(re.findall(r"%d", template))
        assert placeholders == key.count("n"), name


def test_zero_span_is_invalid():
    assert describe_cleantime(ZERO_SPAN, ENGLISH) == ("Please select a valid cleandate!", "")


def test_single_day():
    days, main = describe_cleantime(DateSpan(1, 0, 0, 1), ENGLISH)
    assert days == "You have been clean for 1 day!"
    assert main == ""


def test_no_breakdown_until_ninety_days_pass():
    assert describe_cleantime(DateSpan(45, 0, 1, 14), ENGLISH) == ("You have been clean for 45 days!", "")
    assert describe_cleantime(DateSpan(90, 0, 2, 29), ENGLISH)[1] == ""


@pytest.mark.parametrize(
    "span, expected",
    [
        (DateSpan(120, 0, 3, 28), "This is 3 months and 28 days."),
        (DateSpan(122, 0, 4, 0), "This is 4 months."),
        (DateSpan(123, 0, 4, 1), "This is 4 months and 1 day."),
        (DateSpan(365, 1, 0, 0), "This is 1 year."),
        (DateSpan(366, 1, 0, 1), "This is 1 year and 1 day."),
        (DateSpan(372, 1, 0, 7), "This is 1 year and 7 days."),
        (DateSpan(396, 1, 1, 0), "This is 1 year and 1 month."),
        (DateSpan(397, 1, 1, 1), "This is 1 year, 1 month and 1 day."),
        (DateSpan(400, 1, 1, 4), "This is 1 year, 1 month and 4 days."),
        (DateSpan(426, 1, 2, 1), "This is 1 year, 2 months and 1 day."),
        (DateSpan(730, 2, 0, 0), "This is 2 years."),
        (DateSpan(761, 2, 1, 0), "This is 2 years and 1 month."),
        (DateSpan(762, 2, 1, 1), "This is 2 years, 1 month and 1 day."),
        (DateSpan(770, 2, 1, 9), "This is 2 years, 1 month and 9 days."),
        (DateSpan(800, 2, 2, 1), "This is 2 years, 2 months and 1 day."),
        (DateSpan(1200, 3, 3, 13), "This is 3 years, 3 months and 13 days."),
    ],
)
def test_breakdown_wording(span, expected):
    days, main = describe_cleantime(span, ENGLISH)
    assert days == f"You have been clean for {span.total_days} days!"
    assert main == expected
