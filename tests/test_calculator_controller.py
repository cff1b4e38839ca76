import os
from datetime import datetime

from controllers.calculator_controller import CalculatorController
from domain.state import Settings, WidgetState
from libuniversal import TagLayout

NOW = datetime(2024, 3, 1, 10, 0)


def _controller(**settings) -> CalculatorController:
    state = WidgetState.for_today(NOW, Settings(**settings))
    return CalculatorController(state, now=lambda: NOW)


def test_starts_on_today():
    c = _controller()
    assert (c.state.year, c.state.month, c.state.day) == (2024, 3, 1)
    assert c.state.report is None


def test_year_range_runs_to_this_year():
    years = _controller().year_range()
    assert years[0] == 1953
    assert years[-1] == 2024


def test_available_days_follow_the_month():
    c = _controller()
    assert len(c.available_days(2024, 2)) == 29
    assert len(c.available_days(2023, 2)) == 28
    assert c.available_days(2023, 4)[-1] == 30


def test_select_clamps_day_to_month():
    c = _controller()
    c.select(year=2023, month=1, day=31)
    c.select(month=2)
    assert c.state.day == 28

    c.select(year=2024)
    assert c.state.day == 28
    c.select(day=29)
    assert c.state.day == 29


def test_one_day_report():
    c = _controller()
    report = c.calculate_for(2024, 2, 29)

    assert report.span.total_days == 1
    assert report.milestones == ["white"]
    assert report.days_blurb == "You have been clean for 1 day!"
    assert report.main_blurb == ""
    assert len(report.keytags) == 1

    tag = report.keytags[0]
    assert tag.token == "white"
    assert tag.closed is True
    assert tag.image_path.endswith(os.path.join("images", "en", "01.png"))
    assert c.state.report is report


def test_future_date_is_invalid():
    report = _controller().calculate_for(2024, 3, 2)
    assert report.span.is_empty
    assert report.milestones == []
    assert report.keytags == []
    assert report.days_blurb == "Please select a valid cleandate!"


def test_linear_layout_uses_back_faces_and_open_rings():
    report = _controller(dir_root="/srv/nacc").calculate_for(2023, 1, 1)

    assert report.milestones[:4] == ["white", "orange", "green", "red"]
    assert report.main_blurb == "This is 1 year and 2 months."
    closed = [t.closed for t in report.keytags]
    assert closed[0] is True
    assert not any(closed[1:])
    assert report.keytags[1].image_path == os.path.join("/srv/nacc", "images", "en", "02.png")


def test_tabular_layout_uses_front_faces_and_closed_rings():
    report = _controller(tag_layout=TagLayout.TABULAR).calculate_for(2020, 1, 1)

    assert all(t.closed for t in report.keytags)
    assert all(t.image_path.endswith("_Front.png") for t in report.keytags)
    assert report.milestones[-1] == "year-4"
    assert report.keytags[-1].image_path.endswith("09_Front.png")


def test_special_tags_setting_reaches_the_selector():
    plain = _controller().calculate_for(1990, 1, 1)
    special = _controller(special_tags=True).calculate_for(1990, 1, 1)

    assert "decade" not in plain.milestones
    assert "decade" in special.milestones
    assert "25-year" in special.milestones
    assert "30-year-multiple" in special.milestones
    assert "10000-day" in special.milestones


def test_on_report_callback():
    seen = []
    c = _controller()
    c.on_report = seen.append
    report = c.calculate_for(2023, 12, 1)
    assert seen == [report]


def test_out_of_range_input_gives_invalid_report_and_keeps_selection():
    c = _controller()
    c.select(year=2020, month=6, day=15)

    for year, month, day in [(2020, 13, 1), (2020, 2, 45), (2020, 0, 1), (0, 1, 1)]:
        report = c.calculate_for(year, month, day)
        assert report.span.is_empty
        assert report.milestones == []
        assert report.days_blurb == "Please select a valid cleandate!"

    assert (c.state.year, c.state.month, c.state.day) == (2020, 6, 15)


def test_typed_day_past_month_end_is_clamped():
    c = _controller()
    report = c.calculate_for(2023, 2, 31)
    assert c.state.day == 28
    assert report.span.total_days == 367
