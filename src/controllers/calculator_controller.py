# controllers/calculator_controller.py
from __future__ import annotations
from datetime import MAXYEAR, MINYEAR, datetime
from typing import Callable, Optional

from assets import keytag_image_path, keytag_is_closed
from domain.models import DateInput, KeytagRender, ZERO_SPAN
from domain.rules import clamp, compute_date_span, days_in_month, select_milestones
from domain.state import CleantimeReport, WidgetState
from libuniversal import FIRST_YEAR, TagLayout
from localization import MessageBundle, describe_cleantime, get_bundle

class CalculatorController:
    def __init__(self, state: WidgetState, now: Callable[[], datetime] = datetime.now,
                 on_report: Optional[Callable[[CleantimeReport], None]] = None):
        self.state = state
        self.now = now
        self.on_report = on_report
        self.bundle: MessageBundle = get_bundle(state.settings.lang)

    def year_range(self) -> list[int]:
        return list(range(FIRST_YEAR, self.now().year + 1))

    def available_days(self, year: Optional[int] = None, month: Optional[int] = None) -> list[int]:
        year = self.state.year if year is None else year
        month = self.state.month if month is None else month
        return list(range(1, days_in_month(year, month) + 1))

    def select(self, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None):
        if year is not None:
            self.state.year = clamp(year, MINYEAR, MAXYEAR)
        if month is not None:
            self.state.month = clamp(month, 1, 12)
        if day is not None:
            self.state.day = day

        # keep the day inside the selected month
        self.state.day = clamp(self.state.day, 1, days_in_month(self.state.year, self.state.month))

    def calculate(self) -> CleantimeReport:
        return self._report_for(DateInput(self.state.year, self.state.month, self.state.day))

    def calculate_for(self, year: int, month: int, day: int) -> CleantimeReport:
        """
        Calculates for a date typed in rather than picked from the menus.
        A month or day no menu offers gives the invalid-date report and leaves
        the selection alone; a day past the end of the month is clamped.
        """
        if not (1 <= month <= 12 and 1 <= day <= 31 and MINYEAR <= year <= MAXYEAR):
            return self._report_for(DateInput(year, month, day))
        self.select(year=year, month=month, day=day)
        return self.calculate()

    def _report_for(self, date_input: DateInput) -> CleantimeReport:
        settings = self.state.settings
        start = date_input.to_datetime()

        span = ZERO_SPAN if start is None else compute_date_span(start, self.now())
        milestones = select_milestones(span.total_days, span.total_months, settings.special_tags)
        days_blurb, main_blurb = describe_cleantime(span, self.bundle)

        face = settings.tag_layout != TagLayout.LINEAR
        keytags = [
            KeytagRender(
                token=token,
                image_path=keytag_image_path(settings.dir_root, settings.lang, token, face),
                closed=keytag_is_closed(token, settings.tag_layout),
            )
            for token in milestones
        ]

        report = CleantimeReport(
            span=span,
            milestones=milestones,
            days_blurb=days_blurb,
            main_blurb=main_blurb,
            keytags=keytags,
        )
        self.state.report = report
        if self.on_report:
            self.on_report(report)
        return report
