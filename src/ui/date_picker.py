# ui/date_picker.py
from __future__ import annotations

import customtkinter as ctk
from typing import Callable, Optional

from controllers.calculator_controller import CalculatorController
from localization import MessageBundle


class DatePicker(ctk.CTkFrame):
    """
    Month / day / year menus plus the Calculate button.
    The day menu only offers days that exist in the selected month.
    """
    def __init__(
        self,
        parent,
        controller: CalculatorController,
        bundle: MessageBundle,
        on_calculate: Optional[Callable[[], None]] = None,
        font=("Arial", 14),
    ):
        super().__init__(parent, fg_color="transparent")

        self.controller = controller
        self.bundle = bundle
        self.on_calculate = on_calculate

        state = controller.state

        self.month_menu = ctk.CTkOptionMenu(
            self,
            values=list(bundle.months),
            command=self._on_month,
            font=font,
            width=140,
        )
        self.month_menu.set(bundle.month_name(state.month))
        self.month_menu.pack(side="left", padx=4)

        self.day_menu = ctk.CTkOptionMenu(self, values=["1"], command=self._on_day, font=font, width=70)
        self.day_menu.pack(side="left", padx=4)

        self.year_menu = ctk.CTkOptionMenu(
            self,
            values=[str(y) for y in controller.year_range()],
            command=self._on_year,
            font=font,
            width=90,
        )
        self.year_menu.set(str(state.year))
        self.year_menu.pack(side="left", padx=4)

        self.calculate_button = ctk.CTkButton(
            self,
            text=bundle.calculate_button_text,
            command=self._handle_calculate,
            font=font,
            width=110,
        )
        self.calculate_button.pack(side="left", padx=(12, 4))

        self.refresh_days()

    # -------- public API (used by gui.py) --------

    def refresh_days(self):
        state = self.controller.state
        days = self.controller.available_days()
        self.day_menu.configure(values=[str(d) for d in days])
        self.day_menu.set(str(state.day))

    def sync_from_state(self):
        state = self.controller.state
        self.month_menu.set(self.bundle.month_name(state.month))
        self.year_menu.set(str(state.year))
        self.refresh_days()

    # -------- internal --------

    def _on_month(self, value: str):
        self.controller.select(month=self.bundle.months.index(value) + 1)
        self.refresh_days()

    def _on_year(self, value: str):
        self.controller.select(year=int(value))
        self.refresh_days()

    def _on_day(self, value: str):
        self.controller.select(day=int(value))

    def _handle_calculate(self):
        if self.on_calculate:
            self.on_calculate()
