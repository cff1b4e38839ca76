# domain/models.py
from __future__ import annotations
import calendar
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

YEARLY_PREFIX = "year-"

class Keytag(str, Enum):
    WHITE = "white"
    ORANGE = "orange"
    GREEN = "green"
    RED = "red"
    SIX_MONTH = "6-month"
    NINE_MONTH = "9-month"
    ONE_YEAR = "1-year"
    EIGHTEEN_MONTH = "18-month"
    TWO_YEAR = "2-year"
    DECADE = "decade"
    TWENTY_FIVE_YEAR = "25-year"
    THIRTY_YEAR_MULTIPLE = "30-year-multiple"
    TEN_THOUSAND_DAY = "10000-day"

# image file codes, as printed on the tag sheets
KEYTAG_CODES = {
    Keytag.WHITE: "01",
    Keytag.ORANGE: "02",
    Keytag.GREEN: "03",
    Keytag.RED: "04",
    Keytag.SIX_MONTH: "05",
    Keytag.NINE_MONTH: "06",
    Keytag.ONE_YEAR: "07",
    Keytag.EIGHTEEN_MONTH: "08",
    Keytag.TWO_YEAR: "09",
    Keytag.DECADE: "10",
    Keytag.TWENTY_FIVE_YEAR: "12",
    Keytag.TEN_THOUSAND_DAY: "13",
    Keytag.THIRTY_YEAR_MULTIPLE: "14",
}

# multi-year tags reuse the black two-year tag
YEARLY_CODE = KEYTAG_CODES[Keytag.TWO_YEAR]

# placeholder colours when a tag image is missing
KEYTAG_COLORS = {
    "01": "white",
    "02": "orange",
    "03": "green",
    "04": "red",
    "05": "blue",
    "06": "yellow",
    "07": "#d4af37",
    "08": "gray",
    "09": "black",
    "10": "#676767",
    "12": "silver",
    "13": "purple",
    "14": "#b08d57",
}

def yearly_milestone(years: int) -> str:
    return f"{YEARLY_PREFIX}{years}"

def is_yearly_milestone(token: str) -> bool:
    return token.startswith(YEARLY_PREFIX) and token[len(YEARLY_PREFIX):].isdigit()

def keytag_code(token: str) -> str:
    if is_yearly_milestone(token):
        return YEARLY_CODE
    return KEYTAG_CODES[Keytag(token)]

@dataclass(frozen=True)
class DateSpan:
    total_days: int = 0
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months

    @property
    def is_empty(self) -> bool:
        return self.total_days == 0 and self.years == 0 and self.months == 0 and self.days == 0

ZERO_SPAN = DateSpan()

@dataclass(frozen=True)
class DateInput:
    year: int
    month: int
    day: int

    def is_valid(self) -> bool:
        if not (1 <= self.month <= 12) or not (datetime.min.year <= self.year <= datetime.max.year):
            return False
        return 1 <= self.day <= calendar.monthrange(self.year, self.month)[1]

    def to_datetime(self) -> Optional[datetime]:
        """Local midnight of the date, or None when the triple is not a calendar date."""
        if not self.is_valid():
            return None
        return datetime(self.year, self.month, self.day)

@dataclass(frozen=True)
class KeytagRender:
    token: str
    image_path: str
    closed: bool = False
