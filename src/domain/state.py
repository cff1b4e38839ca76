# domain/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from domain.models import DateSpan, KeytagRender
from libuniversal import DEFAULT_LANG, TagLayout

@dataclass
class Settings:
    lang: str = DEFAULT_LANG
    style: Optional[str] = None
    tag_layout: TagLayout = TagLayout.LINEAR
    special_tags: bool = False
    dir_root: str = ""

@dataclass
class CleantimeReport:
    span: DateSpan
    milestones: list[str]
    days_blurb: str
    main_blurb: str
    keytags: list[KeytagRender] = field(default_factory=list)

@dataclass
class WidgetState:
    year: int
    month: int
    day: int
    settings: Settings = field(default_factory=Settings)
    report: Optional[CleantimeReport] = None

    @classmethod
    def for_today(cls, now: datetime, settings: Optional[Settings] = None) -> "WidgetState":
        return cls(year=now.year, month=now.month, day=now.day, settings=settings or Settings())
