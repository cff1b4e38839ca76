# cleantime_cli.py
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from typing import Callable, Optional

import configreader
from controllers.calculator_controller import CalculatorController
from domain.models import DateInput
from domain.state import Settings, WidgetState
from libuniversal import ConfigKey, TagLayout


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--year", type=int, help="Clean date year")
    p.add_argument("--month", type=int, help="Clean date month (1-12)")
    p.add_argument("--day", type=int, help="Clean date day of month")
    p.add_argument("--lang", help="Language key for messages and keytag images")
    p.add_argument("--style", help="Appearance mode or colour theme")
    p.add_argument("--layout", choices=[l.value for l in TagLayout], help="Keytag layout")
    p.add_argument("--special-tags", action=argparse.BooleanOptionalAction, default=None,
                   help="Show decade, 25-year, 30-year and 10,000 day keytags (overrides the config)")
    p.add_argument("--dir-root", help="Folder holding images/<lang>/")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cleantime")
    parser.add_argument("--config", default=None, help="Path to the YAML config file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_gui = sub.add_parser("gui", help="Open the calculator window")
    _add_common(p_gui)

    p_calc = sub.add_parser("calc", help="Print the cleantime for a date")
    _add_common(p_calc)

    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    cfg = configreader.get_config(args.config)
    overrides = {
        ConfigKey.LANG: args.lang,
        ConfigKey.STYLE: args.style,
        ConfigKey.TAG_LAYOUT: args.layout,
        ConfigKey.SPECIAL_TAGS: args.special_tags,
        ConfigKey.DIR_ROOT: args.dir_root,
    }
    return configreader.resolve_settings(cfg, overrides)


def _start_date(args: argparse.Namespace) -> Optional[DateInput]:
    if args.year and args.month and args.day:
        return DateInput(args.year, args.month, args.day)
    return None


def main(argv: list[str] | None = None, now: Callable[[], datetime] = datetime.now) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = _settings_from_args(args)
    start = _start_date(args)

    if args.cmd == "calc":
        if start is None:
            print("calc needs --year, --month and --day", file=sys.stderr)
            return 2
        controller = CalculatorController(WidgetState.for_today(now(), settings), now=now)
        report = controller.calculate_for(start.year, start.month, start.day)
        print(report.days_blurb)
        if report.main_blurb:
            print(report.main_blurb)
        if report.milestones:
            print("Keytags: " + ", ".join(report.milestones))
        return 0

    if args.cmd == "gui":
        # imported here so calc works without a display
        import gui
        gui.run(settings, start)
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
