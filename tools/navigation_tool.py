"""Callback tokens and inline keyboard for report navigation."""

import re
from datetime import date
from typing import Dict, Tuple

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from tools.period_tool import (
    ReportKind,
    format_period,
    parse_period,
    shift_period,
    toggle_kind,
)
from translations import get_text

REPORT_PREFIX = "REPORT"
CLOSE_ACTION = "REPORT_CLOSE"

REPORT_PATTERN = re.compile(r"^REPORT\|(monthly|yearly)\|(\d{4}-\d{2})$")
CLOSE_PATTERN = re.compile(r"^REPORT_CLOSE$")


def encode_report_action(anchor: date, kind: ReportKind) -> str:
    return f"{REPORT_PREFIX}|{kind}|{format_period(anchor)}"


def decode_report_action(data: str) -> Tuple[date, ReportKind]:
    """Inverse of encode_report_action. Raises ValueError on foreign data."""
    match = REPORT_PATTERN.match(data or "")
    if not match:
        raise ValueError(f"Not a report action: {data!r}")
    kind, period = match.groups()
    return parse_period(period), kind


def build_navigation_actions(anchor: date, kind: ReportKind) -> Dict[str, str]:
    """Callback data for every control shown under a report."""
    return {
        "previous": encode_report_action(shift_period(anchor, kind, -1), kind),
        "next": encode_report_action(shift_period(anchor, kind, 1), kind),
        "toggle": encode_report_action(anchor, toggle_kind(kind)),
        "close": CLOSE_ACTION,
    }


def _button_label(anchor: date, kind: ReportKind) -> str:
    return anchor.strftime("%Y") if kind == "yearly" else anchor.strftime("%b %Y")


def get_report_keyboard(anchor: date, kind: ReportKind, lang: str = "en"):
    """Get the prev/next, toggle and done keyboard for a report."""
    actions = build_navigation_actions(anchor, kind)
    prev_label = _button_label(shift_period(anchor, kind, -1), kind)
    next_label = _button_label(shift_period(anchor, kind, 1), kind)
    toggle_key = "reports.showYearly" if kind == "monthly" else "reports.showMonthly"

    keyboard = [
        [
            InlineKeyboardButton(f"<< {prev_label}", callback_data=actions["previous"]),
            InlineKeyboardButton(f"{next_label} >>", callback_data=actions["next"])
        ],
        [
            InlineKeyboardButton(get_text(toggle_key, lang), callback_data=actions["toggle"]),
            InlineKeyboardButton(get_text("labels.DONE", lang), callback_data=actions["close"])
        ]
    ]
    return InlineKeyboardMarkup(keyboard)
