"""Resolve report periods (monthly/yearly) into concrete date ranges."""

from datetime import date, datetime
from typing import Literal, Optional, Union

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, Field

ReportKind = Literal["monthly", "yearly"]

PERIOD_FORMATS = ("%Y-%m", "%Y-%m-%d", "%Y")


class ReportPeriod(BaseModel):
    anchor: date = Field(description="First day of the month the report is anchored on")
    kind: ReportKind = Field(description="Report granularity")
    start_date: date = Field(description="First day of the period (inclusive)")
    end_date: date = Field(description="Last day of the period (inclusive)")
    label: str = Field(description="Human-readable period name")


def parse_period(period: str) -> date:
    """
    Parse a period string into its month anchor.

    Accepts "YYYY-MM", "YYYY-MM-DD" or "YYYY" and always returns the first
    day of the month. Raises ValueError if none of the formats match.
    """
    for fmt in PERIOD_FORMATS:
        try:
            return datetime.strptime(period, fmt).date().replace(day=1)
        except ValueError:
            continue
    raise ValueError(f"Invalid period: {period!r}")


def format_period(anchor: date) -> str:
    return anchor.strftime("%Y-%m")


def shift_period(anchor: date, kind: ReportKind, step: int) -> date:
    """Move the anchor by `step` calendar months or years."""
    if kind == "yearly":
        return anchor + relativedelta(years=step)
    return anchor + relativedelta(months=step)


def toggle_kind(kind: ReportKind) -> ReportKind:
    return "yearly" if kind == "monthly" else "monthly"


def resolve_period(
    period: Union[str, date, None] = None,
    kind: ReportKind = "monthly",
    today: Optional[date] = None,
) -> ReportPeriod:
    """
    Turn an anchor and a report kind into a date range and display label.

    :param period: Period string or date from a navigation action, or None for "now".
    :param kind: "monthly" or "yearly".
    :param today: Reference date used when period is None.
    :return: The resolved ReportPeriod.
    """
    if period is None:
        anchor = (today or date.today()).replace(day=1)
    elif isinstance(period, datetime):
        anchor = period.date().replace(day=1)
    elif isinstance(period, date):
        anchor = period.replace(day=1)
    else:
        anchor = parse_period(period)

    if kind == "yearly":
        start_date = anchor.replace(month=1, day=1)
        end_date = anchor.replace(month=12, day=31)
        label = anchor.strftime("%Y")
    else:
        start_date = anchor
        end_date = anchor + relativedelta(months=1, days=-1)
        label = anchor.strftime("%B %Y")

    return ReportPeriod(
        anchor=anchor,
        kind=kind,
        start_date=start_date,
        end_date=end_date,
        label=label,
    )
