"""Aggregate Firefly III category insights into a text report."""

import asyncio
import html
import logging
from typing import Dict, List, Tuple

from tabulate import DataRow, TableFormat, tabulate

from firefly import FireflyClient, InsightGroupEntry
from tools.period_tool import ReportPeriod
from translations import get_text

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"
CURRENCY_PLACEHOLDER = "💲"

# Borderless two-column layout: no left padding, one space between columns
CATEGORY_TABLE_FORMAT = TableFormat(
    lineabove=None,
    linebelowheader=None,
    linebetweenrows=None,
    linebelow=None,
    headerrow=DataRow("", " ", " "),
    datarow=DataRow("", " ", " "),
    padding=0,
    with_header_hide=None,
)


def _amount(entry: InsightGroupEntry) -> float:
    return abs(entry.difference_float or 0)


def _currency(entry: InsightGroupEntry) -> str:
    return entry.currency_code or CURRENCY_PLACEHOLDER


def format_category_data(entries: List[InsightGroupEntry]) -> str:
    """
    Render entries as an aligned name/amount table, largest amounts first.

    :param entries: Category entries for one side of the report.
    :return: The table text, or an empty string when there are no entries.
    """
    if not entries:
        return ""

    # sorted() is stable, so ties keep their API order
    ordered = sorted(entries, key=_amount, reverse=True)
    rows = [
        [entry.name or UNKNOWN_NAME, f"{_amount(entry):.2f} {_currency(entry)}"]
        for entry in ordered
    ]

    return tabulate(
        rows,
        tablefmt=CATEGORY_TABLE_FORMAT,
        colalign=("left", "left"),
        disable_numparse=True,
    )


def calculate_totals(entries: List[InsightGroupEntry]) -> Dict[str, float]:
    """Sum absolute amounts per currency code, in first-seen order."""
    totals: Dict[str, float] = {}
    for entry in entries:
        currency = _currency(entry)
        totals[currency] = totals.get(currency, 0.0) + _amount(entry)

    logger.debug("totals: %s", totals)
    return totals


def format_totals(totals: Dict[str, float]) -> str:
    return ", ".join(f"{amount:.2f} {currency}" for currency, amount in totals.items()) or "0"


def calculate_cashflow(
    income_totals: Dict[str, float], expense_totals: Dict[str, float]
) -> Dict[str, float]:
    """Income minus expenses for every currency seen on either side."""
    cashflow = dict(income_totals)
    for currency, amount in expense_totals.items():
        cashflow[currency] = cashflow.get(currency, 0.0) - amount
    return cashflow


def format_cashflow(cashflow: Dict[str, float]) -> str:
    parts = []
    for currency, amount in cashflow.items():
        amount = amount or 0.0  # -0.0 renders as +0.00
        sign = "+" if amount >= 0 else ""
        parts.append(f"{sign}{amount:.2f} {currency}")
    return ", ".join(parts) or "0"


def format_report_message(
    period: ReportPeriod,
    expense_data: List[InsightGroupEntry],
    income_data: List[InsightGroupEntry],
    lang: str = "en",
) -> str:
    """Assemble the localized HTML report for one period."""
    expenses = format_category_data(expense_data)
    income = format_category_data(income_data)

    expense_totals = calculate_totals(expense_data)
    income_totals = calculate_totals(income_data)
    cashflow = calculate_cashflow(income_totals, expense_totals)

    expense_total = get_text("reports.totalExpense", lang, total=format_totals(expense_totals))
    income_total = get_text("reports.totalIncome", lang, total=format_totals(income_totals))
    cashflow_text = get_text("reports.cashflow", lang, amount=format_cashflow(cashflow))

    logger.debug("expenseTotal: %s, incomeTotal: %s, cashflow: %s",
                 expense_total, income_total, cashflow_text)

    no_data = get_text("reports.noData", lang)
    return get_text(
        f"reports.{period.kind}",
        lang,
        period=period.label,
        expenses=html.escape(expenses) if expenses else no_data,
        income=html.escape(income) if income else no_data,
        expenseTotal=expense_total,
        incomeTotal=income_total,
        cashflow=cashflow_text,
    )


async def fetch_report_data(
    client: FireflyClient, period: ReportPeriod
) -> Tuple[List[InsightGroupEntry], List[InsightGroupEntry]]:
    """Fetch expense and income insights together; either failure fails both."""
    expense_data, income_data = await asyncio.gather(
        client.insight_expense_category(period.start_date, period.end_date),
        client.insight_income_category(period.start_date, period.end_date),
    )
    logger.info(
        "Fetched %d expense and %d income entries for %s",
        len(expense_data), len(income_data), period.label,
    )
    return expense_data, income_data
