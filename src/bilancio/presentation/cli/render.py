"""Rich renderables for the reports."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Iterable

from rich.table import Table

from bilancio.domain.reporting import by_total_desc

if TYPE_CHECKING:
    from bilancio.domain.ledger.entities import Transaction
    from bilancio.domain.reporting import (
        AccountOverview,
        DescriptionTotalsReport,
        MonthSummary,
        TrendReport,
        YearSummary,
    )


def money(amount: Decimal, currency: str) -> str:
    return f"{amount:,.2f} {currency}"


def _signed(amount: Decimal, currency: str) -> str:
    style = "red" if amount < 0 else "green"
    return f"[{style}]{money(amount, currency)}[/{style}]"


def year_table(year: YearSummary, currency: str) -> Table:
    table = Table(title=f"{year.year}", show_footer=True)
    table.add_column("Month", footer="Total")
    table.add_column(
        "Earnings", justify="right", footer=money(year.total_earnings, currency)
    )
    table.add_column(
        "Expenses", justify="right", footer=money(year.total_expenses, currency)
    )
    table.add_column(
        "Withdrawals",
        justify="right",
        footer=money(year.total_withdrawals, currency),
    )
    table.add_column("Net", justify="right", footer=_signed(year.net, currency))
    table.add_column("Txns", justify="right", footer=str(year.transaction_count))

    for month in year.months:
        table.add_row(
            month.label,
            money(month.total_earnings, currency),
            money(month.total_expenses, currency),
            money(month.total_withdrawals, currency),
            _signed(month.net, currency),
            str(month.transaction_count),
        )
    return table


def month_detail_table(month: MonthSummary, currency: str) -> Table:
    """Category groups of a month, largest first."""
    table = Table(title=month.label)
    table.add_column("Type")
    table.add_column("Description")
    table.add_column("Count", justify="right")
    table.add_column("Total", justify="right")

    for group in by_total_desc(month.earning_groups):
        table.add_row(
            "Income",
            group.description or "-",
            str(group.count),
            money(group.total, currency),
        )
    for group in by_total_desc(month.expense_groups):
        table.add_row(
            "Expense",
            group.description or "-",
            str(group.count),
            money(group.total, currency),
        )
    if month.withdrawals:
        table.add_row(
            "Withdrawal",
            "-",
            str(len(month.withdrawals)),
            money(month.total_withdrawals, currency),
        )
    return table


def description_totals_table(report: DescriptionTotalsReport, currency: str) -> Table:
    table = Table(title=f"{report.year} by description")
    table.add_column("Type")
    table.add_column("Description")
    table.add_column("Total", justify="right")

    for item in report.earnings_by_total_desc():
        table.add_row("Income", item.description or "-", money(item.total, currency))
    for item in report.expenses_by_total_desc():
        table.add_row("Expense", item.description or "-", money(item.total, currency))
    table.add_section()
    table.add_row("", "Total earnings", money(report.total_earnings, currency))
    table.add_row("", "Total expenses", money(report.total_expenses, currency))
    table.add_row("", "Net", _signed(report.net, currency))
    return table


def trend_table(report: TrendReport, currency: str) -> Table:
    table = Table(title="Yearly trend")
    table.add_column("Year")
    table.add_column("Income", justify="right")
    table.add_column("Expenses", justify="right")
    table.add_column("Profit", justify="right")

    for point in report.points:
        table.add_row(
            str(point.year),
            money(point.income, currency),
            money(point.expenses, currency),
            _signed(point.profit, currency),
        )
    if report.points:
        table.add_section()
        table.add_row(
            "Average",
            money(report.average_income, currency),
            money(report.average_expenses, currency),
            _signed(report.average_profit, currency),
        )
    return table


def accounts_table(overview: AccountOverview, currency: str) -> Table:
    table = Table(title="Accounts", show_footer=True)
    table.add_column("Account", footer="Total")
    table.add_column(
        "Balance",
        justify="right",
        footer=_signed(overview.total_balance, currency),
    )
    table.add_column("Share", justify="right")

    for share in overview.shares:
        table.add_row(
            share.total.description,
            _signed(share.total.amount, currency),
            f"{share.percentage}%",
        )
    return table


def transactions_table(
    transactions: Iterable[Transaction],
    currency: str,
    title: str = "Transactions",
) -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("Description")
    table.add_column("Account")
    table.add_column("Amount", justify="right")

    for txn in transactions:
        account = str(txn.account)
        amount = _signed(txn.signed_amount, currency)
        if txn.source_account is not None:
            account = f"{txn.source_account} -> {account}"
            amount = money(txn.amount, currency)
        table.add_row(
            str(txn.id),
            txn.date.isoformat(),
            txn.type.label,
            txn.description or "",
            account,
            amount,
        )
    return table
