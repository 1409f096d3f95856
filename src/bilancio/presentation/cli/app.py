"""Bilancio CLI application using Typer.

Reports are computed locally from the transactions fetched from the
backend. ``report file`` works on a JSON export without any network
access.
"""

import asyncio
import json
import logging
import sys
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Awaitable, Callable, NoReturn, Optional, TypeVar

import typer
from bilancio_auth import AuthError
from bilancio_config import get_settings
from rich.console import Console

from bilancio.application.commands import LoginCommand, LogoutCommand
from bilancio.application.queries import (
    AccountOverviewQuery,
    CurrentUserQuery,
    DescriptionTotalsQuery,
    ListTransactionsPageQuery,
    TransactionsByYearQuery,
    TrendQuery,
)
from bilancio.domain.ledger.exceptions import PayloadValidationError
from bilancio.domain.reporting import YearSummary, aggregate
from bilancio.domain.shared import DomainException
from bilancio.infrastructure.api import ApiError
from bilancio.infrastructure.api.mappers import parse_transactions
from bilancio.infrastructure.factory import ApiClientFactory
from bilancio.presentation.cli import render

T = TypeVar("T")

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="bilancio",
    help="Bilancio - personal finance reports from the command line",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

report_app = typer.Typer(
    name="report",
    help="Aggregated reports of your transactions",
    no_args_is_help=True,
)
app.add_typer(report_app)


@lru_cache()
def _configure_logging(log_level_str: str) -> None:
    """Configure logging once per process.

    Log lines go to stderr so they never mix with report output.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=logging.WARNING,
        format=log_format,
        datefmt=date_format,
        stream=sys.stderr,
        force=True,
    )

    logging.getLogger("bilancio").setLevel(log_level)
    logging.getLogger("bilancio_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code=1)


def _run(
    use_case: Callable[[ApiClientFactory], Awaitable[T]],
    require_login: bool = True,
) -> T:
    """Run an async use case against the backend with the stored session."""

    async def _main() -> T:
        factory = ApiClientFactory(get_settings())
        factory.session.hydrate()
        try:
            if require_login:
                factory.session.require_user()
            return await use_case(factory)
        finally:
            await factory.close()

    try:
        return asyncio.run(_main())
    except (ApiError, AuthError, DomainException) as e:
        logger.debug("Command failed", exc_info=True)
        _fail(e.message)


def _print_years(years: list[YearSummary], details: bool) -> None:
    currency = get_settings().currency
    if not years:
        console.print("[yellow]No transactions found.[/yellow]")
        return
    for year in years:
        console.print(render.year_table(year, currency))
        if details:
            for month in year.months:
                console.print(render.month_detail_table(month, currency))


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr"
    ),
) -> None:
    """Bilancio - personal finance reports from the command line."""
    _configure_logging("DEBUG" if verbose else get_settings().log_level)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------


@app.command()
def login(
    username: Optional[str] = typer.Option(
        None, "--username", "-u", help="Username or email"
    ),
    google_credential: Optional[str] = typer.Option(
        None, "--google-credential", help="Google ID token instead of a password"
    ),
) -> None:
    """Log in and remember the session."""
    password = None
    if google_credential is None:
        if username is None:
            username = typer.prompt("Username or email")
        password = typer.prompt("Password", hide_input=True)

    async def _login(factory: ApiClientFactory):
        command = LoginCommand.from_factory(factory)
        if google_credential is not None:
            return await command.execute_google(google_credential)
        return await command.execute(username, password)

    user = _run(_login, require_login=False)
    console.print(f"[green]Logged in as[/green] [bold]{user.display_name}[/bold]")


@app.command()
def logout() -> None:
    """Forget the stored session."""

    async def _logout(factory: ApiClientFactory) -> None:
        LogoutCommand.from_factory(factory).execute()

    _run(_logout, require_login=False)
    console.print("Logged out.")


@app.command()
def whoami() -> None:
    """Show the logged-in user."""

    async def _whoami(factory: ApiClientFactory):
        return await CurrentUserQuery.from_factory(factory).execute()

    user = _run(_whoami)
    console.print(f"[bold]{user.display_name}[/bold] ({user.username})")
    console.print(f"  Email: {user.email}")
    console.print(f"  Role:  {user.role.value}")
    if user.provider:
        console.print(f"  Login: {user.provider}")


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


@app.command()
def transactions(
    page: int = typer.Option(0, "--page", "-p", min=0, help="Page index, 0 first"),
) -> None:
    """List one page of transactions."""

    async def _list(factory: ApiClientFactory):
        return await ListTransactionsPageQuery.from_factory(factory).execute(page)

    result = _run(_list)
    currency = get_settings().currency
    console.print(render.transactions_table(result.transactions, currency))
    console.print(
        f"[dim]Page {result.page_index}, {len(result.transactions)} of "
        f"{result.total_count} transactions[/dim]"
    )


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


@report_app.command("months")
def report_months(
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Only this year"),
    details: bool = typer.Option(
        False, "--details", "-d", help="Show the categories of every month"
    ),
) -> None:
    """Earnings, expenses and net per month."""

    async def _months(factory: ApiClientFactory):
        return await TransactionsByYearQuery.from_factory(factory).execute(year)

    _print_years(_run(_months), details)


@report_app.command("categories")
def report_categories(
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Only this year"),
) -> None:
    """Totals per description for each year."""

    async def _categories(factory: ApiClientFactory):
        return await DescriptionTotalsQuery.from_factory(factory).execute(year)

    reports = _run(_categories)
    if not reports:
        console.print("[yellow]No transactions found.[/yellow]")
        return
    currency = get_settings().currency
    for report in reports:
        console.print(render.description_totals_table(report, currency))


@report_app.command("trend")
def report_trend() -> None:
    """Income, expenses and profit per year."""

    async def _trend(factory: ApiClientFactory):
        return await TrendQuery.from_factory(factory).execute()

    report = _run(_trend)
    currency = get_settings().currency
    console.print(render.trend_table(report, currency))
    if report.best_year is not None and report.worst_year is not None:
        console.print(
            f"Best year: [green]{report.best_year.year}[/green] "
            f"({render.money(report.best_year.profit, currency)}), "
            f"worst year: [red]{report.worst_year.year}[/red] "
            f"({render.money(report.worst_year.profit, currency)})"
        )


@report_app.command("accounts")
def report_accounts() -> None:
    """Account balances and their share of the total."""

    async def _accounts(factory: ApiClientFactory):
        return await AccountOverviewQuery.from_factory(factory).execute()

    overview = _run(_accounts)
    console.print(render.accounts_table(overview, get_settings().currency))


@report_app.command("file")
def report_file(
    path: Path = typer.Argument(..., help="JSON export: a list of transactions"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Only this year"),
    details: bool = typer.Option(
        False, "--details", "-d", help="Show the categories of every month"
    ),
) -> None:
    """Aggregate a local JSON export without contacting the backend."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
    except OSError as e:
        _fail(f"Cannot read {path}: {e.strerror or e}")
    except ValueError as e:
        _fail(f"{path} is not valid JSON: {e}")

    # paginated responses wrap the list
    if isinstance(data, dict) and "transactions" in data:
        data = data["transactions"]

    try:
        years = aggregate(parse_transactions(data))
    except PayloadValidationError as e:
        errors = e.details.get("errors") or []
        _fail(f"{e.message} ({len(errors)} field errors)" if errors else e.message)
    except DomainException as e:
        _fail(e.message)

    if year is not None:
        years = [y for y in years if y.year == year]
    _print_years(years, details)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
