"""CLI for settle-up using Typer."""

import json
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from .config import load_settings
from .engine import calculate_settlement
from .loader import load_input
from .models import Expense, Participant, SettlementResult
from .report import format_transfer, generate_summary, summarize_spending

app = typer.Typer(
    name="settle-up",
    help="Split shared group expenses and plan the transfers that settle them",
)

console = Console()

EXAMPLE_INPUT = {
    "participants": [
        {"id": "a", "name": "Alice"},
        {"id": "b", "name": "Bob"},
        {"id": "c", "name": "Carol"},
    ],
    "expenses": [
        {
            "id": "1",
            "title": "Dinner",
            "amount": "90.00",
            "payer_id": "a",
            "involved_ids": ["a", "b", "c"],
        },
        {"id": "2", "title": "Taxi", "amount": "24.00", "payer_id": "b"},
    ],
}


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@app.command()
def settle(
    input_file: Path = typer.Argument(..., help="JSON file with participants and expenses"),
    summary: bool = typer.Option(
        False, "--summary", "-s", help="Add an AI-written summary (needs OPENAI_API_KEY)"
    ),
    permissive: bool = typer.Option(
        False,
        "--permissive",
        help="Tolerate expenses that name people outside the participant list",
    ),
    tolerance: str | None = typer.Option(
        None,
        "--tolerance",
        help="Treat balances this close to zero as settled (e.g. 0.01)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """
    Compute balances and the transfers that settle them.

    Reads participants and expenses from INPUT_FILE, then shows who pays whom,
    everyone's net balance and the expense list.
    """
    setup_logging(verbose)
    tolerance_amount = parse_tolerance(tolerance)

    try:
        settings = load_settings()
        data = load_input(input_file)

        strict = settings.strict_participants and not permissive
        result = calculate_settlement(
            data.participants,
            data.expenses,
            strict=strict,
            tolerance=tolerance_amount
            if tolerance_amount is not None
            else settings.settlement_tolerance,
        )

        display_settlement(
            result, data.participants, data.expenses, settings.currency_symbol
        )

        if summary:
            console.print("\n[bold blue]Writing AI summary...[/bold blue]")
            text = generate_summary(data.participants, data.expenses, result, settings)
            console.print("\n[bold]AI Summary:[/bold]")
            console.print(text, markup=False)

    except Exception as e:
        console.print(f"\n[bold red]Error:[/bold red] {e}")
        if verbose:
            raise
        sys.exit(1)


def parse_tolerance(value: str | None) -> Decimal | None:
    """
    Parse the --tolerance option as an exact money amount.

    Raises:
        typer.BadParameter: If the value is not a non-negative amount with at
                            most two decimal places
    """
    if value is None:
        return None

    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise typer.BadParameter(f"{value!r} is not a number") from None

    if not amount.is_finite() or amount < 0:
        raise typer.BadParameter("must be a non-negative amount")
    if amount != amount.quantize(Decimal("0.01")):
        raise typer.BadParameter("must have at most two decimal places")

    return amount


@app.command()
def example():
    """Print a sample input file."""
    typer.echo(json.dumps(EXAMPLE_INPUT, indent=2, ensure_ascii=False))


def format_money(amount: Decimal, symbol: str = "$", use_color: bool = True) -> str:
    """
    Format money in accounting style with alignment.

    Negative amounts use parentheses: ($85.02)
    Positive amounts have spaces:      $85.02
    """
    abs_amount = abs(amount)
    if amount < 0:
        if use_color:
            formatted = f"({symbol}[red]{abs_amount:,.2f}[/red])"
        else:
            formatted = f"({symbol}{abs_amount:,.2f})"
    else:
        if use_color:
            formatted = f" [green]{symbol}{abs_amount:,.2f}[/green] "
        else:
            formatted = f" {symbol}{abs_amount:,.2f} "
    return formatted


def display_settlement(
    result: SettlementResult,
    participants: list[Participant],
    expenses: list[Expense],
    symbol: str = "$",
):
    """Display transfers, balances and expenses in table format."""
    names = {p.id: p.name for p in participants}

    def name_of(participant_id: str) -> str:
        return names.get(participant_id, participant_id)

    # Transfers first: that's what people act on
    console.print(f"\n[bold]Transfers:[/bold] {len(result.actions)} in total")
    if not result.actions:
        console.print("[green]🎉 Perfectly balanced! No transfers needed.[/green]")
    else:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("#", style="dim", width=4)
        table.add_column("From", style="cyan")
        table.add_column("To", style="cyan")
        table.add_column("Amount", justify="right", width=14)
        for idx, action in enumerate(result.actions, start=1):
            table.add_row(
                str(idx),
                name_of(action.from_id),
                name_of(action.to_id),
                format_money(action.amount, symbol),
            )
        console.print(table)

        console.print("\n[bold]Copy & send:[/bold]")
        for action in result.actions:
            line = format_transfer(
                name_of(action.from_id), name_of(action.to_id), action.amount, symbol
            )
            console.print(f"  {line}", markup=False)

    # Balances
    table = Table(title="Balances", show_header=True, header_style="bold magenta")
    table.add_column("Participant", style="cyan")
    table.add_column("Net", justify="right", width=14)
    table.add_column("Status", style="dim")
    for balance in result.balances:
        if balance.amount > 0:
            status = "is owed"
        elif balance.amount < 0:
            status = "owes"
        else:
            status = "settled"
        table.add_row(
            name_of(balance.participant_id),
            format_money(balance.amount, symbol),
            status,
        )
    console.print()
    console.print(table)

    # Expenses
    table = Table(title="Expenses", show_header=True, header_style="bold magenta")
    table.add_column("Title", style="cyan", width=30)
    table.add_column("Amount", justify="right", width=14)
    table.add_column("Paid by")
    table.add_column("Shared by", no_wrap=False)
    for expense in expenses:
        shared_by = ", ".join(name_of(pid) for pid in expense.involved_ids)
        table.add_row(
            expense.title[:30],
            format_money(expense.amount, symbol),
            name_of(expense.payer_id),
            shared_by or "[dim]nobody[/dim]",
        )
    console.print()
    console.print(table)

    stats = summarize_spending(participants, expenses)
    console.print()
    console.print("[bold]Summary:[/bold]")
    console.print(f"  Total spent: {format_money(stats.total_spent, symbol)}")
    console.print(
        f"  Per person:  {format_money(stats.average_per_participant, symbol)}"
    )


if __name__ == "__main__":
    app()
