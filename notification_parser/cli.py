"""Command-line interface for the notification parser."""
import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .analytics import TransactionAnalyzer
from .batch_runner import load_notifications, run_batch, write_manifest
from .config import ConfigurationError, KeywordConfigLoader
from .config.settings import DEFAULT_CURRENCY, DEFAULT_KEYWORDS_FILE, DEFAULT_SOURCE
from .exporters import ExcelExporter, export_csv
from .parsers import TransactionParser
from .utils import format_currency
from .utils.logger import setup_logger

console = Console()
logger = setup_logger()


def _build_parser(keywords_file) -> TransactionParser:
    path = Path(keywords_file) if keywords_file else DEFAULT_KEYWORDS_FILE
    config = KeywordConfigLoader(path).load(required=bool(keywords_file))
    return TransactionParser(config)


@click.group()
@click.version_option(version="0.1.0")
@click.option('--keywords', 'keywords_file', type=click.Path(exists=True, dir_okay=False),
              help='Keyword table YAML (defaults to the bundled table)')
@click.pass_context
def cli(ctx, keywords_file):
    """Notification Parser - Extract transactions from bank/e-wallet alerts."""
    ctx.ensure_object(dict)
    ctx.obj['keywords_file'] = keywords_file


@cli.command()
@click.argument('text')
@click.option('--source', '-s', default=DEFAULT_SOURCE, show_default=True, help='Bank or wallet label')
@click.option('--explain', is_flag=True, help='Show which rule fired in each pass')
@click.option('--json', 'as_json', is_flag=True, help='Print the candidate as JSON')
@click.option('--currency', default=DEFAULT_CURRENCY, show_default=True, help='Currency for display')
@click.pass_context
def parse(ctx, text, source, explain, as_json, currency):
    """
    Parse a single notification.

    TEXT: Notification body
    """
    parser = _build_parser(ctx.obj.get('keywords_file'))
    candidate = parser.parse(text, source)

    if as_json:
        payload = {'candidate': candidate.to_dict() if candidate else None}
        if explain:
            payload['trace'] = parser.explain(text).to_dict()
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        if candidate is None:
            sys.exit(1)
        return

    if candidate is None:
        console.print("[yellow]No transaction found in notification[/yellow]")
    else:
        table = Table(show_header=False)
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Amount", format_currency(candidate.amount, currency))
        table.add_row("Direction", candidate.direction.value)
        table.add_row("Merchant", candidate.merchant or "-")
        table.add_row("Category", candidate.category or "-")
        table.add_row("Source", candidate.source)
        table.add_row("Received", candidate.occurred_at.isoformat())
        console.print(table)

    if explain:
        trace = parser.explain(text)
        console.print("\n[bold blue]Rules[/bold blue]")
        console.print(f"  amount:    {trace.amount_rule or '-'}")
        console.print(f"  direction: {trace.direction_rule}")
        console.print(f"  category:  {trace.category_rule or 'default'}")
        console.print(f"  merchant:  {trace.merchant_rule or '-'}")

    if candidate is None:
        sys.exit(1)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--source', '-s', default=DEFAULT_SOURCE, show_default=True,
              help='Source label for records without one')
@click.option('--output', '-o', type=click.Path(), help='Output file path')
@click.option('--format', '-f', 'export_format', type=click.Choice(['xlsx', 'csv']), default='xlsx',
              show_default=True, help='Output format')
@click.option('--manifest', type=click.Path(), help='Optional path for batch summary JSON')
@click.pass_context
def batch(ctx, input_file, source, output, export_format, manifest):
    """
    Parse every notification in INPUT_FILE (.jsonl, .csv or plain text).
    """
    input_path = Path(input_file)
    parser = _build_parser(ctx.obj.get('keywords_file'))

    try:
        records = load_notifications(input_path, default_source=source)
    except ValueError as e:
        console.print(f"[red]Error: Could not read {input_path.name}: {e}[/red]")
        sys.exit(1)

    if not records:
        console.print(f"[yellow]No notifications found in {input_path}[/yellow]")
        sys.exit(0)

    console.print(f"\n[cyan]Found {len(records)} notifications[/cyan]")

    with Progress(SpinnerColumn(), TextColumn("{task.description}"), console=console) as progress:
        task = progress.add_task("Parsing notifications...", total=len(records))
        summary = run_batch(
            records,
            parser,
            input_file=input_path,
            progress_callback=lambda done, total: progress.update(task, completed=done),
        )
        progress.update(task, description="Batch complete", completed=len(records))

    output_path = Path(output) if output else input_path.with_suffix(f'.parsed.{export_format}')
    if export_format == 'csv':
        export_csv(summary, output_path)
    else:
        ExcelExporter().export(summary, output_path)

    if manifest:
        write_manifest(summary, Path(manifest))
        console.print(f"Manifest written to: {manifest}")

    totals = summary.totals
    console.print(
        f"\n[green]Batch complete[/green] - {totals['parsed']} parsed, "
        f"{totals['discarded']} discarded, {totals['failed']} failed"
    )
    console.print(f"Output written to: {output_path}")


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--source', '-s', default=DEFAULT_SOURCE, show_default=True,
              help='Source label for records without one')
@click.option('--period', '-p', type=click.Choice(['daily', 'weekly', 'monthly']), default='daily',
              show_default=True)
@click.option('--currency', default=DEFAULT_CURRENCY, show_default=True, help='Currency for display')
@click.pass_context
def summary(ctx, input_file, source, period, currency):
    """Show totals, trends and breakdowns for parsed notifications."""
    parser = _build_parser(ctx.obj.get('keywords_file'))
    records = load_notifications(Path(input_file), default_source=source)
    candidates = run_batch(records, parser).candidates

    if not candidates:
        console.print("[yellow]No transactions parsed[/yellow]")
        return

    analyzer = TransactionAnalyzer(candidates)
    totals = analyzer.get_summary()
    console.print("\n[bold blue]Summary[/bold blue]")
    console.print(f"  Income:       {format_currency(totals['total_income'], currency)}")
    console.print(f"  Expense:      {format_currency(totals['total_expense'], currency)}")
    console.print(f"  Balance:      {format_currency(totals['current_balance'], currency)}")
    console.print(f"  Transactions: {totals['transaction_count']}")

    trends = Table(title=f"Trends ({period})", show_header=True, header_style="bold magenta")
    for column in ("Period", "Income", "Expense", "Net"):
        trends.add_column(column)
    for point in analyzer.get_trends(period)['data']:
        trends.add_row(
            point['date'],
            format_currency(point['income'], currency),
            format_currency(point['expense'], currency),
            format_currency(point['net'], currency),
        )
    console.print(trends)

    for title, rows in (
        ("Expense by category", analyzer.get_breakdown_by_category()),
        ("Expense by source", analyzer.get_breakdown_by_source()),
    ):
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for column in ("Label", "Amount", "Share", "Count"):
            table.add_column(column)
        for row in rows:
            table.add_row(
                str(row['label']),
                format_currency(row['amount'], currency),
                f"{row['percentage']:.1f}%",
                str(row['count']),
            )
        console.print(table)


@cli.command()
@click.pass_context
def keywords(ctx):
    """Show the loaded keyword table."""
    keywords_file = ctx.obj.get('keywords_file')
    path = Path(keywords_file) if keywords_file else DEFAULT_KEYWORDS_FILE
    config = KeywordConfigLoader(path).load(required=bool(keywords_file))

    console.print(f"\n[bold blue]Keyword table[/bold blue] {path}\n")
    if config.is_empty:
        console.print("[yellow]No extra keywords configured, built-in rules only[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("List", style="cyan")
    table.add_column("Keywords", style="green")
    table.add_row("Income", ", ".join(config.income_keywords) or "-")
    table.add_row("Expense", ", ".join(config.expense_keywords) or "-")
    for category, words in config.category_keywords.items():
        table.add_row(category, ", ".join(words) or "-")
    console.print(table)


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except ConfigurationError as e:
        console.print(f"\n[red]Configuration error: {e}[/red]")
        sys.exit(2)
    except Exception as e:
        console.print(f"\n[red]Error: {e}[/red]")
        logger.exception("Unhandled exception")
        sys.exit(1)


if __name__ == '__main__':
    main()
