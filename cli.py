import click
from datetime import date

from config.settings import STORE_FILE, DEFAULT_CAPACITY, EXCEL_EXPORT_FILE
from core.borrower import BorrowerRecord
from core.exceptions import StoreError
from core.ledger import Payment
from core.organization import CreditOrganization
from data_manager.data_validator import validate_borrower_name, validate_payment_input
from data_manager.file_handler import load_or_create, save_store, export_excel
from utils.date_utils import parse_iso_date
from utils.formatters import fmt_amount
from utils.log_config import setup_logging


def _load(ctx) -> CreditOrganization:
    try:
        return load_or_create(ctx.obj["store"], ctx.obj["capacity"])
    except (StoreError, OSError) as e:
        raise click.ClickException(f"Failed to load {ctx.obj['store']}: {e}")


def _save(ctx, org: CreditOrganization):
    try:
        save_store(org, ctx.obj["store"], backup=ctx.obj["backup"])
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Failed to save {ctx.obj['store']}: {e}")


def _parse_date(value: str) -> date:
    try:
        return parse_iso_date(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a YYYY-MM-DD date")


@click.group()
@click.option('--store', type=click.Path(dir_okay=False), default=str(STORE_FILE), show_default=True, help='Path to the credit store file')
@click.option('--capacity', type=click.IntRange(min=1), default=DEFAULT_CAPACITY, show_default=True, help='Registry capacity')
@click.option('--no-backup', is_flag=True, help='Do not back up the store before overwriting it')
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False), default='WARNING', help='Log level')
@click.option('--json-logs', is_flag=True, help='Emit logs as JSON')
@click.pass_context
def cli(ctx, store, capacity, no_backup, log_level, json_logs):
    """A CLI for the credit organization borrower registry."""
    setup_logging(log_level, json_logs)
    ctx.ensure_object(dict)
    ctx.obj.update(store=store, capacity=capacity, backup=not no_backup)


@cli.command('add-borrower')
@click.argument('last_name')
@click.pass_context
def add_borrower(ctx, last_name):
    """Registers a new borrower."""
    org = _load(ctx)
    ok, msg = validate_borrower_name(last_name, org)
    if not ok:
        raise click.ClickException(msg)
    org.add_borrower(last_name.strip())
    _save(ctx, org)
    click.echo(f"Borrower '{last_name.strip()}' added.")


@cli.command('remove-borrower')
@click.argument('last_name')
@click.pass_context
def remove_borrower(ctx, last_name):
    """Removes a borrower and all of their payments."""
    org = _load(ctx)
    if not org.remove_borrower(last_name):
        raise click.ClickException(f"Borrower '{last_name}' not found.")
    _save(ctx, org)
    click.echo(f"Borrower '{last_name}' removed.")


@cli.command('add-payment')
@click.argument('last_name')
@click.option('--date', 'date_text', type=str, required=True, help='Payment date (YYYY-MM-DD)')
@click.option('--amount', 'amount_text', type=str, required=True, help='Payment amount')
@click.pass_context
def add_payment(ctx, last_name, date_text, amount_text):
    """Adds a payment to a borrower's ledger."""
    ok, msg, when, amount = validate_payment_input(date_text, amount_text)
    if not ok:
        raise click.ClickException(msg)
    org = _load(ctx)
    try:
        added = org.add_payment(last_name, when, amount)
    except ValueError as e:
        raise click.ClickException(str(e))
    if not added:
        raise click.ClickException(f"Borrower '{last_name}' not found.")
    _save(ctx, org)
    click.echo(f"Payment {when.isoformat()} {amount:.2f} added to '{last_name}'.")


@cli.command('remove-payment')
@click.argument('last_name')
@click.option('--date', 'date_text', type=str, required=True, help='Payment date (YYYY-MM-DD)')
@click.pass_context
def remove_payment(ctx, last_name, date_text):
    """Removes the earliest payment of a borrower on the given date."""
    when = _parse_date(date_text)
    org = _load(ctx)
    if org.find_borrower(last_name) is None:
        raise click.ClickException(f"Borrower '{last_name}' not found.")
    if not org.remove_payment(last_name, when):
        raise click.ClickException(f"No payment of '{last_name}' on {when.isoformat()}.")
    _save(ctx, org)
    click.echo(f"Payment {when.isoformat()} removed from '{last_name}'.")


@cli.command('list-borrowers')
@click.pass_context
def list_borrowers(ctx):
    """Lists all borrowers with their balances."""
    org = _load(ctx)
    frame = org.borrowers_frame()
    if frame.empty:
        click.echo("No borrowers.")
        return
    click.echo(frame.to_string(index=False))


@cli.command('show-borrower')
@click.argument('last_name')
@click.pass_context
def show_borrower(ctx, last_name):
    """Shows a borrower's balance and payments."""
    org = _load(ctx)
    b = org.find_borrower(last_name)
    if b is None:
        raise click.ClickException(f"Borrower '{last_name}' not found.")
    click.echo(f"{b.last_name}: {fmt_amount(b.balance)}")
    for p in b.ledger.entries_in_order():
        click.echo(f"  {p}")


@cli.command('total')
@click.pass_context
def total(ctx):
    """Prints the total credits across all borrowers."""
    org = _load(ctx)
    click.echo(f"Total credits: {org.total_credits():.2f}")


@cli.command('export-excel')
@click.option('--output', type=click.Path(dir_okay=False), default=str(EXCEL_EXPORT_FILE), show_default=True, help='Excel file to write')
@click.pass_context
def export_excel_command(ctx, output):
    """Exports borrowers and payments to an Excel workbook."""
    org = _load(ctx)
    path = export_excel(org, output)
    click.echo(f"Exported to {path}")


@cli.command('demo')
@click.pass_context
def demo(ctx):
    """Runs the sample scenario and saves the result to the store."""
    org = CreditOrganization(ctx.obj["capacity"])
    click.echo(f"Total credits before adding: {org.total_credits():.2f}")

    ivanov = BorrowerRecord("Иванов")
    ivanov.add_payment(Payment(date(2025, 1, 10), 10000))
    ivanov.add_payment(Payment(date(2025, 2, 10), 15000))
    petrov = BorrowerRecord("Петров")
    petrov.add_payment(Payment(date(2025, 1, 15), 20000))
    petrov.add_payment(Payment(date(2025, 2, 15), 50000))
    petrov.add_payment(Payment(date(2025, 4, 15), 70000))
    sidorov = BorrowerRecord("Сидоров")
    sidorov.add_payment(Payment(date(2025, 1, 15), 20000))
    for b in (ivanov, petrov, sidorov):
        if not org.add_borrower(b):
            click.echo(f"Registry is full, '{b.last_name}' skipped.")
    click.echo(f"Total credits after adding: {org.total_credits():.2f}")

    org.remove_payment("Петров", date(2025, 1, 15))
    click.echo(f"Petrov after removing 2025-01-15: {org.borrower_balance('Петров') or 0.0:.2f}")

    org.remove_borrower("Петров")
    click.echo(f"Total credits after removing Petrov: {org.total_credits():.2f}")

    _save(ctx, org)
    loaded = CreditOrganization.from_file(ctx.obj["store"], ctx.obj["capacity"])
    click.echo(f"Saved and reloaded {ctx.obj['store']}, total credits: {loaded.total_credits():.2f}")


if __name__ == "__main__":
    cli()
