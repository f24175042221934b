"""CLI commands for the dashboard and database setup."""

from __future__ import annotations

import click

from budgetmaster.domain.exceptions import DomainException
from budgetmaster.infrastructure.bootstrap import Container


@click.command("dashboard")
@click.option("--recent", default=5, show_default=True, type=int, help="Recent budgets to list.")
@click.pass_obj
def dashboard(container: Container, recent: int) -> None:
    """Show budget counts, total value and the most recent budgets."""
    try:
        dto = container.show_dashboard().handle(recent_limit=recent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Budgets:  {dto.total_count}")
    click.echo(f"Pending:  {dto.pending_count}")
    click.echo(f"Approved: {dto.approved_count}")
    click.echo(f"Rejected: {dto.rejected_count}")
    click.echo(f"Total value: {dto.total_value:.2f}")

    if not dto.recent:
        return

    click.echo()
    click.echo("Recent budgets:")
    for b in dto.recent:
        click.echo(
            f"  #{b.id:<5} {b.customer_name:<25} {b.status:<9} {b.total_amount:>12.2f}"
        )


@click.command("init")
@click.pass_obj
def db_init(container: Container) -> None:
    """Create the database tables."""
    try:
        container.storage.create_schema()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Database ready.")
