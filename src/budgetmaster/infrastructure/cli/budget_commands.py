"""CLI commands for the Budget aggregate."""

from __future__ import annotations

import json

import click

from budgetmaster.application.dto import BudgetDTO, BudgetInput, BudgetItemInput
from budgetmaster.domain.exceptions import DomainException
from budgetmaster.infrastructure.bootstrap import Container


def _parse_items(raw_items: tuple[str, ...]) -> list[BudgetItemInput]:
    """Parse 'Description:Type:Qty:Price' (or 'Description:Qty:Price') strings."""
    specs: list[BudgetItemInput] = []
    for raw in raw_items:
        parts = raw.rsplit(":", 3)
        if len(parts) == 4:
            description, item_type, qty, price = parts
        elif len(parts) == 3:
            description, qty, price = parts
            item_type = None
        else:
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'Description:Type:Qty:Price'.",
                param_hint="--item",
            )
        specs.append(
            BudgetItemInput(
                description=description.strip(),
                item_type=item_type.strip() if item_type else None,
                quantity=qty.strip(),
                unit_price=price.strip(),
            )
        )
    return specs


def _load_payload(path: str) -> BudgetInput:
    """Read a JSON payload that uses the web form's field names."""
    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise click.BadParameter(f"Cannot read '{path}': {exc}", param_hint="--json") from exc
    if not isinstance(raw, dict):
        raise click.BadParameter("Payload must be a JSON object.", param_hint="--json")
    return BudgetInput.from_form(raw)


def _display_budget(dto: BudgetDTO) -> None:
    """Shared formatting for displaying a budget."""
    click.echo(f"Budget #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    if dto.customer_email:
        click.echo(f"Email:    {dto.customer_email}")
    click.echo(f"Issued:   {dto.issue_date.isoformat()}")
    if dto.expiry_date:
        click.echo(f"Expires:  {dto.expiry_date.isoformat()}")
    click.echo()

    click.echo(f"  {'Description':<30} {'Type':<8} {'Qty':>5} {'Price':>10} {'Subtotal':>12}")
    click.echo(f"  {'-'*69}")
    for item in dto.items:
        click.echo(
            f"  {item.description:<30} {item.item_type:<8} {item.quantity:>5} "
            f"{item.unit_price:>10.2f} {item.subtotal:>12.2f}"
        )
    click.echo(f"  {'-'*69}")
    click.echo(f"  {'Total':<55} {dto.total_amount:>14.2f}")

    if dto.notes:
        click.echo()
        click.echo(f"Notes: {dto.notes}")


def _display_catalog(products) -> None:
    click.echo("Catalog:")
    if not products:
        click.echo("  (empty)")
    for p in products:
        click.echo(f"  #{p.id:<5} {p.name:<30} {p.item_type:<8} {p.base_price:>10.2f}")


@click.command("list")
@click.pass_obj
def budget_list(container: Container) -> None:
    """List all budgets, newest first."""
    try:
        budgets = container.list_budgets().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not budgets:
        click.echo("No budgets found.")
        return

    click.echo(
        f"{'ID':<6} {'Customer':<25} {'Issued':<10} {'Expires':<10} {'Status':<9} {'Total':>12}"
    )
    click.echo("-" * 77)
    for b in budgets:
        expires = b.expiry_date.isoformat() if b.expiry_date else "-"
        click.echo(
            f"{b.id:<6} {b.customer_name:<25} {b.issue_date.isoformat():<10} "
            f"{expires:<10} {b.status:<9} {b.total_amount:>12.2f}"
        )


@click.command("new")
@click.pass_obj
def budget_new(container: Container) -> None:
    """Show the catalog and today's date for composing a budget."""
    try:
        form = container.prepare_create_form().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Today: {form.today.isoformat()}")
    _display_catalog(form.products)


@click.command("create")
@click.option("--customer", default=None, help="Customer name.")
@click.option("--email", default=None, help="Customer email.")
@click.option("--issue-date", default=None, help="Issue date (YYYY-MM-DD).")
@click.option("--expiry-days", default=None, help="Days the quote stays valid (default 15).")
@click.option("--notes", default=None, help="Free text printed on the quote.")
@click.option("--item", "items", multiple=True, help="Line as 'Description:Type:Qty:Price'. Repeatable.")
@click.option("--json", "json_path", default=None, help="Read the whole form from a JSON file.")
@click.pass_obj
def budget_create(
    container: Container,
    customer: str | None,
    email: str | None,
    issue_date: str | None,
    expiry_days: str | None,
    notes: str | None,
    items: tuple[str, ...],
    json_path: str | None,
) -> None:
    """Create a new budget. Its status always starts as Pending."""
    if json_path:
        data = _load_payload(json_path)
    else:
        data = BudgetInput(
            customer_name=customer,
            customer_email=email,
            issue_date=issue_date,
            expiry_days=expiry_days,
            notes=notes,
            items=_parse_items(items),
        )

    try:
        budget_id = container.create_budget().handle(data)
        dto = container.view_budget().handle(budget_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Budget #{budget_id} created.")
    _display_budget(dto)


@click.command("show")
@click.option("--id", "budget_id", required=True, type=int, help="Budget ID to display.")
@click.pass_obj
def budget_show(container: Container, budget_id: int) -> None:
    """Show details of a budget."""
    try:
        dto = container.view_budget().handle(budget_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_budget(dto)


@click.command("print")
@click.option("--id", "budget_id", required=True, type=int, help="Budget ID to print.")
@click.pass_obj
def budget_print(container: Container, budget_id: int) -> None:
    """Render a budget as a printable quote."""
    try:
        dto = container.view_budget().handle(budget_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("=" * 71)
    click.echo(f"QUOTE #{dto.id}".center(71))
    click.echo("=" * 71)
    _display_budget(dto)
    click.echo()
    if dto.expiry_date:
        click.echo(f"This quote is valid until {dto.expiry_date.isoformat()}.")


@click.command("edit")
@click.option("--id", "budget_id", required=True, type=int, help="Budget ID to edit.")
@click.pass_obj
def budget_edit(container: Container, budget_id: int) -> None:
    """Show a budget together with the catalog, ready for an update."""
    try:
        form = container.prepare_edit_form().handle(budget_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_budget(form.budget)
    click.echo()
    _display_catalog(form.products)


@click.command("update")
@click.option("--id", "budget_id", required=True, type=int, help="Budget ID to update.")
@click.option("--customer", default=None, help="Customer name.")
@click.option("--email", default=None, help="Customer email.")
@click.option("--issue-date", default=None, help="Issue date (YYYY-MM-DD).")
@click.option("--expiry-days", default=None, help="Days the quote stays valid (default 15).")
@click.option("--expiry-date", default=None, help="Explicit expiry date (YYYY-MM-DD).")
@click.option("--status", default=None, help="Pending, Approved or Rejected.")
@click.option("--notes", default=None, help="Free text printed on the quote.")
@click.option("--item", "items", multiple=True, help="Line as 'Description:Type:Qty:Price'. Repeatable.")
@click.option("--json", "json_path", default=None, help="Read the whole form from a JSON file.")
@click.pass_obj
def budget_update(
    container: Container,
    budget_id: int,
    customer: str | None,
    email: str | None,
    issue_date: str | None,
    expiry_days: str | None,
    expiry_date: str | None,
    status: str | None,
    notes: str | None,
    items: tuple[str, ...],
    json_path: str | None,
) -> None:
    """Update a budget and replace its items.

    Without --item or --json the current items are submitted again, as the
    edit form does.  The same goes for the expiry date when neither
    --expiry-date nor --expiry-days is given.
    """
    try:
        if json_path:
            data = _load_payload(json_path)
        else:
            current = None
            if not items or (expiry_date is None and expiry_days is None):
                current = container.prepare_edit_form().handle(budget_id).budget
            if expiry_date is None and expiry_days is None and current.expiry_date:
                expiry_date = current.expiry_date.isoformat()
            if items:
                item_specs = _parse_items(items)
            else:
                item_specs = [
                    BudgetItemInput(
                        description=i.description,
                        item_type=i.item_type,
                        quantity=i.quantity,
                        unit_price=i.unit_price,
                    )
                    for i in current.items
                ]
            data = BudgetInput(
                customer_name=customer,
                customer_email=email,
                issue_date=issue_date,
                expiry_days=expiry_days,
                expiry_date=expiry_date,
                status=status,
                notes=notes,
                items=item_specs,
            )

        container.update_budget().handle(budget_id, data)
        dto = container.view_budget().handle(budget_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Budget #{budget_id} updated.")
    _display_budget(dto)


@click.command("delete")
@click.option("--id", "budget_id", required=True, type=int, help="Budget ID to delete.")
@click.pass_obj
def budget_delete(container: Container, budget_id: int) -> None:
    """Delete a budget and all of its items."""
    try:
        container.delete_budget().handle(budget_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Budget #{budget_id} deleted.")
