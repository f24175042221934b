import click

from budgetmaster.infrastructure.bootstrap import build_container
from budgetmaster.infrastructure.cli.budget_commands import (
    budget_create,
    budget_delete,
    budget_edit,
    budget_list,
    budget_new,
    budget_print,
    budget_show,
    budget_update,
)
from budgetmaster.infrastructure.cli.dashboard_commands import dashboard, db_init
from budgetmaster.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
)
from budgetmaster.utils.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """BudgetMaster — quotes and catalog manager"""
    if ctx.obj is None:
        try:
            container = build_container()
        except ValueError as exc:
            raise click.ClickException(f"Invalid configuration: {exc}")
        configure_logging(container.settings.log_level, container.settings.log_dir)
        ctx.obj = container
        ctx.call_on_close(container.storage.dispose)


@cli.group()
def budget() -> None:
    """Manage budgets (quotes)."""


@cli.group()
def product() -> None:
    """Manage the product and service catalog."""


@cli.group()
def db() -> None:
    """Manage the database."""


# Register subcommands
cli.add_command(dashboard)
budget.add_command(budget_list)
budget.add_command(budget_new)
budget.add_command(budget_create)
budget.add_command(budget_show)
budget.add_command(budget_print)
budget.add_command(budget_edit)
budget.add_command(budget_update)
budget.add_command(budget_delete)
product.add_command(product_list)
product.add_command(product_add)
product.add_command(product_delete)
db.add_command(db_init)
