import click
from babel import Locale, UnknownLocaleError
from babel.numbers import UnknownCurrencyError, validate_currency

from optimus.application.dashboard import DashboardHandler
from optimus.domain.exceptions import DomainError
from optimus.domain.model.value_objects import (
    DEFAULT_CURRENCY,
    DEFAULT_LOCALE,
    DEFAULT_LOW_STOCK_THRESHOLD,
)
from optimus.infrastructure.bootstrap import Settings, configure_logging, local_state
from optimus.infrastructure.cli.common import display_products, domain_failure
from optimus.infrastructure.cli.order_commands import (
    order_cancel,
    order_confirm,
    order_create,
    order_deliver,
    order_list,
    order_show,
    order_submit,
)
from optimus.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_reserve,
    product_restock,
    product_update,
)
from optimus.infrastructure.cli.supplier_commands import (
    supplier_approve,
    supplier_deactivate,
    supplier_list,
    supplier_reactivate,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _validate_locale(ctx: click.Context, param: click.Parameter, value: str) -> str:
    try:
        Locale.parse(value.replace("-", "_"))
    except (ValueError, UnknownLocaleError):
        raise click.BadParameter(f"Unknown locale '{value}'.")
    return value


def _validate_currency(ctx: click.Context, param: click.Parameter, value: str) -> str:
    code = value.upper()
    try:
        validate_currency(code)
    except UnknownCurrencyError:
        raise click.BadParameter(f"Unknown currency '{value}'.")
    return code


@click.group()
@click.option(
    "--locale",
    envvar="OPTIMUS_LOCALE",
    default=DEFAULT_LOCALE,
    show_default=True,
    callback=_validate_locale,
    help="Locale used to format amounts.",
)
@click.option(
    "--currency",
    envvar="OPTIMUS_CURRENCY",
    default=DEFAULT_CURRENCY,
    show_default=True,
    callback=_validate_currency,
    help="Currency for new prices, and for the dashboard when no order is open.",
)
@click.option(
    "--low-stock-threshold",
    envvar="OPTIMUS_LOW_STOCK_THRESHOLD",
    type=click.IntRange(min=0),
    default=DEFAULT_LOW_STOCK_THRESHOLD,
    show_default=True,
    help="Stock level under which a product is flagged.",
)
@click.option(
    "--log-level",
    envvar="OPTIMUS_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(
    ctx: click.Context,
    locale: str,
    currency: str,
    low_stock_threshold: int,
    log_level: str,
) -> None:
    """Optimus — supplier orders and inventory"""
    configure_logging(log_level)
    ctx.obj = Settings(
        locale=locale,
        currency=currency,
        low_stock_threshold=low_stock_threshold,
        log_level=log_level.upper(),
    )


@cli.group()
def order() -> None:
    """Manage supplier orders."""


@cli.group()
def product() -> None:
    """Manage products and stock."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.command("dashboard")
@click.pass_obj
def dashboard(settings: Settings) -> None:
    """Show key figures for the business."""
    handler = DashboardHandler(
        local_state(), settings.locale, settings.low_stock_threshold, settings.currency
    )

    try:
        dto = handler.handle()
    except DomainError as exc:
        raise domain_failure(exc)

    click.echo(f"Products:          {dto.product_count} ({dto.low_stock_count} low on stock)")
    click.echo(f"Active orders:     {dto.active_orders} ({dto.pending_orders} pending)")
    click.echo(f"Open order value:  {dto.open_order_value}")
    click.echo(f"Active suppliers:  {dto.active_suppliers} of {dto.total_suppliers}")
    if dto.low_stock_products:
        click.echo()
        click.echo("Low stock alerts:")
        display_products(dto.low_stock_products)


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_confirm)
order.add_command(order_create)
order.add_command(order_deliver)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_submit)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_reserve)
product.add_command(product_restock)
product.add_command(product_update)
supplier.add_command(supplier_approve)
supplier.add_command(supplier_deactivate)
supplier.add_command(supplier_list)
supplier.add_command(supplier_reactivate)
