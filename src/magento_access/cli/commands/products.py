"""Products commands."""

import typer

from magento_access.cli.async_runner import async_command
from magento_access.cli.client_factory import get_client
from magento_access.cli.config import CLIConfig, OutputFormat
from magento_access.cli.formatters import format_output, print_error, unwrap_result

app = typer.Typer(no_args_is_help=True)


@app.command("list")
@async_command
async def list_products(
    ctx: typer.Context,
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List catalog products."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        if not client.is_authenticated:
            print_error("Not authenticated. Run 'magento-cli auth login' first.")
            raise typer.Exit(1)

        response = unwrap_result(await client.get_products())

    if response is None:
        raise typer.Exit(1)

    format_output(
        response.products,
        output,
        title="Products",
        columns=["entity_id", "sku", "name", "price"] if output == OutputFormat.TABLE else None,
    )


@app.command("get")
@async_command
async def get_product(
    ctx: typer.Context,
    product_id: str = typer.Argument(..., help="Product entity id."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Show a single product."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        if not client.is_authenticated:
            print_error("Not authenticated. Run 'magento-cli auth login' first.")
            raise typer.Exit(1)

        product = unwrap_result(await client.get_product(product_id))

    if product is None:
        raise typer.Exit(1)

    format_output(
        product,
        output,
        title=f"Product {product_id}",
        columns=["entity_id", "sku", "name", "price", "description"]
        if output == OutputFormat.TABLE
        else None,
    )
