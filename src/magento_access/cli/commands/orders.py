"""Orders commands."""

import typer

from magento_access.cli.async_runner import async_command
from magento_access.cli.client_factory import get_client
from magento_access.cli.config import CLIConfig, OutputFormat
from magento_access.cli.formatters import format_output, print_error, unwrap_result

app = typer.Typer(no_args_is_help=True)


@app.command("list")
@async_command
async def list_orders(
    ctx: typer.Context,
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List orders."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        if not client.is_authenticated:
            print_error("Not authenticated. Run 'magento-cli auth login' first.")
            raise typer.Exit(1)

        response = unwrap_result(await client.get_orders())

    if response is None:
        raise typer.Exit(1)

    format_output(
        response.orders,
        output,
        title="Orders",
        columns=[
            "order_id",
            "status",
            "created_at",
            "customer_id",
            "grand_total",
            "order_currency_code",
        ]
        if output == OutputFormat.TABLE
        else None,
    )
