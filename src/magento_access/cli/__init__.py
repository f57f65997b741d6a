"""Magento CLI - Command-line interface for the Magento REST API."""

from magento_access.cli.app import app

# Import command modules to register them with the app
from magento_access.cli.commands import auth, orders, products

# Register sub-apps
app.add_typer(auth.app, name="auth", help="Authentication commands.")
app.add_typer(orders.app, name="orders", help="Sales orders.")
app.add_typer(products.app, name="products", help="Catalog products.")


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
