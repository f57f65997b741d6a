"""Async command support for Typer."""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

import typer

from magento_access.exceptions import MagentoAuthError, MagentoParseError, VerifierTimeoutError


T = TypeVar("T")


def async_command(f: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Decorator to run async Typer commands.

    Library errors are reported on stderr and turned into exit code 1.

    Usage:
        @app.command()
        @async_command
        async def my_command(ctx: typer.Context):
            async with get_client(ctx.obj) as client:
                result = await client.get_orders()
                ...
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        from magento_access.cli.formatters import print_error, print_info

        try:
            return asyncio.run(f(*args, **kwargs))
        except VerifierTimeoutError as e:
            print_error(e.message)
            print_info("Write the code with 'magento-cli auth verifier CODE' and log in again.")
            raise typer.Exit(1) from None
        except MagentoAuthError as e:
            print_error(f"Authorization failed ({e.stage}): {e.message}")
            raise typer.Exit(1) from None
        except MagentoParseError as e:
            print_error(e.message)
            raise typer.Exit(1) from None

    return wrapper
