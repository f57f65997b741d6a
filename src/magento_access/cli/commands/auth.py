"""Authentication commands."""

import webbrowser
from pathlib import Path

import typer

from magento_access.auth import FileVerifierSource, TokenStore
from magento_access.cli.async_runner import async_command
from magento_access.cli.client_factory import get_client
from magento_access.cli.config import CLIConfig
from magento_access.cli.formatters import console, print_error, print_info, print_success

app = typer.Typer(no_args_is_help=True)


@app.command("login")
@async_command
async def login(
    ctx: typer.Context,
    no_browser: bool = typer.Option(
        False,
        "--no-browser",
        help="Don't open browser automatically.",
    ),
    verifier_file: Path | None = typer.Option(
        None,
        "--verifier-file",
        help="CSV file to poll for the verifier code (default: profile data dir).",
    ),
) -> None:
    """Authorize this client against the Magento store.

    This command runs the OAuth 1.0a handshake:
    1. Requests a temporary token and opens the store's approval page
    2. Waits for the verifier code (write it with 'magento-cli auth verifier CODE')
    3. Exchanges it for an access token and saves it for future use
    """
    config: CLIConfig = ctx.obj
    verifier_path = verifier_file or config.verifier_path

    try:
        store = config.load_config()
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1) from None

    def show_url(url: str) -> None:
        if no_browser:
            console.print("\nOpen this URL in your browser:")
        else:
            print_info("Opening browser for authorization...")
            webbrowser.open(url)
            console.print("\n[dim]If browser didn't open, visit:[/dim]")
        console.print(f"[link]{url}[/link]\n")
        print_info(f"Waiting for the verifier code in {verifier_path}")
        console.print(
            "[dim]From another terminal run:[/dim] "
            f"magento-cli --profile {config.profile} auth verifier CODE"
        )

    print_info(f"Starting OAuth flow for {store.store_url} (profile: {config.profile})...")

    async with get_client(
        config, browser_launcher=show_url, verifier_path=verifier_path
    ) as client:
        await client.authorize()
        client.save_token()

    print_success(f"Authorized successfully! Token saved to {config.token_path}")


@app.command("verifier")
def verifier(
    ctx: typer.Context,
    code: str = typer.Argument(..., help="Verifier code shown by Magento after approval."),
) -> None:
    """Hand the verifier code to a running 'auth login'."""
    config: CLIConfig = ctx.obj

    if not code.strip():
        print_error("Verifier code must not be empty.")
        raise typer.Exit(1)

    FileVerifierSource(path=config.verifier_path).save(code)
    print_success(f"Verifier code written to {config.verifier_path}")


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Check authentication status."""
    config: CLIConfig = ctx.obj

    token_store = TokenStore(path=config.token_path)

    console.print(f"Profile: [bold]{config.profile}[/bold]")
    console.print(f"Token path: {config.token_path}")

    if token_store.load() is not None:
        print_success("Token found - you are authenticated")
    else:
        print_info("Not authenticated - run 'magento-cli auth login' to authenticate")


@app.command("logout")
def logout(ctx: typer.Context) -> None:
    """Clear the saved access token."""
    config: CLIConfig = ctx.obj

    token_store = TokenStore(path=config.token_path)

    if not token_store.has_token():
        print_info("No token to clear.")
        return

    token_store.clear()
    FileVerifierSource(path=config.verifier_path).clear()
    print_success(f"Logged out from profile {config.profile}.")
