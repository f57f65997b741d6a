"""Main Typer application."""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from magento_access.cli.config import CLIConfig, _default_config_dir, _default_data_dir

# Create main app
app = typer.Typer(
    name="magento-cli",
    help="Magento REST API command-line interface.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    """Route library logs through rich when --verbose is given."""
    if not verbose:
        return
    package_logger = logging.getLogger("magento_access")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))


@app.callback()
def main(
    ctx: typer.Context,
    profile: str = typer.Option(
        "default",
        "--profile",
        "-P",
        help="Store profile name (selects config and token files).",
        envvar="MAGENTO_PROFILE",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Config directory (default: ~/.config/magento-cli).",
        envvar="MAGENTO_CLI_CONFIG_DIR",
    ),
    data_dir: Path | None = typer.Option(
        None,
        "--data-dir",
        help="Data directory for tokens (default: ~/.local/share/magento-cli).",
        envvar="MAGENTO_CLI_DATA_DIR",
    ),
) -> None:
    """Magento REST API command-line interface."""
    _configure_logging(verbose)
    ctx.obj = CLIConfig(
        profile=profile,
        verbose=verbose,
        config_dir=config_dir or _default_config_dir(),
        data_dir=data_dir or _default_data_dir(),
    )
