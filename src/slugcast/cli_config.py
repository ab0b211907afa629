"""CLI commands for configuration and stored credentials.

This module provides the `slugcast config` subcommand group.
"""

import sys
from typing import Annotated

import typer
from pydantic import SecretStr
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slugcast.config.manager import ConfigManager
from slugcast.config.schema import CloudflareCredentials
from slugcast.utils.errors import SlugcastError

app = typer.Typer(
    name="config",
    help="Show and change slugcast configuration",
    no_args_is_help=True,
)
console = Console()


def _mask(secret: SecretStr | None) -> str:
    if secret is None or not secret.get_secret_value():
        return "[dim]not set[/dim]"
    value = secret.get_secret_value()
    return f"…{value[-4:]}" if len(value) > 8 else "****"


@app.command("show")
def show_config() -> None:
    """Display the current configuration."""
    try:
        manager = ConfigManager()
        config = manager.load_config()
        credentials = manager.resolve_credentials()

        console.print("\n[bold]slugcast Configuration[/bold]\n")

        table = Table(show_header=False, box=None)
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Config file", str(manager.config_file))
        table.add_row("Credentials file", str(manager.credentials_file))
        table.add_row("", "")
        table.add_row("Log level", config.log_level)
        table.add_row("Base URL", config.base_url)
        table.add_row("List limit", str(config.list_limit))
        table.add_row("Completion provider", config.completion.provider)
        table.add_row("Claude model", config.completion.claude_model)
        table.add_row("Workers AI model", config.completion.workers_ai_model)
        table.add_row("LLM slugs", "✓" if config.slug.use_llm else "✗")
        table.add_row("Descriptor mode", config.slug.descriptor_mode)
        table.add_row("Recommendation model", config.recommendation.model)
        table.add_row("", "")
        table.add_row("Account ID", _mask(credentials.account_id))
        table.add_row("Database ID", _mask(credentials.database_id))
        table.add_row("API token", _mask(credentials.api_token))

        console.print(table)

    except SlugcastError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}")
        sys.exit(1)


@app.command("set")
def set_config(
    key: Annotated[str, typer.Argument(help="Dotted config key, e.g. slug.use_llm")],
    value: Annotated[str, typer.Argument(help="New value")],
) -> None:
    """Set a configuration value.

    Examples:
        slugcast config set base_url https://my-worker.example.dev

        slugcast config set completion.provider workers-ai

        slugcast config set slug.descriptor_mode stable
    """
    try:
        manager = ConfigManager()
        manager.set_value(key, value)
        console.print(
            f"[green]✓[/green] Set [cyan]{escape(key)}[/cyan] = [yellow]{escape(value)}[/yellow]"
        )
    except SlugcastError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)


@app.command("credentials")
def store_credentials(
    account_id: Annotated[
        str | None, typer.Option("--account-id", help="Cloudflare account ID")
    ] = None,
    database_id: Annotated[
        str | None, typer.Option("--database-id", help="Cloudflare D1 database ID")
    ] = None,
    api_token: Annotated[
        str | None, typer.Option("--api-token", help="Cloudflare API token")
    ] = None,
) -> None:
    """Store Cloudflare credentials, encrypted.

    Values not given as options are prompted for; leaving a prompt empty
    keeps the stored value.
    """
    if account_id is None:
        account_id = typer.prompt("Account ID", default="", show_default=False)
    if database_id is None:
        database_id = typer.prompt("Database ID", default="", show_default=False)
    if api_token is None:
        api_token = typer.prompt("API token", default="", show_default=False, hide_input=True)

    try:
        manager = ConfigManager()
        manager.save_credentials(
            CloudflareCredentials(
                account_id=SecretStr(account_id) if account_id else None,
                database_id=SecretStr(database_id) if database_id else None,
                api_token=SecretStr(api_token) if api_token else None,
            )
        )
        console.print("[green]✓[/green] Credentials saved")
        console.print(f"[dim]  Encrypted in {manager.credentials_file}[/dim]")
    except SlugcastError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        sys.exit(1)


@app.command("clear-credentials")
def clear_credentials() -> None:
    """Delete stored Cloudflare credentials."""
    manager = ConfigManager()
    if manager.clear_credentials():
        console.print("[green]✓[/green] Stored credentials removed")
    else:
        console.print("[yellow]No stored credentials.[/yellow]")
