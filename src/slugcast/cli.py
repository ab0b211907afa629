"""CLI entry point for slugcast."""

import asyncio
import sys
from pathlib import Path
from typing import Annotated

import typer
from pydantic import SecretStr
from rich.console import Console
from rich.markup import escape

from slugcast import cli_config
from slugcast.agent import PodcastAgent
from slugcast.config.logging import setup_logging
from slugcast.config.manager import ConfigManager
from slugcast.config.schema import CloudflareCredentials, GlobalConfig
from slugcast.podcasts import AgentResult, PersistOutcome, ResultStatus
from slugcast.utils.errors import SlugcastError

app = typer.Typer(
    name="slugcast",
    help="Generate podcast URLs and announcements, and browse past podcasts",
    no_args_is_help=True,
)
app.add_typer(cli_config.app, name="config")
console = Console()

AccountIdOption = Annotated[
    str | None, typer.Option("--account-id", help="Cloudflare account ID")
]
DatabaseIdOption = Annotated[
    str | None, typer.Option("--database-id", help="Cloudflare D1 database ID")
]
ApiTokenOption = Annotated[
    str | None, typer.Option("--api-token", help="Cloudflare API token")
]
BaseUrlOption = Annotated[
    str | None,
    typer.Option("--base-url", "-b", help="Base URL the slug is appended to"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """slugcast - turn topics into podcast links."""
    try:
        level = ConfigManager().load_config().log_level
    except SlugcastError:
        level = None  # Reported by the command itself
    setup_logging(verbose=verbose, log_file=log_file, level=level)


def _load(
    account_id: str | None = None,
    database_id: str | None = None,
    api_token: str | None = None,
) -> tuple[GlobalConfig, CloudflareCredentials]:
    """Load configuration and resolve credentials, exiting on bad config."""
    try:
        manager = ConfigManager()
        config = manager.load_config()
        credentials = manager.resolve_credentials(
            CloudflareCredentials(
                account_id=SecretStr(account_id) if account_id else None,
                database_id=SecretStr(database_id) if database_id else None,
                api_token=SecretStr(api_token) if api_token else None,
            )
        )
    except SlugcastError as e:
        console.print(f"[red]✗[/red] Configuration error: {escape(str(e))}")
        sys.exit(1)
    return config, credentials


def _emit(result: AgentResult) -> None:
    """Print a result verbatim and exit non-zero if it describes a failure."""
    typer.echo(result.text)
    if not result.succeeded:
        sys.exit(1)


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from slugcast import __version__

    console.print(f"[bold cyan]slugcast[/bold cyan] v{__version__}")


@app.command("slug")
def slug_command(
    query: Annotated[str, typer.Argument(help="Topic to turn into a slug")],
) -> None:
    """Derive a URL slug from a topic, without calling any model.

    Examples:
        slugcast slug "artificial intelligence in healthcare"
    """
    config, _ = _load()
    typer.echo(PodcastAgent(config).slug(query))


@app.command("url")
def url_command(
    query: Annotated[str, typer.Argument(help="Topic to turn into a URL")],
    base_url: BaseUrlOption = None,
) -> None:
    """Derive a slug and join it onto the base URL.

    Examples:
        slugcast url "space exploration" --base-url https://my-worker.example.dev/
    """
    config, _ = _load()
    typer.echo(PodcastAgent(config).url(query, base_url))


@app.command("generate")
def generate_command(
    query: Annotated[str, typer.Argument(help='Podcast topic, e.g. "space exploration"')],
    base_url: BaseUrlOption = None,
    account_id: AccountIdOption = None,
    database_id: DatabaseIdOption = None,
    api_token: ApiTokenOption = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
) -> None:
    """Generate a podcast link and announcement.

    The podcast is saved to D1 when all three Cloudflare credentials are
    available (options, CLOUDFLARE_* environment variables or
    `slugcast config credentials`).

    Examples:
        slugcast generate "sustainable energy solutions"

        slugcast generate "shoes" --base-url https://my-worker.example.dev --json
    """
    config, credentials = _load(account_id, database_id, api_token)
    agent = PodcastAgent(config)

    try:
        result = asyncio.run(agent.generate(query, base_url, credentials))
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)

    if json_output:
        print(result.model_dump_json(indent=2))
        return

    typer.echo(result.text)
    if result.status == ResultStatus.ERROR:
        console.print("[dim]Announcement service unavailable; showing a plain message.[/dim]")
    if result.persist == PersistOutcome.PERSISTED:
        console.print("[dim]✓ Saved to podcast history[/dim]")


@app.command("list")
def list_command(
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Number of podcasts to show (1-1000)", min=1, max=1000),
    ] = None,
    account_id: AccountIdOption = None,
    database_id: DatabaseIdOption = None,
    api_token: ApiTokenOption = None,
) -> None:
    """List previously generated podcasts, most recent first."""
    config, credentials = _load(account_id, database_id, api_token)
    _emit(asyncio.run(PodcastAgent(config).list_podcasts(limit, credentials)))


@app.command("search")
def search_command(
    term: Annotated[str, typer.Argument(help="Text to look for in podcast topics")],
    account_id: AccountIdOption = None,
    database_id: DatabaseIdOption = None,
    api_token: ApiTokenOption = None,
) -> None:
    """Search previously generated podcasts by topic."""
    config, credentials = _load(account_id, database_id, api_token)
    _emit(asyncio.run(PodcastAgent(config).search(term, credentials)))


@app.command("recommend")
def recommend_command(
    preference: Annotated[
        str, typer.Argument(help='What you want to hear, e.g. "something about AI"')
    ],
    account_id: AccountIdOption = None,
    database_id: DatabaseIdOption = None,
    api_token: ApiTokenOption = None,
) -> None:
    """Recommend a previously generated podcast for your preference."""
    config, credentials = _load(account_id, database_id, api_token)
    _emit(asyncio.run(PodcastAgent(config).recommend(preference, credentials)))


if __name__ == "__main__":
    app()
