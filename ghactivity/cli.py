"""CLI entry point: ghactivity.

Subcommands:
    ghactivity fetch --date 15-03-2024              # report for $GITHUB_USER
    ghactivity fetch --date 15-03-2024 -u alice     # report for alice
    ghactivity serve --port 8000                    # HTTP API
"""

from __future__ import annotations

import asyncio
import sys

import click

from ghactivity.collector.aggregator import Aggregator
from ghactivity.collector.github_client import GitHubClient
from ghactivity.collector.models import Report
from ghactivity.core.config import Settings
from ghactivity.core.logging import setup_logging
from ghactivity.exceptions import ConfigError, InvalidDateFormat, InvalidLogin
from ghactivity.render import render_json


async def _fetch(
    settings: Settings, user: str, date: str
) -> tuple[Report, dict[str, str]]:
    async with GitHubClient(
        settings.github_token,
        base_url=settings.api_url,
        timeout=settings.http_timeout,
    ) as client:
        work = Aggregator(client).collect(user, date)
        if settings.deadline is not None:
            return await asyncio.wait_for(work, timeout=settings.deadline)
        return await work


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """ghactivity: what a GitHub user did on a given day."""
    setup_logging("DEBUG" if verbose else None)


@main.command()
@click.option("-d", "--date", "date", required=True, help="Day to report on (DD-MM-YYYY)")
@click.option("-u", "--user", default=None, help="GitHub login (default: $GITHUB_USER)")
@click.option("--detail", is_flag=True, help="Print per-facet status to stderr")
def fetch(date: str, user: str | None, detail: bool) -> None:
    """Print the activity report for one user and day as JSON."""
    settings = _load_settings()
    user = user or settings.github_user
    if not user:
        click.echo("Error: no user given; pass --user or set GITHUB_USER", err=True)
        sys.exit(2)

    try:
        report, facet_detail = asyncio.run(_fetch(settings, user, date))
    except (InvalidDateFormat, InvalidLogin) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except asyncio.TimeoutError:
        click.echo(f"Error: no report within {settings.deadline}s deadline", err=True)
        sys.exit(1)

    click.echo(render_json(report))
    if detail:
        for name, status in facet_detail.items():
            click.echo(f"  [{'+' if status == 'ok' else '!'}] {name}: {status}", err=True)


@main.command()
@click.option("--host", default="127.0.0.1", help="Bind address")
@click.option("--port", default=8000, type=int, help="Bind port")
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("ghactivity.api:create_app", factory=True, host=host, port=port)


if __name__ == "__main__":
    main()
