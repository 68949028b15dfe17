"""list command — show open reviews without building a prompt."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from reviewprompt_core.errors import ReviewPromptError

console = Console()


@click.command("list")
@click.option("--remote", default=None, help="Git remote to inspect. Overrides config file (default: origin).")
@click.pass_context
def list_cmd(ctx, remote: str | None):
    """List the open pull/merge requests of the current project."""
    from reviewprompt_cli.session import open_aggregator

    try:
        aggregator = open_aggregator(ctx.obj["config"], remote=remote)
        reviews = aggregator.list_reviews()
    except ReviewPromptError as e:
        raise click.ClickException(f"Error fetching reviews: {e}") from e

    if not reviews:
        console.print("[yellow]No open reviews found.[/yellow]")
        return

    table = Table(title=f"Open reviews — {aggregator.repo_path}", show_header=True, header_style="bold cyan")
    table.add_column("#", style="bold", width=6)
    table.add_column("Title", max_width=60)
    table.add_column("Author", width=20)

    for r in reviews:
        table.add_row(f"#{r.number}", escape(r.title), escape(r.author_handle) or "[dim]-[/dim]")

    console.print(table)
