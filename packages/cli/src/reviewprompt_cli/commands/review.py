"""review command — pick an open review and print an AI review prompt."""

from __future__ import annotations

import click
from rich.console import Console
from rich.markup import escape

from reviewprompt_core.aggregator import find_review
from reviewprompt_core.errors import ReviewPromptError
from reviewprompt_core.models import Review
from reviewprompt_core.prompt import compose_prompt

console = Console()


def _select_review(reviews: list[Review]) -> Review:
    console.print("\nOpen reviews:")
    for review in reviews:
        console.print(f"  {escape(review.display)}", highlight=False)
    choices = [str(r.number) for r in reviews]
    selected = click.prompt("\nSelect a review", type=click.Choice(choices), show_choices=False)
    return find_review(reviews, int(selected))


@click.command("review")
@click.option("--remote", default=None, help="Git remote to inspect. Overrides config file (default: origin).")
@click.option(
    "--number",
    "-n",
    type=int,
    default=None,
    help="PR number / MR IID. Omit to choose interactively from the open reviews.",
)
@click.pass_context
def review_cmd(ctx, remote: str | None, number: int | None):
    """Build a code review prompt for an open pull/merge request.

    Detects GitHub or GitLab from the git remote, lists the open reviews,
    fetches the selected one's diff and prints a prompt ready to paste into
    an AI agent.

    \b
    Requirements:
      GitHub   GITHUB_TOKEN or `gh auth login`, and `gh` for diffs
      GitLab   `glab auth login`
    """
    from reviewprompt_cli.session import open_aggregator

    config = ctx.obj["config"]

    try:
        aggregator = open_aggregator(config, remote=remote)
        reviews = aggregator.list_reviews()
    except ReviewPromptError as e:
        raise click.ClickException(f"Error fetching reviews: {e}") from e

    if not reviews:
        console.print("[yellow]No open reviews found.[/yellow]")
        return

    if number is None:
        selected = _select_review(reviews)
    else:
        selected = find_review(reviews, number)
        if selected is None:
            raise click.UsageError(f"#{number} is not an open review on {aggregator.repo_path}.")

    try:
        diff = aggregator.fetch_diff(selected.number)
    except ReviewPromptError as e:
        raise click.ClickException(f"Error fetching the diff: {e}") from e

    prompt = compose_prompt(selected, diff, aggregator.platform_label)
    console.print("\n\n[green]--- Prompt for AI agent ---[/green]\n")
    click.echo(prompt)
    console.print("[green]--- End of prompt ---[/green]\n")
