"""Wire config, git remote and credentials into a ReviewAggregator.

Shared by every command that talks to the hosting platform. Lives in the CLI
package because it is the only place that knows about token resolution and
user-facing errors.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console

from reviewprompt_core.aggregator import ReviewAggregator, build_aggregator
from reviewprompt_core.config import forced_platform, host_markers
from reviewprompt_core.models import Platform
from reviewprompt_core.remote import classify_remote, read_remote_url

console = Console()
logger = logging.getLogger(__name__)

_DETECTED = {
    Platform.GITHUB: "GitHub platform detected. Fetching pull requests...",
    Platform.GITLAB: "GitLab platform detected. Fetching merge requests...",
}


def open_aggregator(config: dict, remote: str | None = None) -> ReviewAggregator:
    """Classify the project's remote and return the matching aggregator.

    Raises ReviewPromptError subclasses for remote/platform problems and
    click.UsageError when a GitHub token cannot be resolved.
    """
    from reviewprompt_cli.auth import resolve_github_token

    try:
        platform = forced_platform(config)
        hosts = host_markers(config)
    except ValueError as e:
        raise click.UsageError(str(e)) from e

    console.print("[cyan]Detecting platform...[/cyan]")
    url = read_remote_url(remote or config["remote"])
    context = classify_remote(url, hosts=hosts, platform=platform)
    logger.debug("Remote %s classified as %s (%s)", url, context.platform.key, context.repo_path)
    console.print(f"[cyan]{_DETECTED[context.platform]}[/cyan]")

    token = None
    if context.platform is Platform.GITHUB:
        token = resolve_github_token()
        if not token:
            raise click.UsageError("No GitHub token found. Set GITHUB_TOKEN or run `gh auth login` first.")

    return build_aggregator(context, token=token)
