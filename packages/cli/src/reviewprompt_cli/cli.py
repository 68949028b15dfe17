"""CLI entry point for reviewprompt.

Commands:
  review   — select an open PR/MR and print an AI review prompt for it
  list     — show the open PRs/MRs of the current project
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from reviewprompt_cli.commands.list import list_cmd
from reviewprompt_cli.commands.review import review_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("reviewprompt"),
    prog_name="reviewprompt",
)
@click.option(
    "--config",
    "config_path",
    default=".reviewprompt.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="REVIEWPROMPT_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Log external commands and parsing details.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Turn an open GitHub PR or GitLab MR into an AI code review prompt."""
    from reviewprompt_core.config import load_config

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


main.add_command(review_cmd)
main.add_command(list_cmd)
