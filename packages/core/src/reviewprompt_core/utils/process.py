"""Thin wrapper around the external CLIs (git, gh, glab).

subprocess.run with capture_output drains stdout and stderr and waits for
the process before the exit status is inspected. Listing and diff calls set
no timeout: the external tools own their own network timeouts.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    args: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(args: list[str], cwd: str | None = None, timeout: float | None = None) -> CommandResult:
    """Run ``args`` and return its captured output.

    A missing executable is reported as exit status 127 and an expired
    ``timeout`` as 124, the statuses a shell and coreutils `timeout` use, so
    callers only need to check ``ok``. Without ``timeout`` the call blocks
    until the process exits.
    """
    logger.debug("Running: %s", " ".join(args))
    kwargs = {"timeout": timeout} if timeout is not None else {}
    try:
        completed = subprocess.run(args, capture_output=True, text=True, cwd=cwd, **kwargs)
    except FileNotFoundError as e:
        return CommandResult(args=args, returncode=127, stdout="", stderr=f"{args[0]}: {e.strerror or e}")
    except subprocess.TimeoutExpired:
        return CommandResult(args=args, returncode=124, stdout="", stderr=f"{args[0]}: timed out after {timeout}s")
    logger.debug("%s exited with status %d", args[0], completed.returncode)
    return CommandResult(
        args=args,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
