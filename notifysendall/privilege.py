"""Credential validation and impersonation through sudo."""

from __future__ import annotations

import os
import shutil
import subprocess
from typing import List, Sequence

from . import NotifySendAllError, logger
from .config import Settings


class PrivilegeError(NotifySendAllError):
    """sudo is missing or refused to validate the caller's credentials."""


def ensure_privilege(settings: Settings) -> None:
    """Validate sudo credentials once so later per-user commands run unprompted."""
    if os.geteuid() == 0:
        logger.debug("Running as root; skipping sudo validation")
        return

    if not shutil.which(settings.sudo):
        raise PrivilegeError(f"{settings.sudo} command not found")

    try:
        # Password prompt goes through /dev/tty, not the captured pipes
        result = subprocess.run(
            [settings.sudo, '-v'],
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise PrivilegeError(f"could not run {settings.sudo}: {exc}") from exc

    if result.returncode != 0:
        detail = (result.stderr or '').strip()
        logger.debug("%s -v exited %s: %s", settings.sudo, result.returncode, detail)
        raise PrivilegeError(detail or f"{settings.sudo} authentication failed")


def as_user(settings: Settings, username: str, command: Sequence[str]) -> List[str]:
    """Wrap ``command`` so it executes with ``username``'s identity."""
    return [settings.sudo, '-u', username, '--', *command]
