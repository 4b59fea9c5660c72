"""Who is logged in, and where their session bus lives."""

from __future__ import annotations

import getpass
import os
import pwd
from pathlib import Path
from typing import List

import psutil

from . import logger
from .constants import BUS_ADDRESS_PREFIX, BUS_SOCKET_NAME, DEFAULT_RUNTIME_DIR


def logged_in_users() -> List[str]:
    """Return the unique, sorted usernames found in session accounting (utmp).

    A user with several terminals or seats is listed once.
    """
    names = {entry.name for entry in psutil.users() if entry.name}
    users = sorted(names)
    logger.debug("Logged-in users: %s", ", ".join(users) or "(none)")
    return users


def session_bus_path(username: str, runtime_dir: str = DEFAULT_RUNTIME_DIR) -> Path:
    """Path of ``username``'s session bus socket; raises KeyError for unknown users."""
    uid = pwd.getpwnam(username).pw_uid
    return Path(runtime_dir) / str(uid) / BUS_SOCKET_NAME


def session_bus_address(path: str) -> str:
    return f"{BUS_ADDRESS_PREFIX}{path}"


def invoking_user() -> str:
    """The human behind this run, even when started through sudo."""
    return os.environ.get('SUDO_USER') or getpass.getuser()
