"""Deliver one notification into one user's graphical session."""

from __future__ import annotations

import subprocess
import sys
import threading
from typing import IO, Iterable, List, Optional, Sequence

from . import logger
from .config import Settings
from .constants import FIELD_SEPARATOR
from .model import DeliveryResult
from .privilege import as_user
from .sessions import session_bus_address, session_bus_path

# Serialises whole lines across every user's relay threads
_output_lock = threading.Lock()


def emit_line(username: str, line: str, sink: IO[str]) -> None:
    """Write ``line`` to ``sink`` as ``<username><TAB><line>``."""
    text = line.rstrip('\r\n')
    with _output_lock:
        sink.write(f"{username}{FIELD_SEPARATOR}{text}\n")
        sink.flush()


def relay_lines(username: str, stream: Iterable[str], sink: IO[str]) -> None:
    for line in stream:
        emit_line(username, line, sink)


def bus_exists(settings: Settings, username: str, bus_path: str) -> bool:
    """Check the socket with the target user's own permissions."""
    result = subprocess.run(
        as_user(settings, username, ['test', '-e', bus_path]),
        capture_output=True,
        text=True,
    )
    return result.returncode == 0


def client_command(settings: Settings, username: str, bus_path: str, client_args: Sequence[str]) -> List[str]:
    """notify-send under ``username`` with a scrubbed environment."""
    return as_user(
        settings,
        username,
        [
            'env',
            '-i',
            f"PATH={settings.safe_path}",
            f"DBUS_SESSION_BUS_ADDRESS={session_bus_address(bus_path)}",
            settings.client,
            *client_args,
        ],
    )


def deliver_to_user(
    username: str,
    client_args: Sequence[str],
    settings: Optional[Settings] = None,
    stdout: Optional[IO[str]] = None,
    stderr: Optional[IO[str]] = None,
) -> DeliveryResult:
    """Run the notification client inside ``username``'s session.

    Every line the client prints is relayed with a ``<username><TAB>`` prefix,
    stdout to stdout and stderr to stderr. Problems are reported the same way
    and returned as a failed result; nothing here raises for a single user.
    """
    settings = settings or Settings()
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    try:
        bus_path = str(session_bus_path(username, settings.runtime_dir))
    except KeyError:
        emit_line(username, "ERROR: No such user", err)
        return DeliveryResult.failed(username)

    try:
        if not bus_exists(settings, username, bus_path):
            emit_line(username, f"ERROR: No such file {bus_path}", err)
            return DeliveryResult.failed(username, bus_path=bus_path)

        command = client_command(settings, username, bus_path, client_args)
        logger.debug("Delivering to %s: %s", username, command)
        # Undecodable bytes arrive as U+FFFD
        process = subprocess.Popen(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors='replace',
            bufsize=1,
        )
    except (FileNotFoundError, PermissionError) as exc:
        emit_line(username, f"ERROR: {exc}", err)
        return DeliveryResult.failed(username, returncode=127)

    with process:
        relays = [
            threading.Thread(target=relay_lines, args=(username, process.stdout, out), daemon=True),
            threading.Thread(target=relay_lines, args=(username, process.stderr, err), daemon=True),
        ]
        for relay in relays:
            relay.start()
        for relay in relays:
            relay.join()
        returncode = process.wait()

    logger.debug("%s exited %s for %s", settings.client, returncode, username)
    return DeliveryResult(username=username, returncode=returncode, bus_path=bus_path, delivered=True)
