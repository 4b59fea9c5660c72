"""Command-line entry points for notify-send-all, -others and -to."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional

from . import configure_logging, console, logger
from .broadcast import Broadcaster
from .config import Settings
from .constants import CLIENT_OPTIONS_HELP, HELP_FLAGS, MODE_SUMMARIES, PROGRAM_NAMES
from .model import Mode
from .privilege import PrivilegeError, ensure_privilege
from .sessions import invoking_user


def usage(mode: Mode) -> str:
    prog = PROGRAM_NAMES[mode]
    target = "<username> " if mode is Mode.SINGLE else ""
    lines = [
        f"Usage: {prog} {target}[options] <message>",
        "",
        MODE_SUMMARIES[mode],
        "",
    ]
    if mode is Mode.SINGLE:
        lines += [
            "The first argument must be the login name of the user to notify.",
            "",
        ]
    lines.append(CLIENT_OPTIONS_HELP)
    lines += [
        "Output from each user's notify-send is prefixed with the username and a tab.",
        "",
        "Example:",
        f"  {prog} {target}-A run=Run -A hide=Hide 'Backups finished'",
    ]
    if mode is Mode.SINGLE:
        lines.append("  andy\trun")
    else:
        lines += ["  andy\trun", "  circus\thide", "  hackerb9\trun"]
    return "\n".join(lines) + "\n"


def wants_help(argv: List[str]) -> bool:
    return not argv or argv[0] in HELP_FLAGS


def run(
    mode: Mode,
    argv: Optional[Iterable[str]] = None,
    settings: Optional[Settings] = None,
    broadcaster: Optional[Broadcaster] = None,
) -> int:
    """Execute one invocation and return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if wants_help(args):
        sys.stdout.write(usage(mode))
        return 0

    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    try:
        ensure_privilege(settings)
    except PrivilegeError as exc:
        console.print(f"[red]{PROGRAM_NAMES[mode]}: cannot elevate privileges:[/red] {exc}", highlight=False)
        return 1

    broadcaster = broadcaster or Broadcaster(settings)
    try:
        if mode is Mode.SINGLE:
            result = broadcaster.send_to(args[0], args[1:])
            return result.returncode

        skip_user = invoking_user() if mode is Mode.OTHERS else None
        results = broadcaster.broadcast(args, skip_user=skip_user)
        logger.debug("Attempted %d deliveries", len(results))
        # Partial delivery still counts as success
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted; terminated by user[/yellow]")
        return 130


def main_all(argv: Optional[Iterable[str]] = None) -> None:
    raise SystemExit(run(Mode.ALL, argv))


def main_others(argv: Optional[Iterable[str]] = None) -> None:
    raise SystemExit(run(Mode.OTHERS, argv))


def main_to(argv: Optional[Iterable[str]] = None) -> None:
    raise SystemExit(run(Mode.SINGLE, argv))
