"""Fixed paths, names and text fragments shared across the package."""

from __future__ import annotations

from typing import Dict

from .model import Mode

HELP_FLAGS = ("-?", "--help")

FIELD_SEPARATOR = "\t"

DEFAULT_CLIENT = "notify-send"
DEFAULT_SUDO = "sudo"
DEFAULT_RUNTIME_DIR = "/run/user"
DEFAULT_LOG_LEVEL = "WARNING"

# PATH handed to the client; never inherited from the caller
SAFE_PATH = "/usr/local/bin:/usr/bin:/bin"

BUS_SOCKET_NAME = "bus"
BUS_ADDRESS_PREFIX = "unix:path="

PROGRAM_NAMES: Dict[Mode, str] = {
    Mode.ALL: "notify-send-all",
    Mode.OTHERS: "notify-send-others",
    Mode.SINGLE: "notify-send-to",
}

MODE_SUMMARIES: Dict[Mode, str] = {
    Mode.ALL: "Send a desktop notification to every user logged into a graphical session.",
    Mode.OTHERS: "Send a desktop notification to every graphical user except yourself.",
    Mode.SINGLE: "Send a desktop notification to one user's graphical session.",
}

CLIENT_OPTIONS_HELP = """\
Options are passed through verbatim to notify-send, for example:
  -u, --urgency=LEVEL        low, normal or critical
  -t, --expire-time=TIME     timeout in milliseconds
  -a, --app-name=APP_NAME    application name shown with the notification
  -i, --icon=ICON            icon filename or stock icon name
  -A, --action=NAME=Label    add a button; repeatable. The chosen NAME is
                             printed once the user clicks it.
  -w, --wait                 wait for the notification to be closed
  -?, --help                 show this help (first argument only)
"""
