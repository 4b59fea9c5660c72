"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .constants import (
    DEFAULT_CLIENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RUNTIME_DIR,
    DEFAULT_SUDO,
    SAFE_PATH,
)

ENV_PREFIX = "NOTIFY_SEND_ALL_"


@dataclass
class Settings:
    """Knobs for locating sessions and launching the client.

    Every command-line argument belongs to notify-send, so overrides come
    from ``NOTIFY_SEND_ALL_*`` environment variables instead of flags.
    ``sudo`` must accept sudo's ``-v`` and ``-u USER --`` options.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    client: str = DEFAULT_CLIENT
    safe_path: str = SAFE_PATH
    runtime_dir: str = DEFAULT_RUNTIME_DIR
    sudo: str = DEFAULT_SUDO

    def __post_init__(self) -> None:
        self.log_level = (self.log_level or DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        self.client = (self.client or DEFAULT_CLIENT).strip() or DEFAULT_CLIENT
        self.safe_path = (self.safe_path or SAFE_PATH).strip() or SAFE_PATH
        self.runtime_dir = (self.runtime_dir or DEFAULT_RUNTIME_DIR).rstrip('/') or DEFAULT_RUNTIME_DIR
        self.sudo = (self.sudo or DEFAULT_SUDO).strip() or DEFAULT_SUDO

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(ENV_PREFIX + 'LOG_LEVEL', DEFAULT_LOG_LEVEL),
            client=env.get(ENV_PREFIX + 'CLIENT', DEFAULT_CLIENT),
            safe_path=env.get(ENV_PREFIX + 'SAFE_PATH', SAFE_PATH),
            runtime_dir=env.get(ENV_PREFIX + 'RUNTIME_DIR', DEFAULT_RUNTIME_DIR),
            sudo=env.get(ENV_PREFIX + 'SUDO', DEFAULT_SUDO),
        )
