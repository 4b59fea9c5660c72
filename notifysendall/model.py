"""Core data types for notification delivery."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Mode(enum.Enum):
    """Which users a run addresses."""

    ALL = "all"
    OTHERS = "others"
    SINGLE = "single"


@dataclass
class DeliveryResult:
    """Outcome of one notify-send invocation for one user."""

    username: str
    returncode: int
    bus_path: Optional[str] = None
    delivered: bool = False

    @property
    def ok(self) -> bool:
        return self.delivered and self.returncode == 0

    @classmethod
    def failed(cls, username: str, returncode: int = 1, bus_path: Optional[str] = None) -> "DeliveryResult":
        return cls(username=username, returncode=returncode, bus_path=bus_path, delivered=False)
