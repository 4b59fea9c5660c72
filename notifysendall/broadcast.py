"""Fan a notification out to every logged-in user."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, List, Optional, Sequence

from . import logger
from .config import Settings
from .delivery import deliver_to_user
from .model import DeliveryResult
from .sessions import logged_in_users

Deliver = Callable[..., DeliveryResult]


class Broadcaster:
    """Dispatch one delivery per user and wait for all of them."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        discover: Callable[[], List[str]] = logged_in_users,
        deliver: Deliver = deliver_to_user,
    ):
        self.settings = settings or Settings()
        self.discover = discover
        self.deliver = deliver

    def broadcast(self, client_args: Sequence[str], skip_user: Optional[str] = None) -> List[DeliveryResult]:
        """Deliver to everyone discovered, except ``skip_user``.

        Each user gets its own worker; there is no cap on width. Results come
        back in completion order. A failure for one user never stops the rest.
        """
        users = self.discover()
        if not users:
            logger.info("No logged-in users found; nothing to deliver")
            return []

        results: List[DeliveryResult] = []
        with ThreadPoolExecutor(max_workers=len(users)) as executor:
            future_to_user = {}
            for username in users:
                if username == skip_user:
                    logger.debug("Skipping invoking user %s", username)
                    continue
                future = executor.submit(self.deliver, username, list(client_args), self.settings)
                future_to_user[future] = username

            for future in as_completed(future_to_user):
                username = future_to_user[future]
                try:
                    results.append(future.result())
                except Exception as exc:
                    logger.error("Delivery to %s failed: %s", username, exc)
                    results.append(DeliveryResult.failed(username))

        failed = [r.username for r in results if not r.ok]
        if failed:
            logger.info("Delivery incomplete for: %s", ", ".join(sorted(failed)))
        return results

    def send_to(self, username: str, client_args: Sequence[str]) -> DeliveryResult:
        """Single-target delivery; discovery is bypassed."""
        return self.deliver(username, list(client_args), self.settings)
