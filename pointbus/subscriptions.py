"""Registry of subscribers receiving points by destination."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from itertools import chain
from typing import Any

log = logging.getLogger(__name__)


class SubscriptionError(LookupError):
    """Raised when a subscription or receiver is not found."""


class Subscriptions:
    """Multicast and broadcast subscriptions keyed by receiver id.

    A sender is any object the caller uses to deliver points to a receiver,
    such as a ``queue.Queue``.
    """

    def __init__(self, parent: str) -> None:
        self.id = f"{parent}/Subscriptions"
        self._multicast: dict[str, dict[int, Any]] = {}
        self._broadcast: dict[int, Any] = {}

    def add_multicast(self, receiver_id: int, destination: str, sender: Any) -> None:
        """Subscribe ``receiver_id`` on ``destination`` through ``sender``."""
        self._multicast.setdefault(destination, {})[receiver_id] = sender

    def extend_multicast(self, receiver_id: int, destination: str) -> None:
        """Add ``destination`` for a receiver that already has a multicast subscription."""
        sender = next(
            (senders[receiver_id] for senders in self._multicast.values() if receiver_id in senders),
            None,
        )
        if sender is None:
            message = f"{self.id}.extend_multicast | Receiver '{receiver_id}' - not found in subscriptions"
            log.warning(message)
            raise SubscriptionError(message)
        self.add_multicast(receiver_id, destination, sender)

    def add_broadcast(self, receiver_id: int, sender: Any) -> None:
        """Subscribe ``receiver_id`` on every destination."""
        self._broadcast[receiver_id] = sender

    def iter(self, point_id: str) -> Iterator[tuple[int, Any]]:
        """Yield ``(receiver_id, sender)`` for multicast subscribers of ``point_id``, then broadcast ones."""
        multicast = self._multicast.get(point_id)
        if multicast is None:
            return iter(list(self._broadcast.items()))
        return iter(list(chain(multicast.items(), self._broadcast.items())))

    def remove(self, receiver_id: int, point_id: str) -> None:
        """Remove the subscription of ``receiver_id`` on ``point_id``."""
        senders = self._multicast.get(point_id)
        if senders is None:
            raise SubscriptionError(f"{self.id}.run | Subscription '{point_id}' - not found")
        if senders.pop(receiver_id, None) is None:
            raise SubscriptionError(
                f"{self.id}.run | Subscription '{point_id}', receiver '{receiver_id}' - not found"
            )

    def remove_all(self, receiver_id: int) -> None:
        """Remove every subscription of ``receiver_id``; raise if it had none."""
        changed = False
        messages = []
        for point_id, senders in self._multicast.items():
            if senders.pop(receiver_id, None) is not None:
                changed = True
            else:
                messages.append(
                    f"{self.id}.run | Multicast Subscription '{point_id}', receiver '{receiver_id}' - not found"
                )
        if self._broadcast.pop(receiver_id, None) is not None:
            changed = True
        else:
            messages.append(
                f"{self.id}.run | Broadcast Subscription by receiver '{receiver_id}' - not found"
            )
        if not changed:
            raise SubscriptionError("\n".join(messages))

    def exit(self) -> None:
        """Remove all subscriptions."""
        self._broadcast.clear()
        self._multicast.clear()

    def __repr__(self) -> str:
        return f"Subscriptions(id={self.id!r})"