"""Transport observer contract.

Why Protocol:
- A structural contract (duck typing) with no rigid inheritance.
- Lets the logging observer, a no-op observer and test recorders be
  swapped without coupling the transport to a logging backend.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.events import TransportEvent


@runtime_checkable
class TransportObserver(Protocol):
    """Receives every event the transport emits.

    Design rules:
    - `notify` is synchronous and must not raise.
    - One call per event; the transport never batches.
    """

    def notify(self, event: TransportEvent) -> None:
        ...
