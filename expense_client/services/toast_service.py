"""In-memory notification queue."""

import time
import uuid
from typing import Callable, List, Union

from expense_client.schemas.toast import Severity, Toast


class ToastQueue:
    """
    Ordered list of transient notifications.

    Toasts expire ``duration`` seconds after being added; expired entries
    are dropped whenever the queue is read.
    """

    def __init__(self, duration: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.clock = clock
        self._toasts: List[Toast] = []

    def add(self, message: str, severity: Union[Severity, str] = Severity.success) -> str:
        toast = Toast(
            id=str(uuid.uuid4()),
            message=message,
            severity=Severity(severity),
            expires_at=self.clock() + self.duration,
        )
        self._toasts = self._toasts + [toast]
        return toast.id

    def remove(self, toast_id: str) -> None:
        self._toasts = [t for t in self._toasts if t.id != toast_id]

    def prune(self) -> None:
        now = self.clock()
        self._toasts = [t for t in self._toasts if t.expires_at > now]

    def clear(self) -> None:
        self._toasts = []

    @property
    def toasts(self) -> List[Toast]:
        self.prune()
        return list(self._toasts)

    def __len__(self) -> int:
        return len(self.toasts)
