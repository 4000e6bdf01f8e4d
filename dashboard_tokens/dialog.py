"""Scoped document scroll lock for modal dialogs."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
import logging

_LOGGER = logging.getLogger(__name__)

LockListener = Callable[[bool], None]


@dataclass(slots=True)
class ScrollLock:
    """Reference counted document scroll lock.

    ``on_change`` is called with ``True`` when the first holder acquires the
    lock and with ``False`` when the last holder releases it.
    """

    on_change: LockListener | None = None
    _holders: int = 0

    @property
    def locked(self) -> bool:
        """Return ``True`` while at least one holder owns the lock."""

        return self._holders > 0

    @property
    def holders(self) -> int:
        """Return the number of active holders."""

        return self._holders

    def acquire(self) -> None:
        """Add a holder, locking the document on the first one."""

        self._holders += 1
        if self._holders == 1:
            _LOGGER.debug("Document scroll locked")
            self._notify(True)

    def release(self) -> None:
        """Remove a holder, unlocking the document after the last one."""

        if self._holders == 0:
            _LOGGER.debug("Ignoring scroll lock release without holders")
            return
        self._holders -= 1
        if self._holders == 0:
            _LOGGER.debug("Document scroll unlocked")
            self._notify(False)

    @contextmanager
    def hold(self) -> Iterator[ScrollLock]:
        """Hold the lock for the duration of the ``with`` block."""

        self.acquire()
        try:
            yield self
        finally:
            self.release()

    def _notify(self, locked: bool) -> None:
        if self.on_change is not None:
            self.on_change(locked)


class DialogOutcome(str, Enum):
    """How a confirm dialog was closed."""

    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    ESCAPED = "escaped"
    DISPOSED = "disposed"


@dataclass(slots=True)
class ConfirmDialog:
    """Visibility lifecycle of a confirm dialog tied to a ``ScrollLock``.

    The lock is acquired when the dialog opens and released exactly once on
    whichever exit path closes it.
    """

    lock: ScrollLock = field(default_factory=ScrollLock)
    loading: bool = False
    outcome: DialogOutcome | None = None
    _holding: bool = False

    @property
    def is_open(self) -> bool:
        """Return ``True`` while the dialog is visible."""

        return self._holding

    def open(self) -> None:
        """Show the dialog and lock document scrolling."""

        if self._holding:
            return
        self.outcome = None
        self.lock.acquire()
        self._holding = True

    def confirm(self) -> bool:
        """Close the dialog as confirmed; ignored while an action is loading."""

        return self._close(DialogOutcome.CONFIRMED)

    def cancel(self) -> bool:
        """Close the dialog as cancelled; ignored while an action is loading."""

        return self._close(DialogOutcome.CANCELLED)

    def escape(self) -> bool:
        """Handle the escape key; ignored while an action is loading."""

        return self._close(DialogOutcome.ESCAPED)

    def dispose(self) -> bool:
        """Release the dialog when its owner goes away, even while loading."""

        return self._close(DialogOutcome.DISPOSED)

    def _close(self, outcome: DialogOutcome) -> bool:
        if not self._holding:
            return False
        if self.loading and outcome is not DialogOutcome.DISPOSED:
            _LOGGER.debug("Ignoring %s while confirm dialog is loading", outcome.value)
            return False
        self._holding = False
        self.outcome = outcome
        self.lock.release()
        return True
