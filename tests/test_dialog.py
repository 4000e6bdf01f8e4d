"""Tests for the dialog scroll lock lifecycle."""

from __future__ import annotations

import pytest

from dashboard_tokens.dialog import ConfirmDialog, DialogOutcome, ScrollLock


def _recording_lock() -> tuple[ScrollLock, list[bool]]:
    """Return a lock recording its edge notifications."""

    events: list[bool] = []
    return ScrollLock(on_change=events.append), events


def test_lock_notifies_on_edges_only() -> None:
    """Nested holders only trigger the first lock and last unlock."""

    lock, events = _recording_lock()

    lock.acquire()
    lock.acquire()
    assert lock.holders == 2
    lock.release()
    assert lock.locked is True
    lock.release()

    assert events == [True, False]
    assert lock.locked is False


def test_release_without_holders_is_ignored() -> None:
    """Releasing an unheld lock does nothing."""

    lock, events = _recording_lock()

    lock.release()

    assert events == []
    assert lock.holders == 0


def test_hold_releases_on_error() -> None:
    """The context manager releases the lock when the block raises."""

    lock, events = _recording_lock()

    with pytest.raises(RuntimeError):
        with lock.hold():
            assert lock.locked
            raise RuntimeError("boom")

    assert events == [True, False]


@pytest.mark.parametrize(
    "close, outcome",
    [
        (ConfirmDialog.confirm, DialogOutcome.CONFIRMED),
        (ConfirmDialog.cancel, DialogOutcome.CANCELLED),
        (ConfirmDialog.escape, DialogOutcome.ESCAPED),
        (ConfirmDialog.dispose, DialogOutcome.DISPOSED),
    ],
)
def test_every_exit_path_releases_lock(close, outcome) -> None:
    """Each way out of an open dialog releases the lock."""

    lock, events = _recording_lock()
    dialog = ConfirmDialog(lock=lock)

    dialog.open()
    assert dialog.is_open
    assert close(dialog) is True

    assert not dialog.is_open
    assert dialog.outcome is outcome
    assert events == [True, False]


def test_release_is_idempotent() -> None:
    """Closing twice releases the lock once."""

    lock, events = _recording_lock()
    dialog = ConfirmDialog(lock=lock)

    dialog.open()
    dialog.open()
    assert lock.holders == 1
    assert dialog.cancel() is True
    assert dialog.dispose() is False

    assert events == [True, False]
    assert dialog.outcome is DialogOutcome.CANCELLED


@pytest.mark.parametrize(
    "close", [ConfirmDialog.confirm, ConfirmDialog.cancel, ConfirmDialog.escape]
)
def test_user_exits_ignored_while_loading(close) -> None:
    """Confirm, cancel and escape keep the dialog open while loading."""

    lock, events = _recording_lock()
    dialog = ConfirmDialog(lock=lock, loading=True)

    dialog.open()

    assert close(dialog) is False
    assert dialog.is_open
    assert dialog.outcome is None
    assert lock.holders == 1
    assert events == [True]


def test_exits_allowed_once_loading_finishes() -> None:
    """Clearing the loading flag re-enables the user exits."""

    dialog = ConfirmDialog(loading=True)
    dialog.open()
    assert dialog.confirm() is False

    dialog.loading = False

    assert dialog.confirm() is True
    assert dialog.outcome is DialogOutcome.CONFIRMED
    assert not dialog.lock.locked


def test_dispose_releases_lock_while_loading() -> None:
    """Disposal always releases the lock, even mid-action."""

    lock, events = _recording_lock()
    dialog = ConfirmDialog(lock=lock, loading=True)

    dialog.open()

    assert dialog.dispose() is True
    assert dialog.outcome is DialogOutcome.DISPOSED
    assert events == [True, False]


def test_two_dialogs_share_one_lock() -> None:
    """The page stays locked until the last dialog closes."""

    lock, events = _recording_lock()
    first = ConfirmDialog(lock=lock)
    second = ConfirmDialog(lock=lock)

    first.open()
    second.open()
    first.cancel()
    assert lock.locked
    second.cancel()

    assert events == [True, False]
