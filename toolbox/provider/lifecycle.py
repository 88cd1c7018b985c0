# toolbox/provider/lifecycle.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Activation and shutdown protocol shared by providers and provider factories.

Architecture:
- Two atomic flags, `active` and `shutdown_in_progress`, move by compare-and-set
- A third flag, `terminated`, records that a shutdown completed
- Subclasses supply the `on_activate` and `on_shutdown` hooks

Invariants:
1. activate() flips `active` false to true at most once per lifecycle
2. A failing on_activate rolls `active` back to false
3. on_shutdown runs at most once per successful shutdown
4. A failing on_shutdown clears `shutdown_in_progress` so shutdown may be retried
5. A terminated object never activates again

Error Handling:
- IllegalStateError, ValueError and ProviderError raised by hooks pass through
- Any other exception is wrapped in ProviderError
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple, TypeVar

from toolbox.errors import IllegalStateError
from toolbox.provider.errors import AbortOperationError, ProviderError
from toolbox.runtime.concurrency import AtomicBoolean, get_lock, with_lock
from toolbox.runtime.units import TimeUnit

logger = logging.getLogger(__name__)

L = TypeVar("L", bound="Lifecycle")

PASS_THROUGH = (IllegalStateError, ValueError, ProviderError)


def validate_grace(grace_time: int, unit: TimeUnit) -> None:
    """
    :raises ValueError: If grace_time is negative or unit is missing.
    """
    if grace_time is None or grace_time < 0:
        raise ValueError("Invalid grace time value; cannot be negative")
    if unit is None:
        raise ValueError("Invalid unit value; cannot be None")
    if not isinstance(unit, TimeUnit):
        raise ValueError("Invalid unit value; must be a TimeUnit")


def run_hook(hook: Callable[[], None], rollback: Callable[[], None], message: str) -> None:
    """
    Run a lifecycle hook; on failure run `rollback` and re-raise, wrapping
    unknown exception kinds in ProviderError.
    """
    try:
        hook()
    except PASS_THROUGH:
        rollback()
        raise
    except Exception as e:
        rollback()
        raise ProviderError(f"{message}: {e}") from e


class Lifecycle(ABC):
    """
    Base for objects with an explicit activate/shutdown lifecycle.

    Subclasses set the `_kind` label used in messages and implement the two
    hooks. Both public transitions return the instance they were called on.
    """

    _kind = "object"

    def __init__(self) -> None:
        self._active = AtomicBoolean(False)
        self._shutdown_in_progress = AtomicBoolean(False)
        self._terminated = AtomicBoolean(False)
        self._transition_lock = get_lock()
        self._id = f"{type(self).__module__}.{type(self).__qualname__}"

    @property
    def id(self) -> str:
        return self._id

    @property
    def is_active(self) -> bool:
        return self._active.get()

    @property
    def is_shutdown_in_progress(self) -> bool:
        return self._shutdown_in_progress.get()

    @property
    def is_terminated(self) -> bool:
        return self._terminated.get()

    def activate(self: L) -> L:
        """
        Activate this object and run its on_activate hook.

        Raises:
            IllegalStateError: If already active, shutting down or terminated
            NotEnoughResourceError: If the hook cannot acquire what it needs
            ProviderError: If the hook fails for any other reason
        """
        with with_lock(self._transition_lock):
            self._check_shutdown_in_progress()
            if self._terminated.get():
                raise IllegalStateError(f"Attempt to activate a {self._kind} that was already shut down")
            if not self._active.compare_and_set(False, True):
                raise IllegalStateError(f"Attempt to activate already active {self._kind} object")

        def rollback() -> None:
            self._active.set(False)
            logger.exception("Activation of %s failed; rolled back", self._id)

        run_hook(self.on_activate, rollback, f"Cannot activate this {self._kind}")
        logger.debug("Activated %s", self._id)
        return self

    def shutdown(self: L, grace_time: int, unit: TimeUnit) -> L:
        """
        Shut this object down, giving on_shutdown `grace_time` units to finish.

        Raises:
            IllegalStateError: If not active
            ValueError: If grace_time is negative or unit is missing
            ProviderError: If the hook fails
        """
        with with_lock(self._transition_lock):
            self._check_active()
            validate_grace(grace_time, unit)
            if not self._shutdown_in_progress.compare_and_set(False, True):
                logger.warning("Skipped shutdown of %s; shutdown is already in progress", self._id)
                return self

        def rollback() -> None:
            self._shutdown_in_progress.set(False)
            logger.exception("Shutdown of %s failed; %s stays active", self._id, self._kind)

        logger.debug("Shutting down %s with grace time %d %s", self._id, grace_time, unit.name.lower())
        run_hook(lambda: self.on_shutdown(grace_time, unit), rollback, f"Cannot shutdown this {self._kind}")

        with with_lock(self._transition_lock):
            self._terminated.set(True)
            self._shutdown_in_progress.set(False)
            self._active.set(False)
        logger.debug("Shut down %s", self._id)
        return self

    def _check_active(self) -> None:
        if not self._active.get():
            raise IllegalStateError(f"Attempt to use non-active {self._kind} object")

    def _check_inactive(self) -> None:
        if self._active.get():
            raise IllegalStateError(f"Illegal invocation; this {self._kind} is already active")

    def _check_abort_operation(self) -> None:
        if not self._active.get():
            raise AbortOperationError(f"Aborting execution; this {self._kind} was deactivated")

    def _check_shutdown_in_progress(self) -> None:
        if self._shutdown_in_progress.get():
            raise IllegalStateError("Illegal invocation; shutdown is already in progress")

    @abstractmethod
    def on_activate(self) -> None:
        """Acquire whatever the object needs to serve requests."""

    @abstractmethod
    def on_shutdown(self, grace_time: int, unit: TimeUnit) -> None:
        """Release everything acquired, honoring the grace time."""


def grace_deadlines(grace_time: int, unit: TimeUnit, now: Optional[float] = None) -> Tuple[float, float]:
    """
    Monotonic deadlines for an orderly shutdown: forced termination should
    start at the first, a hard kill at the second (twice the grace time).

    :param now: Current monotonic time in seconds; read from the clock if omitted.
    """
    validate_grace(grace_time, unit)
    start = time.monotonic() if now is None else now
    budget = unit.to_seconds(grace_time)
    return start + budget, start + 2 * budget
