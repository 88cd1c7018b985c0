# toolbox/provider/resource.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from toolbox.errors import IllegalStateError
from toolbox.provider.errors import ProviderError
from toolbox.provider.lifecycle import PASS_THROUGH
from toolbox.runtime.concurrency import AtomicBoolean

logger = logging.getLogger(__name__)


class Resource(ABC):
    """
    A short-lived handle opened from a provider. Closing it is deterministic
    and may be driven by a `with` block.
    """

    @abstractmethod
    def open(self) -> None:
        """Acquire the underlying handle."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying handle. Calling it again has no effect."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """True between a successful open() and the end of close()."""

    def __enter__(self) -> "Resource":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AbstractResource(Resource):
    """
    Skeleton resource built on two atomic flags, `open` and `closing`.

    open() runs on_open() once; a failing on_open rolls `open` back. close()
    runs on_close() once; whether it succeeds or fails the resource ends up
    not open, and `closing` stays set, so later open() and close() calls are
    refused or ignored respectively.
    """

    def __init__(self) -> None:
        self._open = AtomicBoolean(False)
        self._closing = AtomicBoolean(False)

    @property
    def is_open(self) -> bool:
        return self._open.get()

    @property
    def is_closing(self) -> bool:
        return self._closing.get()

    def open(self) -> None:
        """
        Raises:
            IllegalStateError: If already open or closing has started
            OperationTimeoutError: If on_open exceeds its budget
            NotEnoughResourceError: If on_open cannot acquire what it needs
            ProviderError: If on_open fails for any other reason
        """
        self._check_closing()
        if not self._open.compare_and_set(False, True):
            raise IllegalStateError("Attempt to open already open resource object")
        try:
            self.on_open()
        except PASS_THROUGH:
            self._open.set(False)
            raise
        except Exception as e:
            self._open.set(False)
            raise ProviderError("Cannot open this resource") from e
        logger.debug("Opened %s", type(self).__name__)

    def close(self) -> None:
        """
        Raises:
            ProviderError: If on_close fails; the resource is left closed
        """
        if not self._closing.compare_and_set(False, True):
            return
        try:
            self.on_close()
        except ProviderError:
            raise
        except Exception as e:
            raise ProviderError("Cannot close this resource") from e
        finally:
            self._open.set(False)
        logger.debug("Closed %s", type(self).__name__)

    def _check_open(self) -> None:
        if not self._open.get():
            raise IllegalStateError("Attempt to use non-open resource object")

    def _check_closing(self) -> None:
        if self._closing.get():
            raise IllegalStateError("Illegal invocation; closing is already in progress")

    @abstractmethod
    def on_open(self) -> None:
        """Acquire the handle."""

    @abstractmethod
    def on_close(self) -> None:
        """Release the handle."""
