# toolbox/provider/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from toolbox.errors import ToolboxError


class ProviderError(ToolboxError):
    """
    Raised when a provider, factory or resource operation fails. Wraps the
    underlying cause as __cause__ when there is one.
    """


class AbortOperationError(ProviderError):
    """
    Raised when the owning provider was deactivated while an operation was
    running.
    """


class NotEnoughResourceError(ProviderError):
    """
    Raised when a pool or quota is exhausted at activation or open time.
    """


class OperationTimeoutError(ProviderError):
    """
    Raised when a blocking operation exceeds its time budget.
    """
