# toolbox/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class ToolboxError(Exception):
    """
    Base exception class for errors raised by the toolbox library.
    """


class IllegalStateError(ToolboxError, RuntimeError):
    """
    Raised when an operation is invoked while the target object is in a
    lifecycle state that does not allow it.
    """
