# toolbox/serialization/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from toolbox.errors import ToolboxError


class SerializationError(ToolboxError):
    """
    Raised when an object graph cannot be deflated, inflated into the
    requested type, or cloned.
    """
