# toolbox/settings/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from toolbox.errors import ToolboxError


class SettingsError(ToolboxError):
    """
    Base class for failures while loading settings.
    """


class BackingStoreError(SettingsError):
    """
    Raised when the file backing a settings source cannot be reached or read.
    """


class InvalidSettingsError(SettingsError):
    """
    Raised when a settings source is readable but its content is malformed.
    """
