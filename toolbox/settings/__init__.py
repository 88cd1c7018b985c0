"""
Settings package: a string property bag, a properties-file reader and
descriptor driven injection of typed values into objects.
"""

from .descriptors import Long, Property, PropertyDescriptor, describe
from .errors import BackingStoreError, InvalidSettingsError, SettingsError
from .properties import load_properties, parse_properties
from .settings import DEFAULT_DELIMITERS, Settings, tokenize

__all__ = [
    "Long",
    "Property",
    "PropertyDescriptor",
    "describe",
    "BackingStoreError",
    "InvalidSettingsError",
    "SettingsError",
    "load_properties",
    "parse_properties",
    "DEFAULT_DELIMITERS",
    "Settings",
    "tokenize",
]
