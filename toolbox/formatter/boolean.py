# toolbox/formatter/boolean.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Optional

TRUE_TOKENS = frozenset({"true", "yes", "on"})
FALSE_TOKENS = frozenset({"false", "no", "off"})


def parse_boolean(value: Optional[str]) -> Optional[bool]:
    """
    Strict parse: True or False for a recognized token, None otherwise.
    """
    if value is None:
        return None
    token = value.strip().lower()
    if token in TRUE_TOKENS:
        return True
    if token in FALSE_TOKENS:
        return False
    return None


def to_boolean(value: Optional[str]) -> Optional[bool]:
    """
    Lenient parse: None stays None, unrecognized strings are False.
    """
    if value is None:
        return None
    return parse_boolean(value) is True
