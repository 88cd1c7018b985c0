# toolbox/settings/properties.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Reader for the line-oriented `.properties` format.

Supported syntax:
- `key=value`, `key:value` and `key value` separators
- comment lines starting with `#` or `!`
- logical lines continued by an odd number of trailing backslashes
- escapes `\\t`, `\\n`, `\\r`, `\\f`, `\\uXXXX`; any other escaped
  character stands for itself
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Tuple, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from toolbox.settings.errors import BackingStoreError, InvalidSettingsError

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> List[Tuple[int, str]]:
    lines = text.splitlines()
    logical = []
    i = 0
    while i < len(lines):
        number = i + 1
        line = lines[i].lstrip(_WHITESPACE)
        i += 1
        if not line or line[0] in "#!":
            continue
        while _continues(line):
            line = line[:-1]
            if i >= len(lines):
                break
            line += lines[i].lstrip(_WHITESPACE)
            i += 1
        logical.append((number, line))
    return logical


def _split(line: str) -> Tuple[str, str]:
    idx = 0
    escaped = False
    while idx < len(line):
        c = line[idx]
        if escaped:
            escaped = False
        elif c == "\\":
            escaped = True
        elif c in _SEPARATORS or c in _WHITESPACE:
            break
        idx += 1
    key, rest = line[:idx], line[idx:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def unescape(value: str) -> str:
    """
    Resolve backslash escapes.

    :raises InvalidSettingsError: On a malformed `\\uXXXX` sequence.
    """
    out = []
    i = 0
    while i < len(value):
        c = value[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue
        if i >= len(value):
            break
        c = value[i]
        i += 1
        if c == "u":
            digits = value[i : i + 4]
            if len(digits) != 4 or not set(digits) <= _HEX_DIGITS:
                raise InvalidSettingsError("Malformed \\uxxxx encoding")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(c, c))
    return "".join(out)


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse properties text into a dict. Later keys overwrite earlier ones.

    :raises InvalidSettingsError: On malformed escapes or empty keys.
    """
    result: Dict[str, str] = {}
    for number, line in _logical_lines(text):
        raw_key, raw_value = _split(line)
        try:
            key = unescape(raw_key)
            value = unescape(raw_value)
        except InvalidSettingsError as e:
            raise InvalidSettingsError(f"Line {number}: {e}") from e
        if not key:
            raise InvalidSettingsError(f"Line {number}: empty property key")
        result[key] = value
    return result


def resolve_path(path: Union[str, os.PathLike]) -> Path:
    """
    Accept plain paths and `file:` URIs.
    """
    if isinstance(path, str) and path.startswith("file:"):
        parsed = urlparse(path)
        return Path(url2pathname(unquote(parsed.path)))
    return Path(path)


def load_properties(path: Union[str, os.PathLike]) -> Dict[str, str]:
    """
    Read and parse a UTF-8 properties file.

    :raises BackingStoreError: If the file cannot be read.
    :raises InvalidSettingsError: If the file content is malformed.
    """
    resolved = resolve_path(path)
    try:
        data = resolved.read_bytes()
    except OSError as e:
        raise BackingStoreError(f"Could not load [{path}]") from e
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidSettingsError(f"Could not decode [{path}] as UTF-8") from e
    return parse_properties(text)
