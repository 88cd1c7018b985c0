# toolbox/runtime/context.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from typing import Any, Dict, Hashable

_local = threading.local()


class ThreadInfo:
    """
    A per-thread key/value scratchpad. Each thread sees its own instance
    through current(); unbind() discards it.
    """

    def __init__(self) -> None:
        self._map: Dict[Hashable, Any] = {}

    @staticmethod
    def current() -> "ThreadInfo":
        """
        Return the calling thread's scratchpad, creating it on first use.
        """
        info = getattr(_local, "info", None)
        if info is None:
            info = ThreadInfo()
            _local.info = info
        return info

    @staticmethod
    def reset() -> "ThreadInfo":
        """
        Replace the calling thread's scratchpad with an empty one.
        """
        info = ThreadInfo()
        _local.info = info
        return info

    @staticmethod
    def unbind() -> None:
        """
        Drop the calling thread's scratchpad, if any.
        """
        _local.__dict__.pop("info", None)

    @staticmethod
    def is_bound() -> bool:
        return getattr(_local, "info", None) is not None

    def put(self, key: Hashable, value: Any) -> "ThreadInfo":
        self._map[key] = value
        return self

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._map.get(key, default)

    def remove(self, key: Hashable) -> Any:
        """Remove `key` and return its value, or None if it was not set."""
        return self._map.pop(key, None)

    def clear(self) -> "ThreadInfo":
        self._map.clear()
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)
