# toolbox/hints.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import typing
from typing import Any


def unwrap_optional(hint: Any) -> Any:
    """
    Return `X` for `Optional[X]`; any other hint is returned unchanged.
    """
    if typing.get_origin(hint) is typing.Union:
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return hint
