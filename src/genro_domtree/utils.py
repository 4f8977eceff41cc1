# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Helpers for invoking deferred callables."""

from __future__ import annotations

import inspect
from typing import Any, Callable


def _positional_capacity(func: Callable) -> int | None:
    """Number of positional arguments func accepts, None if unbounded.

    Callables without an introspectable signature (``str``, ``int`` and
    other builtins) are given a single argument.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
        ):
            count += 1
    return count


def call_thunk(func: Callable, *args: Any) -> Any:
    """Call func with as many of args as its signature accepts.

    Deferred values (conditions, attribute values, transforms) may be
    written as ``lambda: ...``, ``lambda node: ...`` or with more
    parameters; extra trailing arguments are simply not passed. Only a
    ``*args`` parameter receives all of them.

    Args:
        func: The callable to invoke.
        *args: Candidate positional arguments, most relevant first.

    Returns:
        Whatever func returns.

    Example:
        >>> call_thunk(lambda: 'x', 'ignored')
        'x'
        >>> call_thunk(lambda v, k: f'{k}={v}', 1, 'a')
        'a=1'
    """
    capacity = _positional_capacity(func)
    if capacity is None:
        return func(*args)
    return func(*args[:capacity])
