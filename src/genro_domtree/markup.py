# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Escaping rule and the SafeString trust marker.

Every text path in a rendered tree goes through :func:`escape_html`.
The only ways around it are wrapping a string in :class:`SafeString`
or placing it under a :class:`~genro_domtree.nodes.RawNode`.

Example:
    >>> escape_html('<a href="x">Tom & Jerry</a>')
    '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&lt;/a&gt;'
    >>> str(safe('<b>bold</b>'))
    '<b>bold</b>'
"""

from __future__ import annotations

from html import escape as _escape
from typing import Any


def escape_html(value: Any) -> str:
    """Escape ``< > & " '`` in the string form of value.

    Args:
        value: Text (or anything convertible to text) to escape.

    Returns:
        The escaped string, with quotes converted as well so the
        result is safe both as element text and as an attribute value.
    """
    return _escape(str(value), quote=True)


class SafeString:
    """A string marked as pre-sanitized; rendered verbatim, never escaped.

    SafeString takes no part in the tree: it is only a payload that a node
    can hold among its children.

    Example:
        >>> str(SafeString("<br>"))
        '<br>'
    """

    __slots__ = ('_value',)

    def __init__(self, value: str = '') -> None:
        self._value = str(value)

    @property
    def value(self) -> str:
        """The wrapped string."""
        return self._value

    def __str__(self) -> str:
        return self._value

    def __html__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"SafeString({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeString):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((SafeString, self._value))


def safe(value: str) -> SafeString:
    """Shortcut for ``SafeString(value)``."""
    return SafeString(value)
