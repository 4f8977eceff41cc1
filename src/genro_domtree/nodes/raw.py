# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""RawNode - concatenates children with no escaping and no evaluation."""

from __future__ import annotations

from ..node import Node


class RawNode(Node):
    """A node whose children are joined with plain ``str()``.

    Unlike Node, RawNode:
    - does not escape strings
    - does not call callables: a function child renders as its repr,
      e.g. ``<function <lambda> at 0x...>``
    - still renders Node children, because ``str(node)`` renders them

    Only put trusted or pre-escaped content under a RawNode.

    Example:
        >>> str(RawNode(['<div>', 'Hello World', '</div>']))
        '<div>Hello World</div>'
    """

    __slots__ = ()

    def render(self) -> str:
        return ''.join(str(child) for child in self._children)
