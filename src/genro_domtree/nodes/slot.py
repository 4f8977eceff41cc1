# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""SlotNode - lazily supplied content with a children fallback."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..node import Node


class SlotNode(Node):
    """A node rendering a supplier's result, or its children when unset.

    The supplier is called on every render (no memoization) and its result
    is converted with ``str()`` directly: it is trusted, not escaped. A
    supplier returning None renders as an empty string.

    Example:
        >>> slot = SlotNode(['fallback'])
        >>> str(slot)
        'fallback'
        >>> slot.supplier = lambda: HtmlNode('span', None, ['x'])
        >>> str(slot)
        '<span>x</span>'
    """

    __slots__ = ('supplier',)

    def __init__(
        self,
        children: Iterable[Any] | None = None,
        supplier: Callable[[], Any] | None = None,
    ) -> None:
        """Initialize a SlotNode.

        Args:
            children: Default content rendered when there is no supplier.
            supplier: Optional zero-argument callable producing the content.
        """
        self.supplier = supplier
        super().__init__(children)

    def render(self) -> str:
        if self.supplier is not None:
            result = self.supplier()
            return '' if result is None else str(result)
        return super().render()
