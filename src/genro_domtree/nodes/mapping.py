# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Collection mapping - render an iterable as a run of children.

Two flavours share one algorithm: walk ``source`` in order, turn each
``(value, key)`` pair into a child via ``transform`` (or use the value
as is), re-parent Node children onto the bound parent, and render the
children with the usual Node rules.

- :class:`ArrayMap` is a standalone, reusable child value.
- :class:`ArrayMapNode` is a Node (what ``Node.map()`` appends) that
  regenerates its children on every render and drops them afterwards.

Keys are the mapping keys for a Mapping source and the positions
(0, 1, ...) for any other iterable.

Note:
    ``source`` is walked again on every render. A generator or other
    single-pass iterator renders its items once; later renders are empty.
    Large sources are walked to the end synchronously.

Example:
    >>> str(ArrayMap([1, 2, 3], lambda n: SafeString(f'<{n}>')))
    '<1><2><3>'
    >>> ul = HtmlNode('ul').map(['a', 'b'], lambda v, i: HtmlNode('li', None, [v]))
    >>> str(ul)
    '<ul><li>a</li><li>b</li></ul>'
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Callable, Iterable

from ..exceptions import MapperChildError
from ..node import Node
from ..utils import call_thunk

logger = logging.getLogger(__name__)

Transform = Callable[..., Any]


def _iter_items(source: Iterable[Any]) -> Iterable[tuple[Any, Any]]:
    if isinstance(source, Mapping):
        return source.items()
    return enumerate(source)


def map_source(
    source: Iterable[Any] | None,
    transform: Transform | None,
    parent: Node | None,
) -> list[Any]:
    """Compute the children for source, re-parenting Node results.

    Args:
        source: The iterable to walk. None yields no children.
        transform: Optional callable invoked as ``transform(value, key, parent)``
            with as many of those arguments as it accepts.
        parent: The node generated Node children are attached to.

    Returns:
        The list of generated children, in source order.
    """
    if source is None:
        return []
    if isinstance(source, Iterator):
        logger.debug("Mapping a single-pass iterator: %r", source)

    children = []
    for key, value in _iter_items(source):
        child = value if transform is None else call_thunk(transform, value, key, parent)
        if isinstance(child, Node):
            child.parent = parent
        children.append(child)
    return children


class ArrayMap:
    """Reusable mapping of an iterable to rendered content.

    An ArrayMap is a child value, not a Node: it can be placed among the
    children of any node and rendered any number of times.

    Attributes:
        source: The iterable to render.
        transform: Optional ``(value, key[, parent])`` callable.
        parent: Node used as parent of generated Node children.
    """

    __slots__ = ('source', 'transform', 'parent')

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        transform: Transform | None = None,
        parent: Node | None = None,
    ) -> None:
        self.source = source
        self.transform = transform
        self.parent = parent

    def __repr__(self) -> str:
        return f"ArrayMap({self.source!r})"

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def set_parent(self, parent: Node | None) -> ArrayMap:
        """Bind generated Node children to parent."""
        self.parent = parent
        return self

    def render(self) -> str:
        children = map_source(self.source, self.transform, self.parent)
        shadow = Node()
        shadow._children.extend(children)
        return shadow.render()


class ArrayMapNode(Node):
    """One-shot mapping node: children exist only during render.

    Generated Node children are attached to this node's own parent, so
    they see the surrounding element rather than the mapper.

    Note:
        The generated children are stored on the node for the duration
        of render(). A tree holding an ArrayMapNode must be rendered by
        one caller at a time; concurrent renders of the same tree from
        several threads are not supported.

    Raises:
        MapperChildError: On any attempt to append children directly.
    """

    __slots__ = ('source', 'transform')

    def __init__(
        self,
        source: Iterable[Any] | None = None,
        transform: Transform | None = None,
    ) -> None:
        super().__init__()
        self.source = source
        self.transform = transform

    def __repr__(self) -> str:
        return f"ArrayMapNode({self.source!r})"

    def append_child(self, child: Any) -> ArrayMapNode:
        raise MapperChildError("Cannot append children directly to an ArrayMapNode")

    def render(self) -> str:
        try:
            self._children = map_source(self.source, self.transform, self.parent)
            return super().render()
        finally:
            self._children = []
