# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Node - base class of every DomTree node.

A Node owns an ordered list of children and renders them into a single
string. Each child is classified into a :class:`ChildKind` and rendered
by the rule for that kind:

    ============== ================================= =======================
    Kind           Payload                           Rendered as
    ============== ================================= =======================
    ELEMENT        a Node                            its own render()
    SAFE           SafeString                        verbatim
    TEXT           str                               escaped
    NUMERIC        int / float (not bool)            str(), not escaped
    STRINGABLE     object with its own __str__       str(), escaped
    THUNK          callable                          called with the node,
                                                     result re-classified
    MAPPER         ArrayMap                          its own render()
    EMPTY          None                              nothing
    UNSUPPORTED    bool, list, dict, bare object     nothing (or raises)
    ============== ================================= =======================

Children are joined with no separator.

Example:
    >>> node = Node(['Tom', ' & ', SafeString('<b>Jerry</b>'), 42])
    >>> node.render()
    'Tom &amp; <b>Jerry</b>42'
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

from .exceptions import UnsupportedChildError
from .markup import SafeString, escape_html
from .utils import call_thunk

if TYPE_CHECKING:
    from .nodes.mapping import ArrayMapNode

logger = logging.getLogger(__name__)


class ChildKind(Enum):
    """The closed set of child variants a node can hold."""

    ELEMENT = 'element'
    SAFE = 'safe'
    TEXT = 'text'
    NUMERIC = 'numeric'
    STRINGABLE = 'stringable'
    THUNK = 'thunk'
    MAPPER = 'mapper'
    EMPTY = 'empty'
    UNSUPPORTED = 'unsupported'


_CONTAINER_TYPES = (list, tuple, dict, set, frozenset)


def is_thunk(value: Any) -> bool:
    """True if value is a deferred callable rather than a node or a class."""
    from .nodes.mapping import ArrayMap

    if isinstance(value, (Node, ArrayMap, type)):
        return False
    return callable(value)


def classify_child(child: Any) -> ChildKind:
    """Return the ChildKind of a child value.

    The order of the checks matters: Node instances are callable,
    and bool is a subclass of int.
    """
    from .nodes.mapping import ArrayMap

    if child is None:
        return ChildKind.EMPTY
    if isinstance(child, Node):
        return ChildKind.ELEMENT
    if isinstance(child, SafeString):
        return ChildKind.SAFE
    if isinstance(child, bool):
        return ChildKind.UNSUPPORTED
    if isinstance(child, (int, float)):
        return ChildKind.NUMERIC
    if isinstance(child, str):
        return ChildKind.TEXT
    if isinstance(child, ArrayMap):
        return ChildKind.MAPPER
    if is_thunk(child):
        return ChildKind.THUNK
    if isinstance(child, _CONTAINER_TYPES):
        return ChildKind.UNSUPPORTED
    if type(child).__str__ is object.__str__:
        return ChildKind.UNSUPPORTED
    return ChildKind.STRINGABLE


class Node:
    """A node in a DomTree.

    Each node has:
    - parent: The node it was last appended to (None for a root)
    - children: Ordered list of child values of any ChildKind

    A bare Node renders its children and nothing else, which makes it
    usable as a fragment. Subclasses change how (or whether) children
    are rendered.

    Attributes:
        strict_children: If True, unsupported children raise
            UnsupportedChildError at render time instead of being dropped.
            The flag is read from the class of the node that owns the
            child, so a strict subclass does not make its descendants
            strict. Set ``Node.strict_children`` to check a whole tree.

    Example:
        >>> frag = Node()('Hello, ', HtmlNode('b', None, ['world']))
        >>> str(frag)
        'Hello, <b>world</b>'
    """

    __slots__ = ('_children', 'parent')

    strict_children: bool = False

    def __init__(self, children: Iterable[Any] | None = None) -> None:
        """Initialize a Node.

        Args:
            children: Optional initial children, appended in order.
        """
        self._children: list[Any] = []
        self.parent: Node | None = None
        if children:
            self.append_children(children)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(children={len(self._children)})"

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __call__(self, *children: Any) -> Node:
        """Append children with call syntax: ``node('a', other)``."""
        return self.append_children(children)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over children in insertion order."""
        return iter(self.children)

    # ==================== Children ====================

    @property
    def children(self) -> list[Any]:
        """A copy of the child list."""
        return list(self._children)

    def append_child(self, child: Any) -> Node:
        """Append a single child.

        None is ignored. A Node child gets its parent set to this node,
        replacing any previous parent.

        Returns:
            self, for chaining.
        """
        if child is None:
            return self
        if isinstance(child, Node):
            child.parent = self
        self._children.append(child)
        return self

    def append_children(self, children: Iterable[Any]) -> Node:
        """Append each child in order via append_child."""
        for child in children:
            self.append_child(child)
        return self

    def clear_children(self) -> Node:
        """Remove all children."""
        self._children = []
        return self

    def map(
        self,
        source: Iterable[Any] | None,
        transform: Callable[..., Any] | None = None,
    ) -> Node:
        """Append an ArrayMapNode rendering source through transform.

        Args:
            source: The iterable to render, walked again on every render.
            transform: Optional ``(value, key[, parent])`` callable
                producing the child for each item.

        Returns:
            self, for chaining.
        """
        from .nodes.mapping import ArrayMapNode

        mapper: ArrayMapNode = ArrayMapNode(source, transform)
        return self.append_child(mapper)

    # ==================== Hooks ====================

    def apply_hook(self, hook: Callable[[Node], Any] | None) -> Node:
        """Call hook with this node, for in-place configuration.

        Example:
            >>> HtmlNode('div').apply_hook(lambda n: n.set_attr('id', 'main'))
        """
        if hook is not None:
            hook(self)
        return self

    def apply_hook_to_children(self, hook: Callable[[Node], Any] | None) -> Node:
        """Call apply_hook(hook) on every Node child; other children are skipped."""
        if hook is None:
            return self
        for child in self.children:
            if isinstance(child, Node):
                child.apply_hook(hook)
        return self

    # ==================== Rendering ====================

    def render(self) -> str:
        """Render the node to a string."""
        return self._render_children(self._children)

    def _render_children(self, children: Iterable[Any]) -> str:
        """Render a sequence of children, joined with no separator."""
        return ''.join(self._render_child(child) for child in children)

    def _render_child(self, child: Any) -> str:
        """Render a single child according to its ChildKind."""
        kind = classify_child(child)
        if kind is ChildKind.THUNK:
            child = call_thunk(child, self)
            kind = classify_child(child)
            if kind is ChildKind.THUNK:
                # Only one level of deferral is resolved.
                logger.debug("Thunk returned another callable: %r", child)
                kind = ChildKind.UNSUPPORTED
        return self._render_value(kind, child)

    def _render_value(self, kind: ChildKind, value: Any) -> str:
        if kind is ChildKind.ELEMENT or kind is ChildKind.MAPPER:
            return value.render()
        if kind is ChildKind.SAFE or kind is ChildKind.NUMERIC:
            return str(value)
        if kind is ChildKind.TEXT or kind is ChildKind.STRINGABLE:
            return escape_html(value)
        if kind is ChildKind.EMPTY:
            return ''
        if kind is ChildKind.UNSUPPORTED:
            if self.strict_children:
                raise UnsupportedChildError(
                    f"Cannot render child of type {type(value).__name__}"
                )
            logger.debug("Dropping unsupported child %r", value)
            return ''
        raise AssertionError(f"Unhandled child kind: {kind}")
