# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag factories - one callable per HTML/SVG element, plus primitives.

Example:
    Building a fragment::

        from genro_domtree import h, if_

        page = h.html({'lang': 'en'})(
            h.head()(h.title(['Shop'])),
            h.body(class_='shop')(
                h.ul(class_='items').map(items, lambda item: h.li([item.name])),
                if_(lambda: not items)(h.p(['Nothing here'])),
            ),
        )
        str(page)

Every tag callable has the signature ``(first_arg=None, children=None, **attrs)``
and resolves first_arg like :meth:`HtmlNode.tag`. Keyword attributes are
applied afterwards (``class_='x'`` -> ``class``, ``data_id=1`` -> ``data-id``).
Python keywords are reached with a trailing underscore: ``h.del_()``.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from ..nodes import EchoNode, IfElseNode, RawNode, SlotNode
from .document import HtmlDocument
from .element import VOID_TAGS, HtmlNode

HTML_TAGS = frozenset({
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio', 'b', 'base',
    'bdi', 'bdo', 'blockquote', 'body', 'br', 'button', 'canvas', 'caption',
    'cite', 'code', 'col', 'colgroup', 'data', 'datalist', 'dd', 'del',
    'details', 'dfn', 'dialog', 'div', 'dl', 'dt', 'em', 'embed', 'fieldset',
    'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3', 'h4', 'h5',
    'h6', 'head', 'header', 'hgroup', 'hr', 'html', 'i', 'iframe', 'img',
    'input', 'ins', 'kbd', 'label', 'legend', 'li', 'link', 'main', 'map',
    'mark', 'meta', 'meter', 'nav', 'noscript', 'object', 'ol', 'optgroup',
    'option', 'output', 'p', 'param', 'picture', 'pre', 'progress', 'q', 'rp',
    'rt', 'ruby', 's', 'samp', 'script', 'section', 'select', 'small',
    'source', 'span', 'strong', 'style', 'sub', 'summary', 'sup', 'table',
    'tbody', 'td', 'template', 'textarea', 'tfoot', 'th', 'thead', 'time',
    'title', 'tr', 'track', 'u', 'ul', 'var', 'video', 'wbr',
})

SVG_TAGS = frozenset({
    'svg', 'circle', 'ellipse', 'line', 'polygon', 'polyline', 'rect', 'path',
    'text', 'tspan', 'g', 'defs', 'use', 'symbol', 'image', 'marker',
    'pattern', 'mask', 'stop', 'filter', 'animate', 'mpath', 'set',
})

ALL_TAGS = HTML_TAGS | SVG_TAGS

TagFactory = Callable[..., HtmlNode]


def el(
    tag_name: str,
    first_arg: Any = None,
    children: Iterable[Any] | None = None,
    is_void: bool | None = None,
    **attrs: Any,
) -> HtmlNode:
    """Create an element for any tag name.

    Args:
        tag_name: The element name.
        first_arg: See :meth:`HtmlNode.tag`.
        children: See :meth:`HtmlNode.tag`.
        is_void: Defaults to whether tag_name is an HTML void element.
        **attrs: Attributes set after resolution.
    """
    if is_void is None:
        is_void = tag_name in VOID_TAGS
    node = HtmlNode.tag(tag_name, first_arg, children, is_void)
    if attrs:
        node.set_attrs(**attrs)
    return node


def raw(*children: Any) -> RawNode:
    """RawNode of children, concatenated without escaping."""
    return RawNode(children)


def slot(
    supplier: Callable[[], Any] | None = None,
    children: Iterable[Any] | None = None,
) -> SlotNode:
    """SlotNode rendering supplier() or, without a supplier, children."""
    return SlotNode(children, supplier)


def if_(condition: Any) -> IfElseNode:
    """IfElseNode whose first branch is guarded by condition.

    Example:
        >>> if_(user.is_admin)('Admin').elseif(user.is_staff)('Staff').else_('Guest')
    """
    return IfElseNode(condition=condition)


def echo(*children: Any) -> EchoNode:
    """EchoNode capturing the output of callable children."""
    return EchoNode(children)


class HtmlTags:
    """Namespace of tag factories, one per known HTML/SVG tag.

    Usage:
        >>> h = HtmlTags()
        >>> str(h.div({'class': 'box'}, ['Hello']))
        '<div class="box">Hello</div>'
        >>> str(h.br())
        '<br>'

    Attributes:
        node_class: Class used for every element but <html>.
        document_class: Class used for <html>.
    """

    def __init__(
        self,
        node_class: type[HtmlNode] = HtmlNode,
        document_class: type[HtmlNode] = HtmlDocument,
        tags: frozenset[str] = ALL_TAGS,
    ) -> None:
        self.node_class = node_class
        self.document_class = document_class
        self.tags = tags
        self._factories: dict[str, TagFactory] = {}

    def __getattr__(self, name: str) -> TagFactory:
        """Return the factory for a tag.

        Args:
            name: Tag name; a trailing underscore is stripped (``del_``).

        Raises:
            AttributeError: If name is not a known tag.
        """
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

        tag_name = name.rstrip('_')
        if tag_name not in self.tags:
            raise AttributeError(f"'{tag_name}' is not a known HTML tag")

        factory = self._factories.get(tag_name)
        if factory is None:
            factory = self._factories[tag_name] = self._make_tag_method(tag_name)
        return factory

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | self.tags)

    def _make_tag_method(self, name: str) -> TagFactory:
        """Create the factory for a specific tag."""
        is_void = name in VOID_TAGS
        node_class = self.document_class if name == 'html' else self.node_class

        def tag_method(
            first_arg: Any = None,
            children: Iterable[Any] | None = None,
            **attrs: Any,
        ) -> HtmlNode:
            node = node_class.tag(name, first_arg, children, is_void)
            if attrs:
                node.set_attrs(**attrs)
            return node

        tag_method.__name__ = name
        tag_method.__doc__ = f"Create a <{name}> element."
        return tag_method


h = HtmlTags()


def class_format(template: str, *args: str | None) -> str:
    """Format template with args, or return '' when every arg is empty.

    Example:
        >>> class_format('btn-%s', 'primary')
        'btn-primary'
        >>> class_format('btn-%s', None)
        ''
    """
    params = tuple('' if arg is None else arg for arg in args)
    if not any(params):
        return ''
    return template % params
