# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlNode - an HTML element with a tag name, attributes and children.

Example:
    >>> div = HtmlNode('div', {'class': 'box'}, ['Hello'])
    >>> str(div)
    '<div class="box">Hello</div>'
    >>> str(HtmlNode('input', {'type': 'checkbox', 'checked': True}, is_void=True))
    '<input type="checkbox" checked>'

Attribute rendering rules, in insertion order:
    - the raw attribute ``'_'`` is emitted verbatim after a space
    - callable values are called with the element first
    - False on a boolean attribute (``disabled``, ``checked``...) is omitted
    - True, or any truthy value on a boolean attribute, gives a bare name
    - None is omitted
    - anything else renders as ``key="value"``, both escaped; False on a
      non-boolean attribute renders as ``"false"``
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from ..exceptions import InvalidTagError, VoidElementError
from ..markup import escape_html
from ..node import Node, is_thunk
from ..utils import call_thunk
from .attributes import BOOLEAN_ATTRS, attr_name, attribute_setters

RAW_ATTRIBUTE = '_'

VOID_TAGS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input', 'keygen',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

_SEQUENCE_TYPES = (list, tuple)


@attribute_setters
class HtmlNode(Node):
    """An HTML element node.

    Each element has:
    - tag_name: The element name, fixed at construction
    - attr: Ordered dict of attributes (values may be callables)
    - is_void: True for elements that cannot have children (br, img...)

    Besides set_attr()/get_attr(), every common HTML attribute has a
    fluent setter (see :mod:`genro_domtree.html.attributes`)::

        HtmlNode('a').href('/home').title('Home')('Go home')

    Attributes:
        BOOLEAN_ATTRS: Attribute names rendered bare when truthy.
        VOID_TAGS: Names of the HTML void elements.
    """

    __slots__ = ('tag_name', 'attr', 'is_void')

    BOOLEAN_ATTRS: frozenset[str] = BOOLEAN_ATTRS
    VOID_TAGS: frozenset[str] = VOID_TAGS

    def __init__(
        self,
        tag_name: str,
        attrs: Mapping[Any, Any] | None = None,
        children: Iterable[Any] | None = None,
        is_void: bool = False,
    ) -> None:
        """Initialize an HtmlNode.

        Args:
            tag_name: The element name. Must not be empty.
            attrs: Optional attributes, kept in insertion order.
            children: Optional initial children.
            is_void: If True, the element renders without a closing tag
                and refuses children.

        Raises:
            InvalidTagError: If tag_name is empty.
            VoidElementError: If is_void is True and children are given.
        """
        if not tag_name:
            raise InvalidTagError("An HtmlNode requires a tag name")
        self.tag_name = tag_name
        self.attr: dict[Any, Any] = dict(attrs) if attrs else {}
        self.is_void = is_void
        super().__init__(children)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.tag_name!r}, "
            f"attrs={list(self.attr)}, children={len(self._children)})"
        )

    @classmethod
    def tag(
        cls,
        tag_name: str,
        first_arg: Any = None,
        children: Iterable[Any] | None = None,
        is_void: bool = False,
    ) -> HtmlNode:
        """Create an element from a flexible first argument.

        first_arg is resolved as:
            - str: raw attribute string, emitted verbatim in the opening tag
            - list/tuple: the children (``children`` is ignored)
            - mapping: the attributes; a ``0`` key is promoted to the raw
              attribute string unless ``'_'`` is already set
            - None: no first argument, ``children`` are the children
            - anything else: the only child

        Args:
            tag_name: The element name.
            first_arg: Attributes, children or a single child (see above).
            children: Children, used unless first_arg is a list/tuple.
            is_void: Whether the element is void.

        Returns:
            A new element of this class.

        Example:
            >>> str(HtmlNode.tag('div', 'class="box" data-x="1"', ['Hi']))
            '<div class="box" data-x="1">Hi</div>'
            >>> str(HtmlNode.tag('p', ['a', 'b']))
            '<p>ab</p>'
        """
        child_list = list(children) if isinstance(children, _SEQUENCE_TYPES) else []

        if isinstance(first_arg, str):
            return cls(tag_name, {RAW_ATTRIBUTE: first_arg}, child_list, is_void)

        if isinstance(first_arg, _SEQUENCE_TYPES):
            return cls(tag_name, None, first_arg, is_void)

        if isinstance(first_arg, Mapping):
            attrs = dict(first_arg)
            if attrs.get(0) is not None and attrs.get(RAW_ATTRIBUTE) is None:
                attrs[RAW_ATTRIBUTE] = attrs.pop(0)
            return cls(tag_name, attrs, child_list, is_void)

        if first_arg is None:
            return cls(tag_name, None, child_list, is_void)

        return cls(tag_name, None, [first_arg], is_void)

    # ==================== Children ====================

    def append_child(self, child: Any) -> HtmlNode:
        """Append a child.

        Raises:
            VoidElementError: If this is a void element.
        """
        if child is None:
            return self
        if self.is_void:
            raise VoidElementError(
                f"Cannot append children to void element <{self.tag_name}>"
            )
        return super().append_child(child)

    # ==================== Attributes ====================

    def get_attr(self, key: Any = None, default: Any = None) -> Any:
        """Get an attribute value, or all attributes.

        Args:
            key: Attribute name. If None, returns the attribute dict.
            default: Value returned when the attribute is not set.
        """
        if key is None:
            return self.attr
        return self.attr.get(key, default)

    def set_attr(self, key: Any, value: Any) -> HtmlNode:
        """Set one attribute, replacing any previous value."""
        self.attr[key] = value
        return self

    def set_attrs(self, _attr: Mapping[Any, Any] | None = None, **kwargs: Any) -> HtmlNode:
        """Set several attributes.

        Keyword names are converted with ``attr_name``: ``class_='x'``
        sets ``class`` and ``data_id=1`` sets ``data-id``.

        Args:
            _attr: Dictionary of attributes to set as is.
            **kwargs: Additional attributes as keyword arguments.
        """
        if _attr:
            self.attr.update(_attr)
        for name, value in kwargs.items():
            self.attr[attr_name(name)] = value
        return self

    def id(self, value: Any) -> HtmlNode:
        """Set the 'id' attribute."""
        return self.set_attr('id', value)

    def classes(self, *args: Any) -> HtmlNode:
        """Replace the class attribute with the truthy classes in args.

        Each argument can be a class name, a list/tuple of names, or a
        mapping of name to condition. Names keep the position of their
        first appearance; a later condition for the same name wins.

        Example:
            >>> HtmlNode('div').classes('a', {'b': True, 'c': False}, 'd').get_attr('class')
            'a b d'
        """
        if not args:
            return self

        flags: dict[str, bool] = {}
        for arg in args:
            if isinstance(arg, str):
                flags[arg] = True
            elif isinstance(arg, Mapping):
                for key, value in arg.items():
                    if isinstance(key, int) and isinstance(value, str):
                        flags[value] = True
                    elif isinstance(key, str):
                        flags[key] = bool(value)
            elif isinstance(arg, _SEQUENCE_TYPES):
                for value in arg:
                    if isinstance(value, str):
                        flags[value] = True

        return self.set_attr('class', ' '.join(name for name, on in flags.items() if on))

    def _resolve(self, value: Any) -> Any:
        if is_thunk(value):
            return call_thunk(value, self)
        return value

    def attributes_to_string(self) -> str:
        """Render the attributes as they appear in the opening tag."""
        parts: list[str] = []
        for key, value in self.attr.items():
            if key == RAW_ATTRIBUTE:
                if value is not None:
                    parts.append(f" {value}")
                continue

            value = self._resolve(value)
            is_boolean = key in self.BOOLEAN_ATTRS

            if value is False and is_boolean:
                continue
            if value is True or (is_boolean and value):
                parts.append(f" {escape_html(key)}")
            elif value is not None:
                text = 'false' if value is False else value
                parts.append(f' {escape_html(key)}="{escape_html(text)}"')
        return ''.join(parts)

    # ==================== Rendering ====================

    def render(self) -> str:
        opening = f"<{self.tag_name}{self.attributes_to_string()}>"
        if self.is_void:
            return opening
        return f"{opening}{self._render_children(self._children)}</{self.tag_name}>"

    def to_dict(self) -> dict[str, Any]:
        """Structural snapshot of the element.

        Attribute callables are evaluated now; HtmlNode children are
        snapshotted recursively and other children are returned as is,
        without calling anything they hold.
        """
        return {
            'tag_name': self.tag_name,
            'attrs': {key: self._resolve(value) for key, value in self.attr.items()},
            'children': [
                child.to_dict() if isinstance(child, HtmlNode) else child
                for child in self._children
            ],
            'is_void': self.is_void,
        }
