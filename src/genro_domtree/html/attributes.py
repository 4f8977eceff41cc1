# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Attribute setter table for HtmlNode.

Each name in :data:`ATTRIBUTE_NAMES` becomes a fluent setter method on
HtmlNode. The method name is the attribute name with ``-`` replaced by
``_``; Python keywords get a trailing underscore::

    'href'           -> node.href('/home')
    'accept-charset' -> node.accept_charset('utf-8')
    'class'          -> node.class_('box')
    'for'            -> node.for_('email')

Setters for boolean attributes default their value to True, so
``node.disabled()`` is the same as ``node.disabled(True)``.
"""

from __future__ import annotations

import keyword
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .element import HtmlNode


BOOLEAN_ATTRS = frozenset({
    'allowfullscreen', 'async', 'autofocus', 'autoplay', 'checked',
    'controls', 'default', 'defer', 'disabled', 'formnovalidate', 'hidden',
    'ismap', 'itemscope', 'loop', 'multiple', 'muted', 'nomodule',
    'novalidate', 'open', 'readonly', 'required', 'reversed', 'selected',
})

ATTRIBUTE_NAMES: tuple[str, ...] = (
    'accept', 'accept-charset', 'accesskey', 'action', 'align', 'alt',
    'async', 'autocapitalize', 'autocomplete', 'autofocus', 'autoplay',
    'bgcolor', 'border', 'buffered', 'capture', 'challenge', 'charset',
    'checked', 'cite', 'class', 'code', 'codebase', 'color', 'cols',
    'colspan', 'content', 'contenteditable', 'contextmenu', 'controls',
    'coords', 'crossorigin', 'csp', 'data', 'datetime', 'decoding',
    'default', 'defer', 'dir', 'dirname', 'disabled', 'download',
    'draggable', 'enctype', 'enterkeyhint', 'for', 'form', 'formaction',
    'formenctype', 'formmethod', 'formnovalidate', 'formtarget', 'headers',
    'height', 'hidden', 'high', 'href', 'hreflang', 'http-equiv', 'icon',
    'importance', 'integrity', 'intrinsicsize', 'inputmode', 'ismap',
    'itemprop', 'keytype', 'kind', 'label', 'lang', 'language', 'loading',
    'list', 'loop', 'low', 'manifest', 'max', 'maxlength', 'minlength',
    'media', 'method', 'min', 'multiple', 'muted', 'name', 'novalidate',
    'open', 'optimum', 'pattern', 'ping', 'placeholder', 'poster',
    'preload', 'radiogroup', 'readonly', 'referrerpolicy', 'rel',
    'required', 'reversed', 'rows', 'rowspan', 'sandbox', 'scope',
    'scoped', 'selected', 'shape', 'size', 'sizes', 'slot', 'span',
    'spellcheck', 'src', 'srcdoc', 'srclang', 'srcset', 'start', 'step',
    'style', 'summary', 'tabindex', 'target', 'title', 'translate', 'type',
    'usemap', 'value', 'width', 'wrap',
)


def setter_name(attr: str) -> str:
    """Method name for an attribute: 'http-equiv' -> 'http_equiv', 'for' -> 'for_'."""
    name = attr.replace('-', '_')
    if keyword.iskeyword(name):
        name += '_'
    return name


def attr_name(name: str) -> str:
    """Attribute name for a keyword argument: 'class_' -> 'class', 'data_id' -> 'data-id'."""
    return name.rstrip('_').replace('_', '-')


def _make_setter(attr: str) -> Callable[..., HtmlNode]:
    """Create the setter method for one attribute."""
    if attr in BOOLEAN_ATTRS:
        def setter(self: HtmlNode, value: Any = True) -> HtmlNode:
            return self.set_attr(attr, value)
    else:
        def setter(self: HtmlNode, value: Any) -> HtmlNode:
            return self.set_attr(attr, value)

    setter.__name__ = setter_name(attr)
    setter.__qualname__ = f"HtmlNode.{setter.__name__}"
    setter.__doc__ = f"Set the '{attr}' attribute."
    return setter


def attribute_setters(cls: type) -> type:
    """Class decorator installing one setter per ATTRIBUTE_NAMES entry.

    Methods already defined on the class are left alone.
    """
    for attr in ATTRIBUTE_NAMES:
        name = setter_name(attr)
        if name not in cls.__dict__:
            setattr(cls, name, _make_setter(attr))
    return cls
