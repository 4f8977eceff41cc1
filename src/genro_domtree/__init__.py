# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-DomTree - Server-side HTML tree building and rendering.

A lightweight, zero-dependency library: build a tree of nodes with a
fluent API, then render it to an escaped HTML string in one pass.

Example:
    >>> from genro_domtree import h
    >>> str(h.div({'class': 'box'}, ['Hello']))
    '<div class="box">Hello</div>'
"""

__version__ = "0.1.0"

from .exceptions import (
    DomTreeError,
    InvalidTagError,
    LockedBranchError,
    MapperChildError,
    UnsupportedChildError,
    VoidElementError,
)
from .html import (
    HtmlDocument,
    HtmlNode,
    HtmlRef,
    HtmlTags,
    RefSequence,
    class_format,
    echo,
    el,
    h,
    if_,
    raw,
    slot,
)
from .markup import SafeString, escape_html, safe
from .node import ChildKind, Node, classify_child
from .nodes import (
    ArrayMap,
    ArrayMapNode,
    EchoBuffer,
    EchoNode,
    IfElseNode,
    RawNode,
    SlotNode,
)

__all__ = [
    # Core classes
    "Node",
    "ChildKind",
    "classify_child",
    "SafeString",
    "safe",
    "escape_html",
    # Specialized nodes
    "RawNode",
    "SlotNode",
    "IfElseNode",
    "EchoNode",
    "EchoBuffer",
    "ArrayMap",
    "ArrayMapNode",
    # HTML
    "HtmlNode",
    "HtmlDocument",
    "HtmlRef",
    "RefSequence",
    "HtmlTags",
    "h",
    "el",
    "raw",
    "slot",
    "if_",
    "echo",
    "class_format",
    # Exceptions
    "DomTreeError",
    "InvalidTagError",
    "VoidElementError",
    "LockedBranchError",
    "MapperChildError",
    "UnsupportedChildError",
]
