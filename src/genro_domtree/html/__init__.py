# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML elements - HtmlNode, HtmlDocument, tag factories and reference ids."""

from .attributes import ATTRIBUTE_NAMES, BOOLEAN_ATTRS
from .document import HtmlDocument
from .element import RAW_ATTRIBUTE, VOID_TAGS, HtmlNode
from .refs import HtmlRef, RefSequence
from .tags import ALL_TAGS, HtmlTags, class_format, echo, el, h, if_, raw, slot

__all__ = [
    'ALL_TAGS',
    'ATTRIBUTE_NAMES',
    'BOOLEAN_ATTRS',
    'RAW_ATTRIBUTE',
    'VOID_TAGS',
    'HtmlDocument',
    'HtmlNode',
    'HtmlRef',
    'HtmlTags',
    'RefSequence',
    'class_format',
    'echo',
    'el',
    'h',
    'if_',
    'raw',
    'slot',
]
